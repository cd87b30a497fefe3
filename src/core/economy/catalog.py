"""아이템 카탈로그 — id → CatalogItem 조회 테이블 + JSON 로드"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from .errors import NotFound
from .models import CatalogItem, ItemType, Team, parse_rarity

logger = logging.getLogger(__name__)


class Catalog:
    """
    아이템 카탈로그.
    생성 후 읽기 전용. 각 컴포넌트에 명시적으로 전달한다.
    """

    def __init__(self, items: Iterable[CatalogItem] = ()) -> None:
        self._items: dict[int, CatalogItem] = {}
        for item in items:
            if item.id in self._items:
                raise ValueError(f"Duplicate catalog id: {item.id}")
            self._items[item.id] = item

    @classmethod
    def load_from_json(cls, path: str | Path) -> Catalog:
        """카탈로그 JSON 로드.

        JSON 배열의 각 객체를 CatalogItem으로 변환.
        rarity는 색상 코드 또는 등급명, teams는 ["t", "ct"] 형태.
        형식이 잘못된 항목은 경고 로그 후 건너뛴다.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict] = json.load(f)

        items: list[CatalogItem] = []
        for raw in raw_list:
            if not isinstance(raw, dict):
                logger.warning("Skipping non-object catalog entry: %r", raw)
                continue
            try:
                items.append(_item_from_raw(raw))
            except (KeyError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to load catalog item: %s: %s", raw.get("id", "?"), e
                )

        catalog = cls(items)
        logger.info("Loaded %d catalog items from %s", catalog.count(), path)
        return catalog

    def get_by_id(self, item_id: int) -> CatalogItem:
        """O(1) 조회. 없으면 NotFound."""
        item = self._items.get(item_id)
        if item is None:
            raise NotFound(item_id)
        return item

    def get(self, item_id: int) -> Optional[CatalogItem]:
        """O(1) 조회. 없으면 None."""
        return self._items.get(item_id)

    def get_all(self) -> list[CatalogItem]:
        return list(self._items.values())

    def search_by_type(self, item_type: ItemType) -> list[CatalogItem]:
        return [i for i in self._items.values() if i.type is item_type]

    def check_references(self) -> list[int]:
        """상자가 참조하는 id 중 카탈로그에 없는 것 반환.
        참조 무결성은 로더 책임. 코어는 재검증하지 않는다.
        """
        missing: list[int] = []
        for item in self._items.values():
            for ref in (item.contents or ()) + (item.specials or ()):
                if ref not in self._items:
                    missing.append(ref)
        return missing

    def count(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)


def _item_from_raw(raw: dict) -> CatalogItem:
    rarity = raw.get("rarity")
    teams = raw.get("teams")
    wear_min = raw.get("wearMin")
    wear_max = raw.get("wearMax")
    contents = raw.get("contents")
    specials = raw.get("specials")
    return CatalogItem(
        id=int(raw["id"]),
        type=ItemType(raw["type"]),
        name=raw.get("name", ""),
        rarity=parse_rarity(rarity) if rarity is not None else None,
        teams=tuple(Team(t) for t in teams) if teams is not None else None,
        model=raw.get("model"),
        wear_min=float(wear_min) if wear_min is not None else None,
        wear_max=float(wear_max) if wear_max is not None else None,
        contents=tuple(int(i) for i in contents) if contents is not None else None,
        specials=tuple(int(i) for i in specials) if specials is not None else None,
        image=raw.get("image", ""),
        local_image=int(raw.get("localImage", 0)),
    )
