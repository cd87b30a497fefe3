"""인벤토리 — 불변 값, 용량 + 장착 슬롯 규칙

모든 변경은 새 Inventory를 반환한다. 바뀌지 않은 ItemInstance는 참조 공유.
변화가 없는 호출(용량 초과, 잘못된 인덱스 등)은 자기 자신을 그대로 반환.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Optional

from .catalog import Catalog
from .constants import DEFAULT_INVENTORY_CAPACITY
from .models import CatalogItem, ItemInstance, ItemType, Team
from .validators import validate_instance

logger = logging.getLogger(__name__)


def _slot_field(team: Optional[Team]) -> str:
    """장착 슬롯 차원 → ItemInstance 필드명"""
    if team is None:
        return "equipped"
    if team is Team.CT:
        return "equipped_ct"
    return "equipped_t"


@dataclass(frozen=True)
class InventoryEntry:
    """get_all() 스냅샷 항목"""

    index: int
    instance: ItemInstance
    item: CatalogItem


@dataclass(frozen=True)
class Inventory:
    catalog: Catalog = field(compare=False, hash=False, repr=False)
    items: tuple[ItemInstance, ...] = ()
    capacity: int = DEFAULT_INVENTORY_CAPACITY

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        if self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")

    @classmethod
    def empty(
        cls, catalog: Catalog, capacity: int = DEFAULT_INVENTORY_CAPACITY
    ) -> Inventory:
        return cls(catalog=catalog, capacity=capacity)

    @classmethod
    def from_instances(
        cls,
        catalog: Catalog,
        instances: Iterable[ItemInstance],
        capacity: int = DEFAULT_INVENTORY_CAPACITY,
    ) -> Inventory:
        """저장된 목록에서 복원. 이미 검증된 데이터로 간주."""
        return cls(catalog=catalog, items=tuple(instances), capacity=capacity)

    def _with_items(self, items: tuple[ItemInstance, ...]) -> Inventory:
        return replace(self, items=items)

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self.items)

    def can_add(self) -> bool:
        return len(self.items) < self.capacity

    def add(self, instance: ItemInstance) -> Inventory:
        """맨 앞에 추가. 장착 플래그는 항상 해제.
        용량 초과면 검증 없이 그대로 반환 (오류 아님).
        검증 실패는 첫 오류를 전파.
        """
        if not self.can_add():
            logger.debug("Inventory full (%d), add ignored", self.capacity)
            return self

        item = self.catalog.get_by_id(instance.item_id)
        validate_instance(instance, item, self.catalog)

        added = replace(instance, equipped=None, equipped_ct=None, equipped_t=None)
        return self._with_items((added,) + self.items)

    def remove(self, index: int) -> Inventory:
        if not self._in_bounds(index):
            return self
        return self._with_items(self.items[:index] + self.items[index + 1 :])

    def equip(self, index: int, team: Optional[Team] = None) -> Inventory:
        """장착.

        무시 조건:
        - 인덱스 범위 밖
        - 이미 해당 슬롯에 장착됨
        - 팀 전용 아이템인데 team 미지정 / 팀 무관 아이템에 team 지정
        - 아이템이 허용하지 않는 팀

        같은 타입(무기는 같은 모델)의 다른 아이템은 같은 슬롯 차원에서 해제.
        """
        if not self._in_bounds(index):
            return self
        target = self.items[index]
        if target.is_equipped_in(team):
            return self

        item = self.catalog.get_by_id(target.item_id)
        if team is None and item.teams is not None:
            return self
        if team is not None and (item.teams is None or team not in item.teams):
            return self

        slot = _slot_field(team)
        items: list[ItemInstance] = []
        for current_index, current in enumerate(self.items):
            if current_index == index:
                items.append(replace(current, **{slot: True}))
            elif getattr(current, slot) and self._shares_slot(item, current):
                items.append(replace(current, **{slot: None}))
            else:
                items.append(current)

        logger.debug("Equipped item %d at %d (team=%s)", item.id, index, team)
        return self._with_items(tuple(items))

    def _shares_slot(self, item: CatalogItem, other: ItemInstance) -> bool:
        """같은 타입이면 슬롯 공유. 무기는 모델까지 같아야 공유."""
        other_item = self.catalog.get_by_id(other.item_id)
        if other_item.type is not item.type:
            return False
        return item.type is not ItemType.WEAPON or other_item.model == item.model

    def unequip(self, index: int, team: Optional[Team] = None) -> Inventory:
        """해당 아이템의 요청 슬롯만 해제. 다른 아이템에 영향 없음."""
        if not self._in_bounds(index):
            return self
        target = self.items[index]
        if not target.is_equipped_in(team):
            return self
        items = list(self.items)
        items[index] = replace(target, **{_slot_field(team): None})
        return self._with_items(tuple(items))

    def get_all(self) -> list[InventoryEntry]:
        """표시용 스냅샷 (지연 평가 아님)."""
        return [
            InventoryEntry(
                index=index,
                instance=instance,
                item=self.catalog.get_by_id(instance.item_id),
            )
            for index, instance in enumerate(self.items)
        ]

    def get(self, index: int) -> Optional[ItemInstance]:
        return self.items[index] if self._in_bounds(index) else None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ItemInstance]:
        return iter(self.items)
