"""상자 개봉 — 등급 가중 추첨 + 속성 생성 + 결과 재검증

확률 규칙:
- 상자에 실제로 존재하는 등급만 오름차순으로 나열
- k번째 등급 가중치 = BASE_ODD / 5^k, 합으로 정규화
- 특수 풀(specials)은 저장된 희귀도와 무관하게 SPECIAL 등급
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_DOWN, Decimal
from typing import Optional, Union

from .catalog import Catalog
from .constants import (
    BASE_ODD,
    MAX_SEED,
    MIN_SEED,
    ODD_DIVISOR,
    STATTRAK_ODD,
    WEAR_FACTOR,
)
from .errors import ForeignItem, NotAContainer
from .models import (
    RARITY_FOR_SOUNDS,
    RARITY_ORDER,
    CatalogItem,
    ItemInstance,
    Rarity,
)
from .rng import RandomSource, default_source, random_choice, random_float, random_int
from .validators import validate_seed, validate_stattrak, validate_wear, wear_bounds

logger = logging.getLogger(__name__)

WEAR_QUANTUM = Decimal(str(WEAR_FACTOR))

ContainerRef = Union[CatalogItem, int]


@dataclass(frozen=True)
class UnlockAttributes:
    seed: Optional[int] = None
    stattrak: Optional[int] = None
    wear: Optional[float] = None


@dataclass(frozen=True)
class UnlockResult:
    """개봉 결과. 서버 ↔ 클라이언트 교환 형태."""

    item_id: int
    rarity_for_sound_effect: Optional[str]
    special: bool
    attributes: UnlockAttributes = field(default_factory=UnlockAttributes)

    def to_instance(self) -> ItemInstance:
        """인벤토리에 넣을 ItemInstance로 변환."""
        return ItemInstance(
            item_id=self.item_id,
            seed=self.attributes.seed,
            stattrak=self.attributes.stattrak,
            wear=self.attributes.wear,
        )


def _resolve_container(container: ContainerRef, catalog: Catalog) -> CatalogItem:
    item = catalog.get_by_id(container) if isinstance(container, int) else container
    if not item.is_container:
        raise NotAContainer(item.id)
    return item


def group_container_contents(
    container: ContainerRef, catalog: Catalog
) -> dict[Rarity, list[CatalogItem]]:
    """상자 내용물을 등급별로 분류. specials는 전부 SPECIAL."""
    case = _resolve_container(container, catalog)
    groups: dict[Rarity, list[CatalogItem]] = {}
    for item_id in case.contents or ():
        item = catalog.get_by_id(item_id)
        if item.rarity is None:
            logger.warning(
                "Container %d content %d has no rarity, skipped", case.id, item_id
            )
            continue
        groups.setdefault(item.rarity, []).append(item)
    for item_id in case.specials or ():
        groups.setdefault(Rarity.SPECIAL, []).append(catalog.get_by_id(item_id))
    return groups


def list_container_contents(
    container: ContainerRef, catalog: Catalog, hide_specials: bool = False
) -> list[CatalogItem]:
    """표시용 내용물 목록. 희귀도 오름차순, 희귀도 없는 항목은 맨 앞."""
    case = _resolve_container(container, catalog)
    ids = list(case.contents or ())
    if not hide_specials:
        ids.extend(case.specials or ())
    items = [catalog.get_by_id(i) for i in ids]
    return sorted(
        items,
        key=lambda i: RARITY_ORDER.index(i.rarity) + 1 if i.rarity is not None else 0,
    )


def compute_rarity_odds(rarities: list[Rarity]) -> list[tuple[Rarity, float]]:
    """존재하는 등급 목록 → (등급, 정규화 확률) 오름차순.
    위치 k의 가중치 = BASE_ODD / 5^k.
    """
    present = [r for r in RARITY_ORDER if r in rarities]
    weights = [BASE_ODD / ODD_DIVISOR**index for index in range(len(present))]
    total = sum(weights)
    return [(rarity, weight / total) for rarity, weight in zip(present, weights)]


def rarity_odds(
    container: ContainerRef, catalog: Catalog
) -> list[tuple[Rarity, float]]:
    """상자의 등급별 당첨 확률."""
    return compute_rarity_odds(list(group_container_contents(container, catalog)))


def roll_rarity(odds: list[tuple[Rarity, float]], rng: RandomSource) -> Rarity:
    """누적 확률이 처음으로 roll 이상이 되는 등급.
    부동소수점 누적 오차로 어느 구간에도 안 걸리면 마지막 등급.
    """
    roll = rng.random()
    acc = 0.0
    for rarity, odd in odds:
        acc += odd
        if roll <= acc:
            return rarity
    return odds[-1][0]


def truncate_wear(value: float) -> float:
    """마모도를 소수점 6자리로 절삭 (반올림 아님).
    최단 10진 표현 문자열 기준으로 자른다.
    """
    return float(Decimal(repr(value)).quantize(WEAR_QUANTUM, rounding=ROUND_DOWN))


def generate_attributes(item: CatalogItem, rng: RandomSource) -> UnlockAttributes:
    """개봉 아이템 속성 생성. 각 속성은 독립 추첨 (seed → stattrak → wear 순)."""
    seed = random_int(rng, MIN_SEED, MAX_SEED) if item.has_seed else None

    stattrak = None
    if item.has_stattrak and rng.random() < STATTRAK_ODD:
        stattrak = 0

    wear = None
    if item.has_wear:
        low, high = wear_bounds(item)
        # 절삭 결과가 wear_min 아래로 내려가면 검증 실패하므로 보정
        wear = max(low, truncate_wear(random_float(rng, low, high)))

    return UnlockAttributes(seed=seed, stattrak=stattrak, wear=wear)


def unlock_container(
    container: ContainerRef,
    catalog: Catalog,
    rng: Optional[RandomSource] = None,
) -> UnlockResult:
    """상자 개봉.

    1. 등급별 분류 (specials → SPECIAL)
    2. 존재 등급 가중치 정규화 후 등급 추첨
    3. 등급 내 균등 추첨
    4. 속성 생성
    """
    if rng is None:
        rng = default_source()
    groups = group_container_contents(container, catalog)
    if not groups:
        raise NotAContainer(_resolve_container(container, catalog).id)

    odds = compute_rarity_odds(list(groups))
    rolled = roll_rarity(odds, rng)
    item = random_choice(rng, groups[rolled])
    attributes = generate_attributes(item, rng)

    logger.debug(
        "Unlocked item %d (rarity=%s, special=%s)",
        item.id,
        rolled.value,
        rolled is Rarity.SPECIAL,
    )
    return UnlockResult(
        item_id=item.id,
        rarity_for_sound_effect=RARITY_FOR_SOUNDS.get(item.rarity)
        if item.rarity is not None
        else None,
        special=rolled is Rarity.SPECIAL,
        attributes=attributes,
    )


def validate_unlocked_item(
    container: ContainerRef, result: UnlockResult, catalog: Catalog
) -> None:
    """클라이언트가 제출한 개봉 결과 재검증 (서버 권한).
    모든 오류를 그대로 전파한다.
    """
    case = _resolve_container(container, catalog)
    if result.item_id not in (case.contents or ()) and result.item_id not in (
        case.specials or ()
    ):
        raise ForeignItem(case.id, result.item_id)

    item = catalog.get_by_id(result.item_id)
    attributes = result.attributes
    if attributes.seed is not None:
        validate_seed(attributes.seed, item)
    if attributes.stattrak is not None:
        validate_stattrak(attributes.stattrak, item)
    if attributes.wear is not None:
        validate_wear(attributes.wear, item)
