"""속성 검증 — 순수 함수, 상태 없음

인벤토리 추가 시(임의 입력)와 상자 개봉 결과 재검증 시 동일하게 사용.
개봉 엔진이 생성하는 값은 여기서 거부되면 안 된다.
"""

import logging
from typing import Optional, Sequence

from .catalog import Catalog
from .constants import (
    MAX_SEED,
    MAX_STATTRAK,
    MAX_STICKER_WEAR,
    MAX_STICKERS,
    MAX_WEAR,
    MIN_SEED,
    MIN_STATTRAK,
    MIN_STICKER_WEAR,
    MIN_WEAR,
    NAMETAG_RE,
)
from .errors import InvalidFormat, OutOfRange, Unsupported
from .models import CatalogItem, ItemInstance, ItemType

logger = logging.getLogger(__name__)


def wear_bounds(item: CatalogItem) -> tuple[float, float]:
    """아이템 마모도 범위. 미지정 시 전역 [0, 1]."""
    low = item.wear_min if item.wear_min is not None else MIN_WEAR
    high = item.wear_max if item.wear_max is not None else MAX_WEAR
    return low, high


def validate_wear(value: float, item: CatalogItem) -> None:
    if not item.has_wear:
        raise Unsupported("wear", item.type.value)
    low, high = wear_bounds(item)
    if not low <= value <= high:
        raise OutOfRange("wear", value, low, high)


def _require_int(attribute: str, value: object) -> None:
    """bool은 int 하위 타입이지만 정수 속성으로 인정하지 않음"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormat(attribute, value)


def validate_seed(value: int, item: CatalogItem) -> None:
    if not item.has_seed:
        raise Unsupported("seed", item.type.value)
    _require_int("seed", value)
    if not MIN_SEED <= value <= MAX_SEED:
        raise OutOfRange("seed", value, MIN_SEED, MAX_SEED)


def validate_stattrak(value: int, item: CatalogItem) -> None:
    if not item.has_stattrak:
        raise Unsupported("stattrak", item.type.value)
    _require_int("stattrak", value)
    if not MIN_STATTRAK <= value <= MAX_STATTRAK:
        raise OutOfRange("stattrak", value, MIN_STATTRAK, MAX_STATTRAK)


def validate_nametag(value: str, item: CatalogItem) -> None:
    if not item.has_nametag:
        raise Unsupported("nametag", item.type.value)
    if NAMETAG_RE.fullmatch(value) is None:
        raise InvalidFormat("nametag", value)


def validate_stickers(
    values: Sequence[Optional[int]],
    wears: Optional[Sequence[Optional[float]]],
    item: CatalogItem,
    catalog: Catalog,
) -> None:
    """스티커 슬롯 검증.

    - 타입이 스티커 불가 → Unsupported
    - 슬롯 수 MAX_STICKERS 초과 → OutOfRange
    - 빈 슬롯(None)은 통과, 아니면 카탈로그에 있는 sticker 타입이어야 함
    - 슬롯 마모도가 있으면 [0, 0.9]
    """
    if not item.has_stickers:
        raise Unsupported("stickers", item.type.value)
    if len(values) > MAX_STICKERS:
        raise OutOfRange("stickers", len(values), 0, MAX_STICKERS)
    if wears is not None and len(wears) > MAX_STICKERS:
        raise OutOfRange("sticker wears", len(wears), 0, MAX_STICKERS)

    for slot, sticker_id in enumerate(values):
        if sticker_id is None:
            continue
        sticker = catalog.get_by_id(sticker_id)
        if sticker.type is not ItemType.STICKER:
            raise Unsupported("stickers", sticker.type.value)
        if wears is None or slot >= len(wears):
            continue
        wear = wears[slot]
        if wear is not None and not MIN_STICKER_WEAR <= wear <= MAX_STICKER_WEAR:
            raise OutOfRange("sticker wear", wear, MIN_STICKER_WEAR, MAX_STICKER_WEAR)


def validate_instance(
    instance: ItemInstance, item: CatalogItem, catalog: Catalog
) -> None:
    """인스턴스에 존재하는 모든 속성 검증. 첫 실패를 그대로 전파."""
    if instance.wear is not None:
        validate_wear(instance.wear, item)
    if instance.seed is not None:
        validate_seed(instance.seed, item)
    if instance.stickers is not None or instance.sticker_wears is not None:
        validate_stickers(
            instance.stickers or (), instance.sticker_wears, item, catalog
        )
    if instance.nametag is not None:
        validate_nametag(instance.nametag, item)
    if instance.stattrak is not None:
        validate_stattrak(instance.stattrak, item)
