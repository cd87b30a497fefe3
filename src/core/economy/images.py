"""마모도 등급 + 이미지 품질 선택"""

from enum import Enum

from .constants import (
    GENERATED_HEAVY,
    GENERATED_LIGHT,
    GENERATED_MEDIUM,
    MAX_FACTORY_NEW_WEAR,
    MAX_FIELD_TESTED_WEAR,
    MAX_MINIMAL_WEAR_WEAR,
    MAX_WELL_WORN_WEAR,
)
from .models import CatalogItem, ItemInstance


class WearTier(str, Enum):
    FACTORY_NEW = "factory_new"
    MINIMAL_WEAR = "minimal_wear"
    FIELD_TESTED = "field_tested"
    WELL_WORN = "well_worn"
    BATTLE_SCARRED = "battle_scarred"


def wear_tier(wear: float) -> WearTier:
    """마모도 → 등급. 각 등급 상한은 포함."""
    if wear <= MAX_FACTORY_NEW_WEAR:
        return WearTier.FACTORY_NEW
    if wear <= MAX_MINIMAL_WEAR_WEAR:
        return WearTier.MINIMAL_WEAR
    if wear <= MAX_FIELD_TESTED_WEAR:
        return WearTier.FIELD_TESTED
    if wear <= MAX_WELL_WORN_WEAR:
        return WearTier.WELL_WORN
    return WearTier.BATTLE_SCARRED


_TIER_IMAGE: dict[WearTier, tuple[int, str]] = {
    WearTier.FACTORY_NEW: (GENERATED_LIGHT, "light"),
    WearTier.MINIMAL_WEAR: (GENERATED_LIGHT, "light"),
    WearTier.FIELD_TESTED: (GENERATED_MEDIUM, "medium"),
    WearTier.WELL_WORN: (GENERATED_HEAVY, "heavy"),
    WearTier.BATTLE_SCARRED: (GENERATED_HEAVY, "heavy"),
}


def resolve_image(instance: ItemInstance, item: CatalogItem, base_url: str) -> str:
    """인스턴스 마모도에 맞는 생성 이미지 URL.

    생성 이미지가 없거나 마모도가 없으면 카탈로그 이미지.
    해당 품질 이미지가 없으면 light → 카탈로그 이미지 순으로 대체.
    """
    if not item.local_image or instance.wear is None:
        return item.image

    flag, suffix = _TIER_IMAGE[wear_tier(instance.wear)]
    if item.local_image & flag:
        return f"{base_url}/{item.id}_{suffix}.png"
    if item.local_image & GENERATED_LIGHT:
        return f"{base_url}/{item.id}_light.png"
    return item.image
