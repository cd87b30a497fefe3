"""Item Economy Core"""
__version__ = "0.1.0"

from src.core.economy import (
    Catalog,
    CatalogItem,
    Inventory,
    ItemInstance,
    ItemType,
    Rarity,
    Team,
    unlock_container,
    validate_unlocked_item,
)

__all__ = [
    "Catalog",
    "CatalogItem",
    "Inventory",
    "ItemInstance",
    "ItemType",
    "Rarity",
    "Team",
    "unlock_container",
    "validate_unlocked_item",
]
