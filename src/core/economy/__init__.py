"""아이템 경제 Core: 순수 Python, 전송/저장 무관"""

from .catalog import Catalog
from .errors import (
    EconomyError,
    ForeignItem,
    InvalidFormat,
    NotAContainer,
    NotFound,
    OutOfRange,
    Unsupported,
)
from .inventory import Inventory, InventoryEntry
from .models import CatalogItem, ItemInstance, ItemType, Rarity, Team
from .unlock import UnlockAttributes, UnlockResult, unlock_container, validate_unlocked_item

__all__ = [
    "Catalog",
    "CatalogItem",
    "ItemInstance",
    "ItemType",
    "Rarity",
    "Team",
    "Inventory",
    "InventoryEntry",
    "UnlockAttributes",
    "UnlockResult",
    "unlock_container",
    "validate_unlocked_item",
    "EconomyError",
    "NotFound",
    "NotAContainer",
    "ForeignItem",
    "Unsupported",
    "OutOfRange",
    "InvalidFormat",
]
