"""Shared test fixtures."""

import pytest

from src.core.economy.catalog import Catalog
from src.core.economy.inventory import Inventory
from src.core.economy.models import CatalogItem, ItemType, Rarity, Team
from src.core.event_bus import EventBus

BOTH = (Team.T, Team.CT)

CATALOG_ITEMS = [
    # 무기
    CatalogItem(10, ItemType.WEAPON, "MP9 | Sand Dashed", Rarity.COMMON, None, "mp9", 0.06, 0.8),
    CatalogItem(11, ItemType.WEAPON, "Nova | Predator", Rarity.COMMON, None, "nova"),
    CatalogItem(12, ItemType.WEAPON, "Glock-18 | Candy Apple", Rarity.RARE, (Team.T,), "glock", None, 0.3),
    CatalogItem(13, ItemType.WEAPON, "USP-S | Orion", Rarity.MYTHICAL, (Team.CT,), "usp_silencer"),
    CatalogItem(14, ItemType.WEAPON, "AK-47 | Redline", Rarity.LEGENDARY, (Team.T,), "ak47", 0.1, 0.7),
    CatalogItem(15, ItemType.WEAPON, "AWP | Asiimov", Rarity.ANCIENT, BOTH, "awp", 0.18, 1.0),
    CatalogItem(16, ItemType.WEAPON, "M4A4 | Howl", Rarity.IMMORTAL, (Team.CT,), "m4a4"),
    CatalogItem(17, ItemType.WEAPON, "MP9 | Hot Rod", Rarity.COMMON, None, "mp9", 0.0, 0.08),
    CatalogItem(18, ItemType.WEAPON, "AWP | Safari Mesh", Rarity.COMMON, BOTH, "awp"),
    # 근접 / 장갑
    CatalogItem(20, ItemType.MELEE, "Karambit | Fade", Rarity.ANCIENT, BOTH, "karambit", None, 0.08),
    CatalogItem(21, ItemType.GLOVES, "Sport Gloves | Vice", Rarity.IMMORTAL, BOTH, "sport_gloves", 0.06, 0.8),
    CatalogItem(22, ItemType.MELEE, "Bayonet | Doppler", Rarity.ANCIENT, BOTH, "bayonet", 0.0, 0.08),
    # 기타
    CatalogItem(30, ItemType.MUSICKIT, "Music Kit | Crimson Assault", Rarity.RARE),
    CatalogItem(31, ItemType.MUSICKIT, "Music Kit | Total Domination", Rarity.MYTHICAL),
    CatalogItem(32, ItemType.AGENT, "Sir Bloody Miami Darryl", Rarity.ANCIENT, (Team.T,)),
    CatalogItem(40, ItemType.STICKER, "Sticker | Crown (Foil)", Rarity.MYTHICAL),
    CatalogItem(41, ItemType.STICKER, "Sticker | Howling Dawn", Rarity.IMMORTAL),
    CatalogItem(50, ItemType.GRAFFITI, "Sealed Graffiti | Noscope", Rarity.COMMON),
    CatalogItem(60, ItemType.COLLECTIBLE, "Service Medal", Rarity.LEGENDARY),
    CatalogItem(70, ItemType.TOOL, "Name Tag"),
    # 상자
    CatalogItem(1, ItemType.CONTAINER, "Weapon Case", contents=(10, 11, 12, 13, 14, 15), specials=(20, 21)),
    CatalogItem(2, ItemType.CONTAINER, "Three Tier Case", contents=(10, 12, 16)),
    CatalogItem(3, ItemType.CONTAINER, "Sticker Capsule", contents=(40, 41)),
    CatalogItem(4, ItemType.CONTAINER, "Empty Shell"),
    CatalogItem(5, ItemType.CONTAINER_KEY, "Weapon Case Key"),
]


@pytest.fixture()
def catalog() -> Catalog:
    return Catalog(CATALOG_ITEMS)


@pytest.fixture()
def inventory(catalog: Catalog) -> Inventory:
    return Inventory.empty(catalog)


@pytest.fixture()
def event_bus() -> EventBus:
    return EventBus()
