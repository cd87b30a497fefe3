"""Application bootstrap: logging, catalog, event bus and inventory service."""

import random
from typing import Optional

from src.config import Settings, settings
from src.core.economy.catalog import Catalog
from src.core.event_bus import EventBus
from src.core.logging import get_logger, setup_logging
from src.services.inventory_service import InventoryService

logger = get_logger(__name__)


def bootstrap(config: Optional[Settings] = None) -> InventoryService:
    """Wire the core components from settings and return a ready service."""
    config = config or settings
    setup_logging(config.LOG_LEVEL)

    logger.info("Loading catalog from %s", config.CATALOG_PATH)
    catalog = Catalog.load_from_json(config.CATALOG_PATH)
    missing = catalog.check_references()
    if missing:
        logger.warning("Catalog has %d unresolved container references", len(missing))

    rng = random.Random(config.RANDOM_SEED) if config.RANDOM_SEED is not None else None
    service = InventoryService(
        catalog=catalog,
        event_bus=EventBus(),
        rng=rng,
        capacity=config.INVENTORY_CAPACITY,
        image_base_url=config.IMAGE_BASE_URL,
    )
    logger.info(
        "InventoryService initialized (%d catalog items, capacity=%d).",
        catalog.count(),
        config.INVENTORY_CAPACITY,
    )
    return service
