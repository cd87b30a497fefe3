"""Application configuration loaded from environment variables and .env file."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"

    # Catalog
    CATALOG_PATH: str = "src/data/catalog.json"
    IMAGE_BASE_URL: str = "/images/economy"

    # Inventory / unlock
    INVENTORY_CAPACITY: int = 256
    RANDOM_SEED: Optional[int] = None


settings = Settings()
