"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from coffee_shop.domain.model.drink import (
    DEFAULT_DRINK_NAME,
    DEFAULT_DRINK_SIZE,
    DEFAULT_SHOT_COUNT,
)


class Settings(BaseSettings):
    """Settings loaded from ``COFFEE_SHOP_*`` environment variables."""

    # Drink a new screen opens with
    default_drink_name: str = DEFAULT_DRINK_NAME
    default_drink_size: str = DEFAULT_DRINK_SIZE
    default_shot_count: int = Field(default=DEFAULT_SHOT_COUNT, ge=0)

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="COFFEE_SHOP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
