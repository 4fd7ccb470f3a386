"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

#: WETH token address; the only asset whose observations drive the streak.
ADDRESS_WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"


class BadgeSettings(BaseSettings):
    """Default definition for the singleton badge.

    Only used the first time the badge is loaded; once a badge record exists
    in the store, the stored values win.
    """

    model_config = SettingsConfigDict(env_prefix="BADGE_")

    badge_id: str = "1"
    name: str = "Winter"
    delta_threshold: Decimal = Decimal("-0.05")  # 5% daily drop
    minimum_streak_length: int = Field(default=3, ge=1)
    active_from: int = 1588530377 // 86400  # day index of the first tracked block
    active_until: int = -1  # -1 = unbounded


class TrackerSettings(BaseSettings):
    """Which asset the engine follows and where its gate state lives."""

    model_config = SettingsConfigDict(env_prefix="TRACKER_")

    asset_id: str = ADDRESS_WETH
    state_id: str = "1"


class StorageSettings(BaseSettings):
    """SQLite storage location."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    db_path: str = "data/badger.db"


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    badge: BadgeSettings = BadgeSettings()
    tracker: TrackerSettings = TrackerSettings()
    storage: StorageSettings = StorageSettings()
