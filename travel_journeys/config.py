"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the knobs of the
journey engine, the travel store and logging.

Configuration can be overridden via environment variables:
- TJ_JOURNEY_DEFAULT_MAIN_TYPE=train
- TJ_JOURNEY_ADDITIONAL_DATE_ORDER=MDY
- TJ_STORE_BACKEND=json
- TJ_STORE_DATA_DIR=/path/to/itineraries
- TJ_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JourneyConfig(BaseSettings):
    """Journey engine configuration.

    Environment variables prefixed with TJ_JOURNEY_.
    """

    model_config = SettingsConfigDict(env_prefix="TJ_JOURNEY_")

    default_main_type: Literal["flight", "train", "bus", "ferry", "other"] = "flight"
    default_transfer_type: Literal[
        "taxi", "private_car", "shuttle", "bus", "train", "other"
    ] = "taxi"
    additional_date_order: Literal["DMY", "MDY", "YMD"] = "DMY"


class StoreConfig(BaseSettings):
    """Travel store configuration.

    Environment variables prefixed with TJ_STORE_.
    """

    model_config = SettingsConfigDict(env_prefix="TJ_STORE_")

    backend: Literal["memory", "json"] = "memory"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    file_suffix: str = ".travel.json"

    def path_for(self, itinerary_id: str) -> Path:
        """Full path of the JSON document for one itinerary."""
        return self.data_dir / f"{itinerary_id}{self.file_suffix}"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TJ_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TJ_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.journey.default_main_type)
        print(config.store.data_dir)

    Environment variables prefixed with TJ_.
    """

    model_config = SettingsConfigDict(env_prefix="TJ_")

    journey: JourneyConfig = Field(default_factory=JourneyConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
