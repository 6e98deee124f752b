"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- DLK_SEARCH_DEBOUNCE_MS=150
- DLK_SEARCH_CACHE_BACKEND=null
- DLK_STORE_BACKEND=http
- DLK_STORE_BASE_URL=https://destinations.example.com/api
- DLK_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_FILE = Path(__file__).resolve().parent / "data" / "destinations.json"


class SearchConfig(BaseSettings):
    """Search pipeline configuration.

    Environment variables prefixed with DLK_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="DLK_SEARCH_")

    debounce_ms: int = Field(default=300, ge=0)
    proximity_limit: int = Field(default=5, ge=0)
    earth_radius_km: float = Field(default=6371.0, gt=0)
    apply_stale_responses: bool = False
    cache_backend: Literal["memory", "null"] = "memory"


class StoreConfig(BaseSettings):
    """Destination store configuration.

    Environment variables prefixed with DLK_STORE_.
    """

    model_config = SettingsConfigDict(env_prefix="DLK_STORE_")

    backend: Literal["memory", "http"] = "memory"
    data_file: Path = DEFAULT_DATA_FILE
    latency_ms: int = Field(default=0, ge=0)
    base_url: str = "http://localhost:8000/api"
    timeout_seconds: float = 10.0
    user_agent: str = "destination-lookup"


class NavigationConfig(BaseSettings):
    """Page address configuration for deep links.

    Environment variables prefixed with DLK_NAV_.
    """

    model_config = SettingsConfigDict(env_prefix="DLK_NAV_")

    base_url: str = "http://localhost:3000/"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with DLK_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="DLK_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.search.debounce_ms)
        print(config.store.backend)

    Environment variables prefixed with DLK_.
    """

    model_config = SettingsConfigDict(env_prefix="DLK_")

    search: SearchConfig = Field(default_factory=SearchConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the observability settings to the root logger.

    Only entry points call this; library code just asks for loggers.
    """
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)
