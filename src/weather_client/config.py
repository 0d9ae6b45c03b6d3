"""
Runtime configuration helpers.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidArgumentError
from .weather import DEFAULT_BASE_URL, DEFAULT_CITY, WeatherClient

load_dotenv()


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"OPENWEATHER_TIMEOUT must be a number of seconds, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    openweather_api_key: str
    openweather_base_url: str = DEFAULT_BASE_URL
    openweather_timeout: Optional[float] = None
    default_city: str = DEFAULT_CITY

    @property
    def has_openweather(self) -> bool:
        return bool(self.openweather_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            openweather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
            openweather_base_url=os.getenv("OPENWEATHER_BASE_URL") or DEFAULT_BASE_URL,
            openweather_timeout=_parse_timeout(os.getenv("OPENWEATHER_TIMEOUT")),
            default_city=os.getenv("WEATHER_DEFAULT_CITY") or DEFAULT_CITY,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def create_client(settings: Optional[Settings] = None) -> WeatherClient:
    """Build a WeatherClient from settings, reading the environment when none are given."""
    settings = settings or get_settings()
    if not settings.has_openweather:
        raise InvalidArgumentError("OPENWEATHER_API_KEY is required to query the weather provider")
    return WeatherClient(
        api_key=settings.openweather_api_key,
        base_url=settings.openweather_base_url,
        timeout=settings.openweather_timeout,
    )


__all__ = ["Settings", "get_settings", "create_client"]
