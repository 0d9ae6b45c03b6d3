"""
OpenWeatherMap current-weather client.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .errors import InvalidArgumentError, ParseError, TransportError
from .logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_CITY = "London"

CELSIUS_LABEL = "celcius"
FAHRENHEIT_LABEL = "farenheit"

FOUND_MESSAGE = "Weather Data Found"
NOT_FOUND_MESSAGE = "No Weather Data Found"


def convert_celsius_to_fahrenheit(value: float) -> float:
    return float(value) * 9 / 5 + 32


@dataclass(frozen=True)
class WeatherPayload:
    city: str
    icon: str
    unit: str
    temperature: float
    humidity: float
    wind_speed: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload with the provider-facing key names (``windSpeed``)."""
        return {
            "city": self.city,
            "icon": self.icon,
            "unit": self.unit,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "description": self.description,
        }

    def to_summary(self) -> str:
        """Return a concise natural-language summary of the observation."""
        symbol = "C" if self.unit == CELSIUS_LABEL else "F"
        return (
            f"Weather in {self.city}: {self.description}. "
            f"Temperature {self.temperature:.1f} {symbol}, "
            f"humidity {self.humidity}%, wind {self.wind_speed} m/s"
        )


@dataclass(frozen=True)
class WeatherResult:
    success: bool
    data: Optional[WeatherPayload]
    message: str

    @classmethod
    def found(cls, payload: WeatherPayload) -> "WeatherResult":
        return cls(success=True, data=payload, message=FOUND_MESSAGE)

    @classmethod
    def not_found(cls) -> "WeatherResult":
        return cls(success=False, data=None, message=NOT_FOUND_MESSAGE)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "data": self.data.to_dict() if self.data is not None else None,
            "message": self.message,
        }


def _build_payload(data: Dict[str, Any], use_celsius: bool) -> WeatherPayload:
    try:
        weather = data["weather"][0]
        main = data["main"]
        temperature = main["temp"]
        if not use_celsius:
            temperature = convert_celsius_to_fahrenheit(temperature)
        payload = WeatherPayload(
            city=data["name"],
            icon=weather["icon"],
            unit=CELSIUS_LABEL if use_celsius else FAHRENHEIT_LABEL,
            temperature=temperature,
            humidity=main["humidity"],
            wind_speed=data["wind"]["speed"],
            description=weather["description"],
        )
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise ParseError(f"Unexpected weather payload: {exc!r}") from exc
    LOGGER.debug("Built weather payload for %s in %s", payload.city, payload.unit)
    return payload


class WeatherClient:
    """Handles a single current-weather lookup against the OpenWeatherMap REST API.

    The client only holds read-only configuration, so one instance can serve
    any number of concurrent ``get_weather`` calls. Without an injected
    ``session`` each request opens its own ``requests.Session``. An injected
    session is shared by every call, including the worker threads behind
    concurrent ``get_weather`` calls, and ``requests.Session`` is not
    documented as thread-safe; inject one only for sequential use.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Store the credential and transport options; no request is made here."""
        if not api_key:
            raise InvalidArgumentError("Missing API key")
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._session = session

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def __repr__(self) -> str:
        return f"WeatherClient(base_url={self._base_url!r}, timeout={self._timeout!r})"

    async def get_weather(self, city: str = DEFAULT_CITY, use_celsius: bool = True) -> WeatherResult:
        """Look up the current weather for ``city``.

        Returns a successful ``WeatherResult`` carrying a ``WeatherPayload``, or
        ``WeatherResult.not_found()`` when the provider answers with a
        non-success status. Raises ``InvalidArgumentError`` before any I/O for
        bad arguments, ``TransportError`` when the request cannot be completed
        and ``ParseError`` when the body is not the expected JSON.
        """
        self._validate(city, use_celsius)
        response = await asyncio.to_thread(self._request, city)
        return self._to_result(response, city, use_celsius)

    def fetch_weather(self, city: str = DEFAULT_CITY, use_celsius: bool = True) -> WeatherResult:
        """Blocking variant of ``get_weather`` for callers without an event loop."""
        self._validate(city, use_celsius)
        return self._to_result(self._request(city), city, use_celsius)

    @staticmethod
    def _validate(city: Any, use_celsius: Any) -> None:
        if not isinstance(use_celsius, bool):
            raise InvalidArgumentError("Temperature parameter must be a boolean")
        if not isinstance(city, str):
            raise InvalidArgumentError("City parameter must be a string")

    def _request(self, city: str) -> requests.Response:
        params = {"q": city, "units": "metric", "appid": self._api_key}
        LOGGER.info("Fetching weather for %s", city)
        try:
            if self._session is not None:
                return self._session.get(self._base_url, params=params, timeout=self._timeout)
            with requests.Session() as session:
                return session.get(self._base_url, params=params, timeout=self._timeout)
        except requests.RequestException as exc:
            # The exception text embeds the request URL, which carries the key.
            raise TransportError(f"Weather request for {city!r} failed") from exc

    @staticmethod
    def _to_result(response: requests.Response, city: str, use_celsius: bool) -> WeatherResult:
        if not 200 <= response.status_code < 300:
            LOGGER.warning("No weather data for %s (HTTP %s)", city, response.status_code)
            return WeatherResult.not_found()
        try:
            data = response.json()
        except ValueError as exc:
            raise ParseError(f"Weather response for {city!r} is not valid JSON") from exc
        return WeatherResult.found(_build_payload(data, use_celsius))


__all__ = [
    "WeatherClient",
    "WeatherPayload",
    "WeatherResult",
    "convert_celsius_to_fahrenheit",
    "DEFAULT_BASE_URL",
    "DEFAULT_CITY",
    "CELSIUS_LABEL",
    "FAHRENHEIT_LABEL",
    "FOUND_MESSAGE",
    "NOT_FOUND_MESSAGE",
]
