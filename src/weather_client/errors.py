"""
Exceptions raised by the weather client.

A provider miss (unknown city, non-success status) is not an exception; it is
reported through ``WeatherResult.success``.
"""
from __future__ import annotations


class WeatherClientError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(WeatherClientError, ValueError):
    """Raised before any I/O when the credential or call arguments are invalid."""


class TransportError(WeatherClientError):
    """The HTTP exchange itself failed (DNS, connection, timeout)."""


class ParseError(WeatherClientError, ValueError):
    """The provider answered with a body that is not the expected JSON shape."""


__all__ = ["WeatherClientError", "InvalidArgumentError", "TransportError", "ParseError"]
