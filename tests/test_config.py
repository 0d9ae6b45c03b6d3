import logging

import pytest

from weather_client.config import Settings, create_client, get_settings
from weather_client import logger as logger_module
from weather_client.errors import InvalidArgumentError
from weather_client.logger import get_logger
from weather_client.testing_utils import describe_test
from weather_client.weather import DEFAULT_BASE_URL, WeatherClient

ENV_VARS = ["OPENWEATHER_API_KEY", "OPENWEATHER_BASE_URL", "OPENWEATHER_TIMEOUT", "WEATHER_DEFAULT_CITY", "LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@describe_test(
    purpose="Falls back to the public endpoint, no timeout and London when only the key is set.",
    targets=[Settings.from_env],
)
def test_settings_defaults(clean_env):
    clean_env.setenv("OPENWEATHER_API_KEY", "abc")

    settings = Settings.from_env()

    assert settings.openweather_api_key == "abc"
    assert settings.openweather_base_url == DEFAULT_BASE_URL
    assert settings.openweather_timeout is None
    assert settings.default_city == "London"
    assert settings.has_openweather


@describe_test(
    purpose="Reads every supported variable from the environment.",
    targets=[Settings.from_env, get_settings],
)
def test_settings_from_env_overrides(clean_env):
    clean_env.setenv("OPENWEATHER_API_KEY", "abc")
    clean_env.setenv("OPENWEATHER_BASE_URL", "http://localhost:8080/weather")
    clean_env.setenv("OPENWEATHER_TIMEOUT", "2.5")
    clean_env.setenv("WEATHER_DEFAULT_CITY", "Lisbon")

    settings = get_settings()

    assert settings.openweather_base_url == "http://localhost:8080/weather"
    assert settings.openweather_timeout == 2.5
    assert settings.default_city == "Lisbon"
    assert get_settings() is settings


@describe_test(
    purpose="Rejects a timeout that is not a number.",
    targets=[Settings.from_env],
)
def test_settings_rejects_bad_timeout(clean_env):
    clean_env.setenv("OPENWEATHER_TIMEOUT", "soon")

    with pytest.raises(InvalidArgumentError):
        Settings.from_env()


@describe_test(
    purpose="Builds a client carrying the configured endpoint and timeout.",
    targets=[create_client],
)
def test_create_client_from_settings():
    settings = Settings(openweather_api_key="abc", openweather_base_url="http://localhost/weather", openweather_timeout=3.0)

    client = create_client(settings)

    assert isinstance(client, WeatherClient)
    assert client.base_url == "http://localhost/weather"
    assert client.timeout == 3.0


@describe_test(
    purpose="Refuses to build a client when no API key is configured.",
    targets=[create_client],
)
def test_create_client_requires_key(clean_env):
    with pytest.raises(InvalidArgumentError, match="OPENWEATHER_API_KEY"):
        create_client()


@describe_test(
    purpose="Takes the log level from LOG_LEVEL the first time a logger is requested; Settings does not carry it.",
    targets=[get_logger],
)
def test_get_logger_reads_log_level(clean_env):
    calls = []
    clean_env.setattr(logger_module, "_CONFIGURED", False)
    clean_env.setattr(logger_module.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    clean_env.setenv("LOG_LEVEL", "debug")

    log = get_logger("weather_client.test")

    assert log.name == "weather_client.test"
    assert calls == [{"level": logging.DEBUG, "format": logger_module.LOG_FORMAT}]
    assert not hasattr(Settings(openweather_api_key="abc"), "log_level")
