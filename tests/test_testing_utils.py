import pytest

from weather_client.testing_utils import TargetDetails, TestMetadata, describe_test, resolve_target_details
from weather_client.weather import WeatherClient


@describe_test(
    purpose="Stores the purpose, notes and targets on the decorated test.",
    targets=[describe_test],
)
def test_describe_test_attaches_metadata():
    @describe_test(purpose="checks things", targets=[WeatherClient], notes="offline")
    def sample():
        pass

    metadata = sample.__test_metadata__
    assert isinstance(metadata, TestMetadata)
    assert metadata.purpose == "checks things"
    assert metadata.notes == "offline"
    assert metadata.targets == (WeatherClient,)


@describe_test(
    purpose="Requires every described test to state its purpose.",
    targets=[describe_test],
)
def test_describe_test_requires_purpose():
    with pytest.raises(ValueError):
        describe_test(purpose="")


@describe_test(
    purpose="Resolves classes, plain strings and prebuilt details for the report.",
    targets=[resolve_target_details],
)
def test_resolve_target_details():
    prebuilt = TargetDetails(display_name="custom")

    details = resolve_target_details([WeatherClient.get_weather, "free text", prebuilt])

    assert details[0].display_name == "WeatherClient.get_weather"
    assert details[0].module == "weather_client.weather"
    assert details[0].file.endswith("weather.py")
    assert details[0].doc.startswith("Look up the current weather")
    assert details[1] == TargetDetails(display_name="free text")
    assert details[2] is prebuilt
