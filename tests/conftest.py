"""tests/conftest.py – shared fixtures for all tests."""
import json
from pathlib import Path

import pytest

from cities_api.models import CityRecord


NYC = {
    "id": "nyc", "name": "New York City", "state": "New York",
    "summerHighFahrenheit": 85, "winterLowFahrenheit": 26, "elevationFeet": 33,
    "population": 8335897, "timeZone": "America/New_York",
}
LA = {
    "id": "la", "name": "Los Angeles", "state": "California",
    "summerHighFahrenheit": 84, "winterLowFahrenheit": 48, "elevationFeet": 305,
    "population": 3822238, "timeZone": "America/Los_Angeles",
}
NOLA = {
    "id": "no", "name": "New Orleans", "state": "Louisiana",
    "summerHighFahrenheit": 92, "winterLowFahrenheit": 44, "elevationFeet": -6,
    "population": 369749, "timeZone": "America/Chicago",
}


def make_record(**kw) -> CityRecord:
    defaults = dict(
        id="tst", name="Testville", state="TS",
        summer_high_f=75, winter_low_f=30, elevation_ft=500,
        population=50000, time_zone="America/New_York",
    )
    defaults.update(kw)
    return CityRecord(**defaults)


def write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def cities_file(tmp_path) -> Path:
    """Valid source with 3 cities, in a known order."""
    return write_json(tmp_path / "cities.json", [NYC, LA, NOLA])


@pytest.fixture
def missing_file(tmp_path) -> Path:
    return tmp_path / "does_not_exist.json"
