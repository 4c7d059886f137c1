"""
models.py – Pydantic schemas: raw city records + response views.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# ── Source Records ─────────────────────────────────────────────────────────────

# Number fields must be plain JSON integers inside these ranges.
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1


class CityRecord(BaseModel):
    """One entry of the source JSON array. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    id: str
    name: str
    state: str
    summer_high_f: int = Field(default=0, alias="summerHighFahrenheit", ge=INT32_MIN, le=INT32_MAX)
    winter_low_f:  int = Field(default=0, alias="winterLowFahrenheit", ge=INT32_MIN, le=INT32_MAX)
    elevation_ft:  int = Field(default=0, alias="elevationFeet", ge=INT32_MIN, le=INT32_MAX)
    population:    int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)
    time_zone: str = Field(alias="timeZone")

    @model_validator(mode="before")
    @classmethod
    def _match_keys_ignoring_case(cls, data: Any) -> Any:
        """`NAME`, `Name` and `name` all land on the same field."""
        if not isinstance(data, dict):
            return data
        known = {}
        for field_name, info in cls.model_fields.items():
            known[field_name.lower()] = field_name
            if info.alias:
                known[info.alias.lower()] = info.alias
        return {known.get(str(k).lower(), k): v for k, v in data.items()}


# ── Response Models ────────────────────────────────────────────────────────────

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CitySummary(_CamelModel):
    id: str
    name: str
    state: str


class TemperatureInfo(_CamelModel):
    summer_high_fahrenheit: str = Field(description='e.g. "85 °F"')
    winter_low_fahrenheit:  str = Field(description='e.g. "26 °F"')


class CityInfo(_CamelModel):
    """Per-request view of one city. Never cached."""
    name: str
    state: str
    temperatures: TemperatureInfo
    elevation: str = Field(description='e.g. "33 ft"')
    population: int
    current_time_local: str = Field(description="YYYY-MM-DD HH:MM:SS±HH:MM in the city's zone")


class HealthResponse(BaseModel):
    status: str
    time: str
    cities: int
    data_state: str
