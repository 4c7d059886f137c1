"""
core/mapper.py – CityInfoMapper class.
Responsibility: CityRecord → response views, including the city's current
local time. Never raises on a bad time zone; the field degrades instead.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..models import CityInfo, CityRecord, CitySummary, TemperatureInfo

logger = logging.getLogger(__name__)

TIME_UNAVAILABLE = "N/A"
INVALID_TZ_PREFIX = "Invalid TimeZoneId: "


class CityInfoMapper:
    """Stateless. Pure function of (record, instant, tz database)."""

    def to_info(self, record: CityRecord, now: Optional[datetime] = None) -> CityInfo:
        return CityInfo(
            name=record.name,
            state=record.state,
            temperatures=TemperatureInfo(
                summer_high_fahrenheit=self.fahrenheit(record.summer_high_f),
                winter_low_fahrenheit=self.fahrenheit(record.winter_low_f),
            ),
            elevation=self.feet(record.elevation_ft),
            population=record.population,
            current_time_local=self.local_time(record, now),
        )

    @staticmethod
    def to_summary(record: CityRecord) -> CitySummary:
        return CitySummary(id=record.id, name=record.name, state=record.state)

    # ── Formatting ─────────────────────────────────────────────────────────────

    @staticmethod
    def fahrenheit(value: int) -> str:
        return f"{value} °F"

    @staticmethod
    def feet(value: int) -> str:
        return f"{value} ft"

    @staticmethod
    def local_time(record: CityRecord, now: Optional[datetime] = None) -> str:
        """`YYYY-MM-DD HH:MM:SS±HH:MM` in the record's zone.

        `now` must be timezone-aware; it defaults to the current UTC instant,
        taken here rather than at request start.
        """
        try:
            tz = ZoneInfo(record.time_zone)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Time zone ID '{record.time_zone}' for city '{record.name}' not found on this system."
            )
            return f"{INVALID_TZ_PREFIX}{record.time_zone}"
        except Exception:
            logger.exception(f"Error resolving time zone for city: {record.name}")
            return TIME_UNAVAILABLE

        try:
            instant = now if now is not None else datetime.now(timezone.utc)
            local = instant.astimezone(tz)
            return local.strftime("%Y-%m-%d %H:%M:%S") + _format_offset(local.utcoffset())
        except Exception:
            logger.exception(f"Error calculating local time for city: {record.name}")
            return TIME_UNAVAILABLE


def _format_offset(offset: Optional[timedelta]) -> str:
    """timedelta → `±HH:MM` (seconds are dropped)."""
    total = int((offset or timedelta(0)).total_seconds())
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"
