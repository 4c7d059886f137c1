"""
handlers/city_handler.py – CityHandler class.
Responsibility: coordinate /cities requests (lookup → mapping).
"""
import logging
from typing import Optional

from ..core.lookup import CityLookupService
from ..core.mapper import CityInfoMapper
from ..models import CityInfo, CitySummary

logger = logging.getLogger(__name__)


class CityHandler:
    """Handles the /cities endpoints."""

    def __init__(self, lookup: CityLookupService, mapper: CityInfoMapper) -> None:
        self._lookup = lookup
        self._mapper = mapper

    async def get_city_info(self, name: str) -> Optional[CityInfo]:
        """None means the name is unknown (the route turns that into a 404)."""
        record = await self._lookup.find_by_name(name)
        if record is None:
            return None
        return self._mapper.to_info(record)

    async def list_cities(self) -> list[CitySummary]:
        records = await self._lookup.list_all()
        logger.info(f"Retrieved {len(records)} cities.")
        return [self._mapper.to_summary(r) for r in records]
