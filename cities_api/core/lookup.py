"""
core/lookup.py – CityLookupService class.
Responsibility: point and bulk queries against the store. No formatting.

The one-time file read is blocking, so it is wrapped in run_in_executor to
keep the event loop free; after that everything is an in-memory scan.
"""
import asyncio
import logging
from typing import Optional

from ..models import CityRecord
from .loader import CityDataLoader, LoadState
from .store import CityRecordStore

logger = logging.getLogger(__name__)


class CityLookupService:
    """Case-insensitive name lookup + full listing."""

    def __init__(self, loader: CityDataLoader) -> None:
        self._loader = loader

    # ── Public ─────────────────────────────────────────────────────────────────

    async def find_by_name(self, name: str) -> Optional[CityRecord]:
        """First record whose name equals `name` ignoring case, else None."""
        store = await self._ensure_loaded()
        if not len(store):
            logger.warning(f"City data is not loaded or is empty when searching for city: {name}")
            return None

        city = store.first(lambda r: _equals_ignore_case(r.name, name))
        if city is None:
            logger.info(f"City not found: {name}")
        else:
            logger.info(f"City found: {name}")
        return city

    async def list_all(self) -> tuple[CityRecord, ...]:
        """Every record in source order (possibly empty)."""
        store = await self._ensure_loaded()
        return store.records

    @property
    def data_state(self) -> LoadState:
        return self._loader.state

    @property
    def count(self) -> int:
        return len(self._loader.store)

    # ── Private ────────────────────────────────────────────────────────────────

    async def _ensure_loaded(self) -> CityRecordStore:
        if self._loader.is_loaded:
            return self._loader.store
        return await asyncio.get_running_loop().run_in_executor(None, self._loader.ensure_loaded)


def _equals_ignore_case(a: str, b: str) -> bool:
    """Per-character ignore-case equality, independent of locale.

    No multi-character folding: "Straße" does not equal "STRASSE".
    """
    if len(a) != len(b):
        return False
    return all(
        x == y or x.upper() == y.upper() or x.lower() == y.lower()
        for x, y in zip(a, b)
    )
