"""
core/loader.py – CityDataLoader class.
Responsibility: read the city JSON file exactly once per process and own the
resulting CityRecordStore.

Load failures never reach the caller: a missing or malformed file leaves an
empty store behind and the service answers "no cities known".
"""
import enum
import json
import logging
import threading
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from ..models import CityRecord
from .store import CityRecordStore

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(list[CityRecord])


class LoadState(str, enum.Enum):
    NOT_ATTEMPTED = "not_attempted"
    LOADED        = "loaded"
    FAILED        = "failed"


class CityDataLoader:
    """Lazy, load-once owner of the CityRecordStore.

    Single writer (whoever wins the lock on first access), many readers.
    `state` only leaves NOT_ATTEMPTED once an attempt has really finished,
    so an attempt interrupted by cancellation is retried on the next call.
    """

    def __init__(self, data_file: str | Path) -> None:
        self._data_file = Path(data_file)
        self._store = CityRecordStore.empty()
        self._state = LoadState.NOT_ATTEMPTED
        self._last_error: Optional[str] = None
        self._lock = threading.Lock()
        logger.info("CityDataLoader initialized. Data path: %s", self._data_file)

    # ── Public ─────────────────────────────────────────────────────────────────

    @property
    def data_file(self) -> Path:
        return self._data_file

    @property
    def store(self) -> CityRecordStore:
        return self._store

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def is_loaded(self) -> bool:
        """True once an attempt has completed, whether it found cities or not."""
        return self._state is not LoadState.NOT_ATTEMPTED

    def ensure_loaded(self) -> CityRecordStore:
        """Load the file on first call; later calls return the cached store."""
        if self.is_loaded:
            return self._store

        with self._lock:
            if self.is_loaded:
                return self._store
            self._store, self._state, self._last_error = self._load()
        return self._store

    def preload(self) -> None:
        """Eager variant for app startup. Same guard as ensure_loaded."""
        store = self.ensure_loaded()
        logger.info("City data ready: %d records (%s)", len(store), self._state.value)

    # ── Private ────────────────────────────────────────────────────────────────

    def _load(self) -> tuple[CityRecordStore, LoadState, Optional[str]]:
        logger.info("Attempting to load city data from %s", self._data_file)
        try:
            raw = self._read_source()
            records = self._parse(raw)
        except FileNotFoundError:
            logger.error("City data JSON file not found at %s", self._data_file)
            return CityRecordStore.empty(), LoadState.FAILED, f"Source unavailable: {self._data_file}"
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error("Error deserializing city data from %s", self._data_file, exc_info=True)
            return CityRecordStore.empty(), LoadState.FAILED, f"Source malformed: {e}"
        except Exception as e:
            logger.error("Unexpected error while loading city data from %s", self._data_file, exc_info=True)
            return CityRecordStore.empty(), LoadState.FAILED, f"Load failed: {e}"

        logger.info("Successfully loaded %d cities from JSON.", len(records))
        return CityRecordStore(records), LoadState.LOADED, None

    def _read_source(self) -> str:
        return self._data_file.read_text(encoding="utf-8-sig")

    @staticmethod
    def _parse(raw: str) -> list[CityRecord]:
        data = json.loads(raw)
        if data is None:
            return []
        return _RECORDS.validate_python(data)
