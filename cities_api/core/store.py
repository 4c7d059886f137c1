"""
core/store.py – CityRecordStore.
Immutable, ordered snapshot of the city records (source order).
"""
from typing import Callable, Iterable, Iterator, Optional

from ..models import CityRecord


class CityRecordStore:
    """Read-only sequence of CityRecord. Replaced as a whole, never mutated."""

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[CityRecord] = ()) -> None:
        self._records: tuple[CityRecord, ...] = tuple(records)

    @classmethod
    def empty(cls) -> "CityRecordStore":
        return cls()

    @property
    def records(self) -> tuple[CityRecord, ...]:
        return self._records

    def first(self, predicate: Callable[[CityRecord], bool]) -> Optional[CityRecord]:
        return next((r for r in self._records if predicate(r)), None)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CityRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"CityRecordStore({len(self._records)} records)"
