from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Record


class RecordRepository(Protocol):
    """Store-facing interface shared by every resource.

    Note: services depend on this interface, never on a concrete backend.
    Implementations raise StoreError for any store failure.
    """

    def list_all(self) -> Sequence[Record]:
        """All rows in the resource's default order."""

        raise NotImplementedError

    def get(self, *, record_id: int) -> Optional[Record]:
        raise NotImplementedError

    def create(self, *, values: Mapping[str, Any]) -> Record:
        raise NotImplementedError

    def replace(self, *, record_id: int, values: Mapping[str, Any]) -> Optional[Record]:
        """Overwrite every column of the row. Returns None when no row matches."""

        raise NotImplementedError

    def delete(self, *, record_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
