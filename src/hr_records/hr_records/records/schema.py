from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class ResourceSchema:
    """Table layout and contract of one record resource."""

    table: str
    columns: Tuple[str, ...]
    required: Tuple[str, ...]
    order_by: str
    singular: str
    plural: str
    descending: bool = False
    # Required fields where 0/false count as present.
    zero_allowed: Tuple[str, ...] = ()

    @property
    def not_found_message(self) -> str:
        return f"{self.singular[:1].upper()}{self.singular[1:]} not found"

    def values_from(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Map a request body onto every column; absent keys become None."""
        return {column: payload.get(column) for column in self.columns}
