from __future__ import annotations

from dataclasses import asdict
from typing import Any, Mapping


class Record:
    """Base for row models. Subclasses are frozen dataclasses."""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Record":
        raise NotImplementedError

    def to_dict(self) -> dict:
        return asdict(self)
