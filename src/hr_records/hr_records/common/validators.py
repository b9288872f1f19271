from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from ..core.constants import INVALID_BODY_MESSAGE, INVALID_ID_MESSAGE, MISSING_FIELDS_MESSAGE
from ..core.exceptions import ValidationError

_RECORD_ID = re.compile(r"-?[0-9]+")


def parse_record_id(value: Any) -> int:
    """Parse a path segment into a row id.

    Only plain ASCII base-10 integers are accepted ("12", "-3"). "abc", "1.5",
    "12abc", "1_0", "+5" and padded values are rejected.
    """
    if isinstance(value, bool):
        raise ValidationError(INVALID_ID_MESSAGE)
    if isinstance(value, int):
        return value
    if not isinstance(value, str) or not _RECORD_ID.fullmatch(value):
        raise ValidationError(INVALID_ID_MESSAGE)
    return int(value)


def require_json_object(payload: Any) -> dict:
    if not isinstance(payload, Mapping):
        raise ValidationError(INVALID_BODY_MESSAGE)
    return dict(payload)


def require_fields(
    payload: Mapping[str, Any],
    required: Iterable[str],
    *,
    zero_allowed: Iterable[str] = (),
) -> None:
    """Check presence only: not type, range or format.

    A field is missing when it is falsy, except fields in ``zero_allowed``
    which are missing only when absent or null.
    """
    zero_allowed = frozenset(zero_allowed)
    for name in required:
        value = payload.get(name)
        if name in zero_allowed:
            if value is None:
                raise ValidationError(MISSING_FIELDS_MESSAGE)
        elif not value:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
