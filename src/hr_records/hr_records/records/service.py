from __future__ import annotations

import logging
from typing import Any, List

from ..common.validators import parse_record_id, require_fields, require_json_object
from ..core.exceptions import NotFoundError, StoreError
from .model import Record
from .repository import RecordRepository
from .schema import ResourceSchema

logger = logging.getLogger(__name__)


class RecordService:
    """Record lifecycle shared by onboarding, leave and payroll.

    Validation is presence-only. Updates are full replacements: every column
    takes the body's value, and columns missing from the body are stored as
    null. Store failures are logged here and re-raised with a generic message
    so driver details never reach the caller.
    """

    def __init__(self, repo: RecordRepository, schema: ResourceSchema):
        self._repo = repo
        self._schema = schema

    @property
    def schema(self) -> ResourceSchema:
        return self._schema

    def list_all(self) -> List[Record]:
        try:
            return list(self._repo.list_all())
        except StoreError as exc:
            logger.exception("Error fetching %s", self._schema.plural)
            raise StoreError(f"Failed to fetch {self._schema.plural}") from exc

    def create(self, payload: Any) -> Record:
        body = require_json_object(payload)
        require_fields(body, self._schema.required, zero_allowed=self._schema.zero_allowed)

        try:
            return self._repo.create(values=self._schema.values_from(body))
        except StoreError as exc:
            logger.exception("Error creating %s", self._schema.singular)
            raise StoreError(f"Failed to create {self._schema.singular}") from exc

    def get(self, record_id: Any) -> Record:
        rid = parse_record_id(record_id)
        try:
            record = self._repo.get(record_id=rid)
        except StoreError as exc:
            logger.exception("Error fetching %s %s", self._schema.singular, rid)
            raise StoreError(f"Failed to fetch {self._schema.singular}") from exc

        if record is None:
            raise NotFoundError(self._schema.not_found_message)
        return record

    def update(self, record_id: Any, payload: Any) -> Record:
        rid = parse_record_id(record_id)
        body = require_json_object(payload)

        try:
            record = self._repo.replace(record_id=rid, values=self._schema.values_from(body))
        except StoreError as exc:
            logger.exception("Error updating %s %s", self._schema.singular, rid)
            raise StoreError(f"Failed to update {self._schema.singular}") from exc

        if record is None:
            raise NotFoundError(self._schema.not_found_message)
        return record

    def delete(self, record_id: Any) -> None:
        rid = parse_record_id(record_id)
        try:
            deleted = self._repo.delete(record_id=rid)
        except StoreError as exc:
            logger.exception("Error deleting %s %s", self._schema.singular, rid)
            raise StoreError(f"Failed to delete {self._schema.singular}") from exc

        if not deleted:
            raise NotFoundError(self._schema.not_found_message)
