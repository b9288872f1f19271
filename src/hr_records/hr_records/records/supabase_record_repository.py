from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Mapping, Optional, Sequence, Type

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..core.exceptions import StoreError
from .model import Record
from .repository import RecordRepository
from .schema import ResourceSchema


@contextmanager
def _store_errors():
    try:
        yield
    except (APIError, httpx.HTTPError) as exc:
        raise StoreError(str(exc)) from exc


class SupabaseRecordRepository(RecordRepository):
    """Same record operations through the Supabase table query builder."""

    def __init__(self, client: Client, schema: ResourceSchema, model: Type[Record]):
        self._client = client
        self._schema = schema
        self._model = model
        self._select_list = ",".join(("id",) + schema.columns)

    def _table(self):
        return self._client.table(self._schema.table)

    def _first(self, data) -> Optional[Record]:
        rows = list(data or [])
        return self._model.from_row(rows[0]) if rows else None

    def list_all(self) -> Sequence[Record]:
        with _store_errors():
            resp = (
                self._table()
                .select(self._select_list)
                .order(self._schema.order_by, desc=self._schema.descending)
                .order("id")
                .execute()
            )
        return [self._model.from_row(r) for r in resp.data or []]

    def get(self, *, record_id: int) -> Optional[Record]:
        with _store_errors():
            resp = self._table().select(self._select_list).eq("id", int(record_id)).execute()
        return self._first(resp.data)

    def create(self, *, values: Mapping[str, Any]) -> Record:
        payload = {c: values.get(c) for c in self._schema.columns}
        with _store_errors():
            resp = self._table().insert(payload).execute()
        record = self._first(resp.data)
        if record is None:
            raise StoreError(f"insert into {self._schema.table} returned no row")
        return record

    def replace(self, *, record_id: int, values: Mapping[str, Any]) -> Optional[Record]:
        payload = {c: values.get(c) for c in self._schema.columns}
        with _store_errors():
            resp = self._table().update(payload).eq("id", int(record_id)).execute()
        return self._first(resp.data)

    def delete(self, *, record_id: int) -> bool:
        with _store_errors():
            resp = self._table().delete().eq("id", int(record_id)).execute()
        return bool(resp.data)

    def count(self) -> int:
        with _store_errors():
            resp = self._table().select("id", count="exact").limit(1).execute()
        return int(resp.count or 0)
