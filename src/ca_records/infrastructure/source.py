"""SqlSourceStore: the relational system of record.

All queries use raw text() SQL (no ORM). The SELECT is built from the
RecordSchema, whose table and field names are validated identifiers.
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from sqlalchemy import TextClause, text
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.ca_common.errors import BackendUnavailableError
from src.ca_records.domain.schema import RecordSchema

_PING_SQL = text("SELECT 1")

# Connectivity faults only; SQL errors (missing table, bad column) propagate
_UNAVAILABLE = (OperationalError, InterfaceError, OSError, TimeoutError)


@lru_cache(maxsize=64)
def _select_row_sql(schema: RecordSchema) -> TextClause:
    columns = ", ".join(schema.field_names)
    return text(
        f"SELECT {columns} FROM {schema.table} "  # noqa: S608
        f"WHERE {schema.primary_key} = :record_id"
    )


class SqlSourceStore:
    """Concrete source store: one short-lived session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def query_row(
        self, schema: RecordSchema, record_id: int
    ) -> Mapping[str, Any] | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    _select_row_sql(schema), {"record_id": record_id}
                )
                row = result.mappings().first()
        except _UNAVAILABLE as exc:
            raise BackendUnavailableError("source", str(exc)) from exc
        return dict(row) if row is not None else None

    async def ping(self) -> bool:
        try:
            async with self._session_factory() as session:
                result = await session.execute(_PING_SQL)
                return result.scalar() == 1
        except _UNAVAILABLE as exc:
            raise BackendUnavailableError("source", str(exc)) from exc
