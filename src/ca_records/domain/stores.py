"""Store Protocols: dependency inversion for testability.

Unit tests inject fakes that conform to these Protocols.
Infrastructure layer provides the SQL and Redis implementations.

Cache contract (every backend must honour it):
  - hash_get returns None on a miss. Backends that answer a miss with an
    empty collection (Redis HGETALL does) must translate it to None, so an
    empty entry and an absent entry are indistinguishable to callers.
  - hash_set writes the whole mapping in one atomic step; a reader never
    observes a partially written entry.
  - Connectivity failures raise BackendUnavailableError. So does any write
    the cache refuses (out of memory, read-only replica, aborted MULTI), so
    the resolver can treat every failed populate the same way.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from src.ca_records.domain.schema import RecordSchema


class SourceStoreProtocol(Protocol):
    async def query_row(
        self, schema: RecordSchema, record_id: int
    ) -> Mapping[str, Any] | None: ...

    async def ping(self) -> bool: ...


class CacheStoreProtocol(Protocol):
    async def hash_get(self, key: str) -> dict[str, str] | None: ...

    async def hash_set(self, key: str, fields: Mapping[str, str]) -> None: ...

    async def ping(self) -> bool: ...
