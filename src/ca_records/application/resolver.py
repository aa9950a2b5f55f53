"""ReadThroughResolver: the cache-aside read path.

    key = "<namespace>:<id>"
    cache hit (non-empty hash)  -> return it
    source has no row           -> NOT_FOUND, nothing cached
    otherwise                   -> encode row, populate cache, return fields

Stateless per call. Concurrent misses on the same key are not coalesced:
each queries the source and writes the cache, last write wins. Not-found is
never cached, so a row inserted upstream later becomes visible on the next
call without invalidation.
"""

import logging
import time
from dataclasses import dataclass

from src.ca_common.enums import LookupStatus
from src.ca_common.errors import BackendUnavailableError, RecordNotFoundError
from src.ca_records.domain.codec import encode
from src.ca_records.domain.keys import to_cache_key
from src.ca_records.domain.schema import SchemaRegistry, default_registry
from src.ca_records.domain.stores import CacheStoreProtocol, SourceStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lookup:
    status: LookupStatus
    key: str
    fields: dict[str, str] | None = None

    @property
    def found(self) -> bool:
        return self.status is not LookupStatus.NOT_FOUND


class ReadThroughResolver:
    def __init__(
        self,
        source: SourceStoreProtocol,
        cache: CacheStoreProtocol,
        registry: SchemaRegistry | None = None,
    ) -> None:
        self._source = source
        self._cache = cache
        self._registry = registry or default_registry()

    async def resolve(self, namespace: str, record_id: int) -> Lookup:
        """Return the record's fields, reading through to the source on a miss.

        NOT_FOUND is a normal result. InvalidIdError / UnknownNamespaceError
        are raised before any I/O; BackendUnavailableError from either read
        aborts the call. A failed cache write does not.
        """
        key = to_cache_key(namespace, record_id)
        schema = self._registry.get(namespace)

        entry = await self._cache.hash_get(key)
        if entry:
            logger.debug("Cache HIT: %s", key)
            return Lookup(LookupStatus.HIT, key, dict(entry))

        logger.info("Cache MISS: %s, querying %s", key, schema.table)
        started = time.perf_counter()
        row = await self._source.query_row(schema, record_id)
        logger.info("Source query for %s took %.1fms", key, (time.perf_counter() - started) * 1000)
        if row is None:
            logger.info("Record not found at source: %s", key)
            return Lookup(LookupStatus.NOT_FOUND, key)

        fields = encode(row, schema)

        started = time.perf_counter()
        try:
            await self._cache.hash_set(key, fields)
        except BackendUnavailableError as exc:
            # Caller already has a valid answer from the source
            logger.warning("Cache populate failed for %s: %s", key, exc.message)
        else:
            logger.info("Cached %s (%d fields) in %.1fms", key, len(fields), (time.perf_counter() - started) * 1000)
        return Lookup(LookupStatus.MISS, key, fields)

    async def get_fields(self, namespace: str, record_id: int) -> dict[str, str]:
        """Like resolve(), but NOT_FOUND raises RecordNotFoundError."""
        lookup = await self.resolve(namespace, record_id)
        if lookup.fields is None:
            raise RecordNotFoundError(namespace, record_id)
        return lookup.fields
