"""FastAPI dependencies wiring the resolver to the real stores.

Tests replace get_resolver / get_health_probe via app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends

from config.settings import settings
from src.ca_common.database import async_session_factory
from src.ca_common.redis_client import get_redis
from src.ca_records.application.health import HealthProbe
from src.ca_records.application.resolver import ReadThroughResolver
from src.ca_records.domain.schema import default_registry
from src.ca_records.infrastructure.cache import RedisCacheStore
from src.ca_records.infrastructure.source import SqlSourceStore

_registry = default_registry()


def get_source_store() -> SqlSourceStore:
    return SqlSourceStore(async_session_factory)


async def get_cache_store() -> RedisCacheStore:
    return RedisCacheStore(await get_redis(), ttl_seconds=settings.CACHE_TTL_SECONDS)


def get_resolver(
    source: Annotated[SqlSourceStore, Depends(get_source_store)],
    cache: Annotated[RedisCacheStore, Depends(get_cache_store)],
) -> ReadThroughResolver:
    return ReadThroughResolver(source, cache, _registry)


def get_health_probe(
    source: Annotated[SqlSourceStore, Depends(get_source_store)],
    cache: Annotated[RedisCacheStore, Depends(get_cache_store)],
) -> HealthProbe:
    return HealthProbe(source, cache)
