"""Readiness probe for both backing stores.

Run once at startup (and by GET /health), never on the per-request path.
"""

import logging
from dataclasses import dataclass

from src.ca_common.errors import AppError, BackendUnavailableError
from src.ca_records.domain.stores import CacheStoreProtocol, SourceStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Readiness:
    cache_ready: bool
    source_ready: bool

    @property
    def ready(self) -> bool:
        return self.cache_ready and self.source_ready

    def to_dict(self) -> dict[str, bool]:
        return {
            "ready": self.ready,
            "cache_ready": self.cache_ready,
            "source_ready": self.source_ready,
        }


class HealthProbe:
    def __init__(self, source: SourceStoreProtocol, cache: CacheStoreProtocol) -> None:
        self._source = source
        self._cache = cache

    async def check_ready(self) -> Readiness:
        return Readiness(
            cache_ready=await self._ping("cache", self._cache),
            source_ready=await self._ping("source", self._source),
        )

    async def ensure_ready(self) -> Readiness:
        """Fail fast: raise BackendUnavailableError unless both stores answer."""
        readiness = await self.check_ready()
        if not readiness.ready:
            down = [
                name
                for name, ok in (("cache", readiness.cache_ready), ("source", readiness.source_ready))
                if not ok
            ]
            raise BackendUnavailableError(" + ".join(down), "readiness check failed")
        return readiness

    @staticmethod
    async def _ping(name: str, store: CacheStoreProtocol | SourceStoreProtocol) -> bool:
        try:
            ok = await store.ping()
        except (AppError, OSError) as exc:
            logger.warning("Readiness: %s ping failed: %s", name, exc)
            return False
        if not ok:
            logger.warning("Readiness: %s ping returned %r", name, ok)
        return bool(ok)
