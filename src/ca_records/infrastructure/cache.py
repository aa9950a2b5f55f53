"""RedisCacheStore: one Redis hash per record.

HGETALL answers a miss with {}; that is reported as None per the
CacheStoreProtocol contract. Writes go through a MULTI/EXEC pipeline that
replaces the whole hash (DEL + HSET, plus the optional EXPIRE), so stale
fields from an earlier writer never survive into the new entry.

Any refused write (OOM under noeviction, READONLY replica, EXECABORT) is
reported as BackendUnavailableError, same as a lost connection.
"""

from collections.abc import Mapping

import redis.asyncio as aioredis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from src.ca_common.errors import BackendUnavailableError

_UNAVAILABLE = (RedisConnectionError, RedisTimeoutError, OSError)
_WRITE_FAILED = (RedisError, OSError)


class RedisCacheStore:
    def __init__(self, client: aioredis.Redis, ttl_seconds: int | None = None) -> None:
        self._client = client
        self._ttl_seconds = ttl_seconds

    async def hash_get(self, key: str) -> dict[str, str] | None:
        try:
            entry = await self._client.hgetall(key)
        except _UNAVAILABLE as exc:
            raise BackendUnavailableError("cache", str(exc)) from exc
        return entry or None

    async def hash_set(self, key: str, fields: Mapping[str, str]) -> None:
        if not fields:
            raise ValueError(f"Refusing to cache an empty entry for {key}")
        try:
            async with self._client.pipeline(transaction=True) as pipe:
                pipe.delete(key)
                pipe.hset(key, mapping=dict(fields))
                if self._ttl_seconds:
                    pipe.expire(key, self._ttl_seconds)
                await pipe.execute()
        except _WRITE_FAILED as exc:
            raise BackendUnavailableError("cache", str(exc)) from exc

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except _UNAVAILABLE as exc:
            raise BackendUnavailableError("cache", str(exc)) from exc
