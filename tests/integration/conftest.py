"""Integration-test fixtures.

All integration tests share a single event-loop so that the module-level
SQLAlchemy async engine pool and Redis pool (both created at import time)
remain valid across the entire test session. Skipped unless both
DATABASE_URL and REDIS_URL answer.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text

from src.ca_common.database import async_session_factory, engine
from src.ca_common.redis_client import close_redis, get_redis
from src.ca_records.application.health import HealthProbe
from src.ca_records.infrastructure.cache import RedisCacheStore
from src.ca_records.infrastructure.source import SqlSourceStore

TEST_KEYS = ("emp:1", "emp:2", "emp:999")

_CREATE_EMP_SQL = text("""
    CREATE TABLE emp (
        empno    INTEGER PRIMARY KEY,
        fname    VARCHAR(30),
        lname    VARCHAR(30),
        job      VARCHAR(40),
        mgr      INTEGER,
        hiredate DATE,
        sal      NUMERIC(10, 4),
        comm     NUMERIC(10, 4),
        dept     INTEGER
    )
""")

_INSERT_EMP_SQL = text("""
    INSERT INTO emp VALUES
        (1, 'Virag', 'Tripathi', 'PFE', 19, DATE '2018-08-05', 90101.34, 1235.13, 96),
        (2, 'Ada', 'Lovelace', 'ENG', 19, DATE '2019-01-14', 120000.00, NULL, 96)
""")


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def stores() -> tuple[SqlSourceStore, RedisCacheStore]:
    redis = await get_redis()
    source = SqlSourceStore(async_session_factory)
    cache = RedisCacheStore(redis)

    readiness = await HealthProbe(source, cache).check_ready()
    if not readiness.ready:
        await close_redis()
        await engine.dispose()
        pytest.skip(f"backing stores not reachable: {readiness.to_dict()}")

    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS emp"))
        await conn.execute(_CREATE_EMP_SQL)
        await conn.execute(_INSERT_EMP_SQL)
    await redis.delete(*TEST_KEYS)

    yield source, cache

    await redis.delete(*TEST_KEYS)
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE IF EXISTS emp"))
    await close_redis()
    await engine.dispose()
