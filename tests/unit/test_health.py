"""Tests for the readiness probe."""

import pytest

from src.ca_common.errors import BackendUnavailableError
from src.ca_records.application.health import HealthProbe, Readiness


class TestCheckReady:
    @pytest.mark.asyncio
    async def test_both_ready(self, source, cache) -> None:
        readiness = await HealthProbe(source, cache).check_ready()

        assert readiness == Readiness(cache_ready=True, source_ready=True)
        assert readiness.ready is True

    @pytest.mark.asyncio
    async def test_source_down(self, source, cache) -> None:
        source.available = False

        readiness = await HealthProbe(source, cache).check_ready()

        assert readiness.cache_ready is True
        assert readiness.source_ready is False
        assert readiness.ready is False

    @pytest.mark.asyncio
    async def test_cache_ping_false(self, source, cache) -> None:
        cache.read_available = False

        readiness = await HealthProbe(source, cache).check_ready()

        assert readiness.to_dict() == {"ready": False, "cache_ready": False, "source_ready": True}


class TestEnsureReady:
    @pytest.mark.asyncio
    async def test_returns_readiness_when_up(self, source, cache) -> None:
        readiness = await HealthProbe(source, cache).ensure_ready()
        assert readiness.ready

    @pytest.mark.asyncio
    async def test_raises_naming_down_stores(self, source, cache) -> None:
        source.available = False
        cache.read_available = False

        with pytest.raises(BackendUnavailableError) as exc_info:
            await HealthProbe(source, cache).ensure_ready()
        assert exc_info.value.backend == "cache + source"
