"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.ca_common.database import async_session_factory, engine
from src.ca_common.errors import AppError
from src.ca_common.redis_client import close_redis, get_redis
from src.ca_common.request_log import RequestLogMiddleware
from src.ca_common.response import error_response
from src.ca_records.api.dependencies import get_health_probe
from src.ca_records.api.router import router as records_router
from src.ca_records.application.health import HealthProbe
from src.ca_records.infrastructure.cache import RedisCacheStore
from src.ca_records.infrastructure.source import SqlSourceStore

APP_VERSION = "0.1.0"

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: fail fast unless Postgres + Redis answer. Shutdown: dispose."""
    # Startup
    probe = HealthProbe(
        SqlSourceStore(async_session_factory),
        RedisCacheStore(await get_redis()),
    )
    readiness = await probe.ensure_ready()
    logger.info("Backing stores ready: %s", readiness.to_dict())
    yield
    # Shutdown
    await engine.dispose()
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version=APP_VERSION,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(records_router, prefix="/api/v1")


@app.get("/health")
async def health(
    probe: Annotated[HealthProbe, Depends(get_health_probe)],
) -> JSONResponse:
    readiness = await probe.check_ready()
    return JSONResponse(
        status_code=200 if readiness.ready else 503,
        content={**readiness.to_dict(), "version": APP_VERSION},
    )
