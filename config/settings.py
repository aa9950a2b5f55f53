from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Source of record (defaults match a local docker-compose Postgres)
    DATABASE_URL: str = "postgresql+asyncpg://hr:hr@localhost:5432/hr"
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 5
    DATABASE_CONNECT_TIMEOUT: float = 5.0

    # Cache
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_SOCKET_TIMEOUT: float = 2.0
    # None = entries never expire; staleness after source updates is accepted
    CACHE_TTL_SECONDS: int | None = None

    # App
    APP_NAME: str = "Cache-Aside Records"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


settings = Settings()
