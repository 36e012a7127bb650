# genshin_gateway/shared/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "genshin-data-gateway"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "genshin-data-gateway"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Upstream Repositories ---
    # Per-record and index JSON live in genshin-db, gzipped bulk archives in genshin-db-dist.
    DATA_REPO_URL: str = "https://raw.githubusercontent.com/theBowja/genshin-db/refs/heads"
    DIST_REPO_URL: str = "https://raw.githubusercontent.com/theBowja/genshin-db-dist/refs/heads"
    DEFAULT_BRANCH: str = "main"

    # None disables the client-side timeout; the hosting runtime bounds the request.
    UPSTREAM_TIMEOUT: Optional[float] = None
    USER_AGENT: str = "genshin-data-gateway/1.0"

    # --- Help Payload ---
    # Public origin used when rendering example URLs.
    PUBLIC_BASE_URL: str = "https://data.genshin.pw"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
