# genshin_gateway/adapters/api/main.py
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from genshin_gateway import __version__
from genshin_gateway.adapters.api.routes import router as gateway_router
from genshin_gateway.shared.config import settings
from genshin_gateway.shared.container import container
from genshin_gateway.shared.logging_config import configure_logging
from genshin_gateway.shared.telemetry import instrument_fastapi, setup_telemetry

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: Tracing, help payload.
    2. Shutdown: nothing to release; upstream clients live per request.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)

    # Build the static help payload eagerly so the first error is not slower
    container.help_catalog()

    logger.info("app_startup", env=settings.APP_ENV.value, data_repo=settings.DATA_REPO_URL)

    yield

    logger.info("app_shutdown")

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    # Every non-root path belongs to the gateway, so docs only exist in debug mode
    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Language-aware relay for the genshin-db data repositories",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app)

    app.include_router(gateway_router)

    return app

# Entry point for local debugging (e.g. `python -m genshin_gateway.adapters.api.main`)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "genshin_gateway.adapters.api.main:create_app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        factory=True
    )
