"""Hello Service – FastAPI application entry-point."""

from contextlib import AbstractAsyncContextManager, asynccontextmanager
import logging
from collections.abc import AsyncIterator, Callable

from fastapi import FastAPI

from src.hello_service.config import Settings, settings
from src.hello_service.router import health, root

logger = logging.getLogger(__name__)


def configure_logging(config: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# ──────────────────────────────────────────────
# Lifespan: announce serving on startup, log shutdown
# ──────────────────────────────────────────────
def _lifespan(config: Settings) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("🚀 Server running on port %s", config.port)
        yield
        logger.info("🛑 Shutting down …")

    return lifespan


# ──────────────────────────────────────────────
# Application factory
# ──────────────────────────────────────────────
def create_app(config: Settings) -> FastAPI:
    application = FastAPI(
        title="Hello Service",
        description="Greeting endpoint plus a health check for orchestrator probes.",
        version=config.app_version,
        lifespan=_lifespan(config),
    )

    # ── register routers ──
    application.include_router(root.router)
    application.include_router(health.router)
    return application


configure_logging(settings)
app = create_app(settings)
