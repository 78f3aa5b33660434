import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from numstats.api import health, stats
from numstats.config import Settings
from numstats.observability.metrics import MetricsMiddleware, metrics_router
from numstats.observability.logging import setup_logging
from numstats.services.descriptive import StatisticsEngine
from numstats.services.sources import FileNumberSource, InMemoryNumberSource, NumberSource

logger = logging.getLogger(__name__)

# Lifespan handler: the app reports ready only between startup and shutdown
@asynccontextmanager
async def app_lifespan(app: FastAPI):
    app.state.ready = True
    logger.info("Serving statistics from %r", app.state.engine.source)
    yield
    app.state.ready = False

def build_source(settings: Settings) -> NumberSource:
    """File-backed source if a path is configured, an empty in-memory one otherwise."""
    if settings.source_path:
        return FileNumberSource(settings.source_path, encoding=settings.source_encoding)
    logger.warning("NUMSTATS_SOURCE_PATH is not set; serving an empty in-memory source")
    return InMemoryNumberSource()

# Factory function to create the FastAPI app
def create_app(settings: Settings | None = None, source: NumberSource | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    app = FastAPI(
        title="numstats",
        version="1.0.0",
        lifespan=app_lifespan,
    )
    app.add_middleware(MetricsMiddleware)
    app.include_router(metrics_router)     # /metrics
    app.include_router(health.router)      # /health and /ready
    app.include_router(stats.router)       # /stats/mean, /stats/median, /stats/mode

    # The engine borrows the source; it is shared by all requests
    app.state.engine = StatisticsEngine(source if source is not None else build_source(settings))
    app.state.ready = False
    app.state.ready_flag = lambda: app.state.ready

    return app

app = create_app()
