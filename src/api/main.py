"""FastAPI application entry point for the Publication Registry."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src import __version__
from src.api.dependencies.publication import get_registry_config
from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.health import router as health_router
from src.api.routes.publication import router as publication_router
from src.api.startup import run_startup


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup hooks before serving requests."""
    run_startup(get_registry_config())
    yield


app = FastAPI(
    title="Publication Registry API",
    description="Publication metadata, access permissions and usage counters",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(health_router)
app.include_router(publication_router)
