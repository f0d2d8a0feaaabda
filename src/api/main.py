"""FastAPI application entry point for the contract signature API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src import __version__
from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.signatures import router as signatures_router
from src.api.startup import run_startup
from src.bootstrap.signature_state import shutdown_signature_state_service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire services on startup and release them on shutdown."""
    run_startup()
    yield
    await shutdown_signature_state_service()


app = FastAPI(
    title="Contract Signature State API",
    description="Signature state and edit gate for contracts",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)
app.include_router(signatures_router)
