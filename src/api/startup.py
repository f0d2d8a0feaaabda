"""Startup configuration for the contract signature API.

This module provides startup hooks that:
1. Load a local .env file, if present
2. Configure structured logging
3. Wire the signature state service singleton

Usage in FastAPI:
    @asynccontextmanager
    async def lifespan(app):
        run_startup()
        yield
"""

from dotenv import load_dotenv
from structlog import get_logger

from src.bootstrap.logging import configure_structlog
from src.bootstrap.signature_state import init_signature_state_service
from src.config.signature_cache_config import SignatureCacheConfig

logger = get_logger()


def configure_logging(config: SignatureCacheConfig) -> None:
    """Configure structured logging for the configured environment.

    Should be called first in the startup sequence, before any logging occurs.
    """
    configure_structlog(environment=config.environment)
    log = logger.bind(component="startup_logging")
    log.info("structured_logging_configured", environment=config.environment)


def run_startup() -> SignatureCacheConfig:
    """Run the startup sequence.

    Returns:
        The configuration the service was wired with.
    """
    load_dotenv()
    config = SignatureCacheConfig.from_environment()
    configure_logging(config)
    init_signature_state_service(config)
    return config
