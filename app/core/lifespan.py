"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, telemetry, DB engine
dispose). No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.telemetry import TelemetryConfig, get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


def _start_telemetry(app: FastAPI) -> None:
    settings = get_settings()
    telemetry = TelemetryConfig(
        service_name=settings.app_name,
        service_version=settings.app_version,
        enabled=True,
        environment=settings.telemetry_environment,
    )
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    set_telemetry(telemetry)
    telemetry.instrument_fastapi(app)
    telemetry.instrument_logging()
    if settings.database_url:
        database.get_session_factory()
        telemetry.instrument_sqlalchemy(database.engine)
    logger.info("Telemetry initialized")


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, then telemetry (if enabled). Shutdown: telemetry
    flush, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    if settings.telemetry_enabled:
        _start_telemetry(app)
    logger.info(
        "%s %s started (database %s)",
        settings.app_name,
        settings.app_version,
        "configured" if settings.database_url else "not configured",
    )

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")

    await database.dispose_engine()
