"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance, wires the remote
API adapter and calculator session, and manages lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.concurrency import run_in_threadpool

from src.adapters.connectivity import ConnectivityMonitor, HealthCheckProbe
from src.adapters.eosb_api import HttpEosbApi
from src.api.dependencies import get_api
from src.api.models import HealthResponse
from src.api.v1 import router as v1_router
from src.config.settings import Settings, get_settings
from src.domain.calculator import CalculatorSession
from src.domain.ports import EosbApi

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "UAE Gratuity Calculator API v1 - Form configuration and EOSB calculation",
    },
]


def create_app(api: EosbApi | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        api: Remote API adapter; an HttpEosbApi is created on startup if omitted
        settings: Settings override; cached environment settings if omitted
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        FastAPI lifespan context manager.

        Manages application startup and shutdown:
        - Creates the remote API adapter and calculator session on startup
        - Loads the form configuration on startup (in the threadpool)
        - Creates the connectivity monitor, polling it when enabled
        - Stops the monitor and closes the adapter on shutdown
        """
        config = settings or get_settings()
        logging.getLogger().setLevel(config.log_level.upper())

        logger.info("Starting application...")
        remote = api
        if remote is None:
            logger.info("Using EOSB API at %s", config.api_base_url)
            remote = HttpEosbApi(config.api_base_url, timeout=config.request_timeout_seconds)

        session = CalculatorSession(api=remote)
        app.state.api = remote
        app.state.session = session

        # Client reports and background polls share this monitor
        monitor = ConnectivityMonitor(HealthCheckProbe(remote), listeners=[session.connectivity_changed])
        app.state.monitor = monitor

        logger.info("Loading configuration...")
        await run_in_threadpool(session.load_configuration)

        monitor_thread = stop_event = None
        if config.connectivity_poll_seconds > 0:
            monitor_thread, stop_event = monitor.start(config.connectivity_poll_seconds)

        logger.info("Application startup complete")

        yield

        # Shutdown
        logger.info("Shutting down application...")
        if stop_event is not None:
            stop_event.set()
            await run_in_threadpool(monitor_thread.join, config.request_timeout_seconds)
        if api is None:
            await run_in_threadpool(remote.close)
        logger.info("Remote API client closed")

    app = FastAPI(
        title="gratuity-client",
        description="UAE Gratuity Calculator - Collects employment data and presents "
        "End-of-Service-Benefit calculations from the remote EOSB API",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    # Include v1 API routes
    app.include_router(v1_router, prefix="/v1")

    @app.get("/health", response_model=HealthResponse)
    def health_check(remote: EosbApi = Depends(get_api)) -> HealthResponse:
        """
        Health check endpoint with remote API validation.

        Always returns 200; status is "degraded" when the remote API
        health endpoint is unavailable.
        """
        reachable = remote.check_health()
        return HealthResponse(status="healthy" if reachable else "degraded", remote=reachable)

    return app


app = create_app()
