"""
FastAPI application factory and uvicorn entry point.

Dependencies: fastapi, uvicorn, scm_backend.api.routers
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scm_backend.boundary.db import create_tables, get_async_engine
from scm_backend.configs import get_settings
from scm_backend.observability import configure_logging
from scm_backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    admin_kyc_router,
    health_router,
    integrations_router,
    kyc_router,
    notifications_router,
    onboarding_router,
    webhooks_router,
)

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.database.create_tables:
        await create_tables()
        logger.info("Database tables ensured")
    logger.info(f"Supply-chain API starting ({settings.environment})")

    yield

    await get_async_engine().dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Build the application. Lifespan work (logging, engine) only runs when
    the app is served, so tests can create apps freely.
    """
    app = FastAPI(
        title="Supply Chain Integration API",
        description="Vendor integrations, notifications, KYC and onboarding",
        version="0.1.0",
        lifespan=lifespan,
    )

    origins = get_settings().cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID"],
    )
    # Added last so it runs first and the request log carries the correlation id
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    for router in (
        health_router,
        integrations_router,
        notifications_router,
        kyc_router,
        admin_kyc_router,
        onboarding_router,
        webhooks_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("scm_backend.api.main:app", host=settings.api_host, port=settings.api_port)
