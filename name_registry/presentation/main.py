"""FastAPI Application Entry Point

Usage:
    uvicorn name_registry.presentation.main:app --reload
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from name_registry.infrastructure.config import Settings, get_settings
from name_registry.infrastructure.repositories import InMemoryNameRepository
from name_registry.presentation.api.routes import health_routes, name_routes
from name_registry.presentation.middleware.error_handler import error_handlers
from name_registry.presentation.middleware.logging import LoggingMiddleware

logger = structlog.get_logger()


def configure_logging(log_level: str = "INFO") -> None:
    """構造化ログを設定"""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """アプリケーションのライフサイクル管理"""
    settings: Settings = app.state.settings
    logger.info(
        "application_starting",
        service=settings.service_name,
        environment=settings.environment,
        store_backend=settings.store_backend,
        table_name=settings.dynamodb_table_name,
    )
    yield
    logger.info("application_shutting_down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI アプリケーションを作成"""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Name Registry",
        description="Name list backed by Amazon DynamoDB",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )
    app.state.settings = settings

    # インメモリ構成ではアプリケーション単位でストアを保持する
    if settings.store_backend == "memory":
        app.state.name_repository = InMemoryNameRepository()

    # Middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(SessionMiddleware, secret_key=settings.session_secret_key)

    # Error Handlers
    for exception_class, handler in error_handlers.items():
        app.add_exception_handler(exception_class, handler)

    # Routes
    app.include_router(health_routes.router, tags=["Health"])
    app.include_router(name_routes.router, tags=["Names"])

    return app


app = create_app()
