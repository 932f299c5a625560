"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from remark.config import Settings
from remark.interface.api.error import register_exception_handlers
from remark.interface.api.routes import comments, health, leads
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; start_app.py
    does it in production and tests/conftest.py does it for tests.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Remark API",
        description="Threaded comments with moderation and lead capture",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, "http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Disposition"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(leads.router)

    return app_instance
