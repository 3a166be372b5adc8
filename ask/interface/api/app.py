"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ask.config import Settings
from ask.interface.api.errors import register_error_handlers
from ask.interface.api.middleware import RequestLoggingMiddleware
from ask.interface.api.routes import answers, auth, health, notifications, questions
from ask.util.di.container import create_container, setup_di
from ask.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the FastAPI application.

    Logfire should be configured before calling this (start_app.py does).

    Args:
        container: DI container to use; the production container when omitted

    Returns:
        Configured application
    """
    settings = Settings()
    settings.check_secrets()

    app_instance = FastAPI(
        title="Ask API",
        description="Backend API for a question and answer board",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(RequestLoggingMiddleware)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,  # Session cookie
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(notifications.router)

    return app_instance
