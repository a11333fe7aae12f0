"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsdesk.config import Settings
from newsdesk.interface.api.routes import (
    articles,
    auth,
    comments,
    health,
    oauth,
    stars,
    users,
)
from newsdesk.interface.error import register_exception_handlers
from newsdesk.util.di.container import create_container, setup_di
from newsdesk.util.logging import setup_logging
from newsdesk.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function
    (scripts/start_app.py in production, conftest.py in tests).

    Args:
        container: DI container to serve from; the production container
            is built when omitted

    Returns:
        Configured application
    """
    settings = Settings()
    setup_logging(settings)

    # Outbound calls to the login providers
    instrument_httpx()

    app_instance = FastAPI(
        title="Newsdesk API",
        description="Backend API for the news site: articles, comments, stars and third-party login",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(oauth.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(articles.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(stars.router)

    return app_instance
