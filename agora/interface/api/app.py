"""FastAPI application factory."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agora.config import Settings
from agora.interface.api.routes import (
    comments,
    communities,
    health,
    posts,
    users,
    votes,
)
from agora.interface.error import register_error_handlers
from agora.util.di.container import create_container
from agora.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    communities.router,
    posts.router,
    comments.router,
    votes.router,
    users.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the API.

    Logfire must already be configured; ``scripts/start_app.py`` does this
    before handing the factory to uvicorn.

    Args:
        container: DI container, the production one when omitted
    """
    settings = Settings()

    app = FastAPI(
        title="Agora API",
        description="Communities, posts, comments, votes and karma",
        version="0.1.0",
    )
    instrument_fastapi(app)

    # The browser client authenticates with the auth_token cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_dishka(container or create_container(), app)
    register_error_handlers(app)
    for router in ROUTERS:
        app.include_router(router)

    return app
