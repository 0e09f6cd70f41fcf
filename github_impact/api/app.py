from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from github_impact.api.errors import register_exception_handlers
from github_impact.api.routes import router as api_router
from github_impact.core.config import settings
from github_impact.core.logging import setup_logging
from github_impact.services.github_service import GitHubService
from github_impact.services.leaderboard_service import LeaderboardService

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    # Startup
    setup_logging(settings.log_level, json_logs=not settings.is_development)
    if not settings.github_token:
        logger.warning(
            "GITHUB_TOKEN is not set; GitHub API limited to 60 requests per hour",
        )
    logger.info("Application started", environment=settings.environment)
    yield
    # Shutdown
    logger.info("Application stopped", leaderboard_size=app.state.leaderboard.size())


def create_app(
    github: GitHubService | None = None,
    leaderboard: LeaderboardService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Rank GitHub users by the impact of their recent public activity",
        lifespan=lifespan,
    )

    # Shared for the lifetime of the process
    app.state.github = github or GitHubService()
    app.state.leaderboard = leaderboard or LeaderboardService()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": settings.app_version}

    return app


app = create_app()
