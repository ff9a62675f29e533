"""FastAPI application entry point and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from cardsets import __version__
from cardsets.api.cards_router import router as cards_router
from cardsets.api.learnings_router import router as learnings_router
from cardsets.api.sets_router import router as sets_router
from cardsets.api.usersets_router import router as usersets_router
from cardsets.config import Settings, settings as default_settings
from cardsets.database import Database
from cardsets.exceptions import CardSetsError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create tables on startup and release the engine on shutdown."""
    database: Database = app.state.database
    await database.create_all()
    yield
    await database.dispose()


async def cardsets_error_handler(request: Request, exc: CardSetsError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around its own ``Database`` instance.

    The database lives on ``app.state.database`` and is handed to request
    handlers through the ``get_session`` dependency.
    """
    settings = settings or default_settings

    app = FastAPI(
        title=settings.app_name,
        description="Flashcard sets, favorites and learning progress",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings.database_url, echo=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CardSetsError, cardsets_error_handler)  # type: ignore[arg-type]

    app.include_router(sets_router)
    app.include_router(usersets_router)
    app.include_router(cards_router)
    app.include_router(learnings_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Check database connectivity and return status."""
        database: Database = app.state.database
        async with database.sessionmaker() as session:
            await session.execute(text("SELECT 1"))
        return {"status": "ok"}

    return app
