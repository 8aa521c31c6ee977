from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cryptograms.api.v1.router import api_router
from cryptograms.core.config import get_settings
from cryptograms.core.logging import configure_logging
from cryptograms.db.session import dispose_db, init_db
from cryptograms.dependencies import get_quote_corpus, get_word_corpus


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    settings = get_settings()

    # Startup: fail fast on missing or empty corpora
    get_word_corpus(settings).load()
    get_quote_corpus(settings).load()
    await init_db()
    yield
    # Shutdown
    await dispose_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Cryptogram API. "
            "Generate classical cipher puzzles from quotes or your own text, "
            "and uniquely solvable cryptarithms from a word list."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cryptograms.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
