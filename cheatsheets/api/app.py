"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cheatsheets import __version__
from cheatsheets.api.dependencies import get_config
from cheatsheets.api.routes import categories, cheatsheets
from cheatsheets.config import Config
from cheatsheets.content.loader import CheatsheetLoader
from cheatsheets.utils import configure_logging

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Site configuration (default: loaded via CHEATSHEETS_CONFIG)

    Returns:
        FastAPI: Configured application
    """
    config = config or get_config()
    configure_logging(config.log_level)

    app = FastAPI(
        title="Cheatsheets API",
        description="Rendered markdown cheatsheets with search and category filters",
        version=__version__,
    )

    # Documents are read per request; the loader itself holds no open files.
    app.state.config = config
    app.state.loader = CheatsheetLoader.from_config(config)
    logger.info("Serving cheatsheets from %s", app.state.loader.content_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(cheatsheets.router, prefix="/api/v1")
    app.include_router(categories.router, prefix="/api/v1")

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
