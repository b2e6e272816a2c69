"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

import os
from functools import lru_cache

from fastapi import Request

from cheatsheets.config import Config, load_config
from cheatsheets.content.loader import CheatsheetLoader


@lru_cache
def get_config() -> Config:
    """Get cached configuration.

    Loads configuration from the file named by the CHEATSHEETS_CONFIG env
    var (default: config.yaml), falling back to environment variables when
    the file does not exist.

    Returns:
        Config: Application configuration
    """
    config_path = os.getenv("CHEATSHEETS_CONFIG", "config.yaml")
    return load_config(config_path)


def get_loader(request: Request) -> CheatsheetLoader:
    """Get the loader created at application startup.

    Returns:
        CheatsheetLoader bound to the configured content directory
    """
    return request.app.state.loader
