"""Site configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import os
import re

import yaml


def _expand_env_var(value: str) -> str:
    """Expand environment variables in the form ${VAR:-default}.

    Args:
        value: String possibly containing ${VAR:-default}

    Returns:
        Expanded string with environment variable or default value
    """
    if not isinstance(value, str):
        return value

    # Match ${VAR:-default} or ${VAR-default}
    pattern = r"\$\{([^:}]+):-?([^}]*)\}"

    def replace_env(match):
        var_name = match.group(1)
        default_value = match.group(2)
        return os.environ.get(var_name, default_value)

    return re.sub(pattern, replace_env, value)


def _expand_env(value):
    """Recursively expand env vars in strings inside dicts/lists."""
    if isinstance(value, str):
        return _expand_env_var(value)
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    return value


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ContentConfig:
    """Content corpus configuration."""

    content_dir: str = "content/cheatsheets"
    file_extension: str = ".md"
    default_description: str = "Cheatsheet"
    default_category: str = "Programming Language"


@dataclass
class RenderConfig:
    """Markdown rendering configuration."""

    default_language: str = "javascript"
    highlight: bool = True
    highlight_style: str = "github-dark"
    cache_size: int = 0


@dataclass
class APIConfig:
    """HTTP API configuration."""

    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class Config:
    """Main configuration class."""

    content: ContentConfig = field(default_factory=ContentConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    api: APIConfig = field(default_factory=APIConfig)
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.content.file_extension.startswith("."):
            raise ValueError(
                f"file_extension must start with '.', got {self.content.file_extension!r}"
            )
        if self.render.cache_size < 0:
            raise ValueError("render.cache_size must be >= 0")

    def content_path(self, base: Path | None = None) -> Path:
        """Resolve the content directory.

        Relative paths are resolved against ``base`` (default: current directory).
        """
        return resolve_path(self.content.content_dir, base)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {path}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create config from dictionary."""
        data = _expand_env(data)

        content_data = data.get("content", {}) or {}
        render_data = data.get("render", {}) or {}
        api_data = data.get("api", {}) or {}

        defaults = ContentConfig()
        content = ContentConfig(
            content_dir=str(content_data.get("content_dir", defaults.content_dir)),
            file_extension=content_data.get("file_extension", defaults.file_extension),
            default_description=content_data.get(
                "default_description", defaults.default_description
            ),
            default_category=content_data.get(
                "default_category", defaults.default_category
            ),
        )

        render = RenderConfig(
            default_language=render_data.get("default_language", "javascript"),
            highlight=_as_bool(render_data.get("highlight", True)),
            highlight_style=render_data.get("highlight_style", "github-dark"),
            cache_size=int(render_data.get("cache_size", 0)),
        )

        cors_origins = api_data.get("cors_origins", ["*"])
        if isinstance(cors_origins, str):
            cors_origins = [o.strip() for o in cors_origins.split(",") if o.strip()]

        return cls(
            content=content,
            render=render,
            api=APIConfig(cors_origins=list(cors_origins)),
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Load config from environment variables."""
        return cls(
            content=ContentConfig(
                content_dir=os.environ.get("CHEATSHEETS_CONTENT_DIR", "content/cheatsheets"),
                default_description=os.environ.get(
                    "CHEATSHEETS_DEFAULT_DESCRIPTION", "Cheatsheet"
                ),
                default_category=os.environ.get(
                    "CHEATSHEETS_DEFAULT_CATEGORY", "Programming Language"
                ),
            ),
            render=RenderConfig(
                default_language=os.environ.get("CHEATSHEETS_DEFAULT_LANGUAGE", "javascript"),
                highlight=_as_bool(os.environ.get("CHEATSHEETS_HIGHLIGHT", "true")),
                highlight_style=os.environ.get("CHEATSHEETS_HIGHLIGHT_STYLE", "github-dark"),
                cache_size=int(os.environ.get("CHEATSHEETS_CACHE_SIZE", "0")),
            ),
            api=APIConfig(
                cors_origins=[
                    o.strip()
                    for o in os.environ.get("CHEATSHEETS_CORS_ORIGINS", "*").split(",")
                    if o.strip()
                ]
            ),
            log_level=os.environ.get("CHEATSHEETS_LOG_LEVEL", "INFO").upper(),
        )


def load_config(path: str | Path | None = None) -> Config:
    """Load config from a YAML file or environment variables.

    Args:
        path: Path to YAML config file. If None or missing, environment
            variables are used instead.

    Returns:
        Config object
    """
    if path is not None and Path(path).exists():
        return Config.from_yaml(path)
    return Config.from_env()


def resolve_path(value: str, base: Path | None = None) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    base = base or Path.cwd()
    return (base / path).resolve()
