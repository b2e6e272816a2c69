"""Filesystem-backed cheatsheet loader."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from cheatsheets.content.frontmatter import MetadataDefaults, parse_frontmatter, resolve_metadata
from cheatsheets.domain.cheatsheet import Cheatsheet, CheatsheetSummary
from cheatsheets.render.highlight import create_highlighter
from cheatsheets.render.renderer import MarkdownRenderer
from cheatsheets.utils import collation_key

if TYPE_CHECKING:
    from cheatsheets.config import Config

logger = logging.getLogger(__name__)


class CheatsheetLoader:
    """Read cheatsheets from a content directory.

    Every call reads the files again; the corpus is edited out of band and
    nothing is written back. Neither operation raises for content problems:
    listing degrades to an empty list and a missing document is ``None``.
    """

    def __init__(
        self,
        content_dir: str | Path,
        renderer: MarkdownRenderer | None = None,
        extension: str = ".md",
        defaults: MetadataDefaults | None = None,
        cache_size: int = 0,
    ):
        """Initialize loader.

        Args:
            content_dir: Directory holding ``<slug>.md`` files
            renderer: Markdown renderer (default: renderer without highlighting)
            extension: File extension of cheatsheet sources
            defaults: Fallback description and category
            cache_size: Rendered bodies to keep in memory (0 disables caching)
        """
        self.content_dir = Path(content_dir)
        self._renderer = renderer or MarkdownRenderer()
        self._extension = extension
        self._defaults = defaults or MetadataDefaults()

        # Keyed by the body text, so editing a file invalidates its entry.
        self._render = self._renderer.render
        if cache_size > 0:
            self._render = lru_cache(maxsize=cache_size)(self._renderer.render)

    @classmethod
    def from_config(cls, config: "Config") -> "CheatsheetLoader":
        """Build loader, renderer and highlighter from configuration."""
        highlighter = create_highlighter(
            enabled=config.render.highlight,
            style=config.render.highlight_style,
        )
        renderer = MarkdownRenderer(
            highlighter=highlighter,
            default_language=config.render.default_language,
        )
        return cls(
            config.content_path(),
            renderer=renderer,
            extension=config.content.file_extension,
            defaults=MetadataDefaults(
                description=config.content.default_description,
                category=config.content.default_category,
            ),
            cache_size=config.render.cache_size,
        )

    def list_cheatsheets(self) -> list[CheatsheetSummary]:
        """List all cheatsheets sorted by title.

        Returns:
            Summaries sorted ascending by title (locale-aware), then slug.
            Empty when the content directory cannot be read.
        """
        try:
            paths = [
                path
                for path in self.content_dir.iterdir()
                if path.name.endswith(self._extension) and path.is_file()
            ]
        except OSError:
            logger.exception("Error reading cheatsheets from %s", self.content_dir)
            return []

        summaries = []
        for path in paths:
            slug = path.name[: -len(self._extension)]
            if not slug:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable cheatsheet %s: %s", path.name, e)
                continue

            metadata, _ = parse_frontmatter(text)
            title, description, category = resolve_metadata(metadata, slug, self._defaults)
            summaries.append(
                CheatsheetSummary(
                    slug=slug,
                    title=title,
                    description=description,
                    category=category,
                )
            )

        return sorted(summaries, key=lambda s: (collation_key(s.title), s.slug))

    def get_cheatsheet(self, slug: str) -> Cheatsheet | None:
        """Load and render a single cheatsheet.

        Args:
            slug: Document slug (filename without extension)

        Returns:
            Cheatsheet, or None when the slug is invalid or the file is
            missing or unreadable
        """
        path = self.path_for(slug)
        if path is None:
            logger.warning("Rejected invalid cheatsheet slug: %r", slug)
            return None

        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Cheatsheet not found: %s", slug)
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading cheatsheet %s: %s", slug, e)
            return None

        metadata, body = parse_frontmatter(text)
        title, description, category = resolve_metadata(metadata, slug, self._defaults)

        return Cheatsheet(
            slug=slug,
            title=title,
            description=description,
            category=category,
            content=body,
            content_html=self._render(body),
            frontmatter=metadata,
        )

    def path_for(self, slug: str) -> Path | None:
        """Map a slug to its source file, rejecting anything outside the directory."""
        if not slug or slug.startswith(".") or any(sep in slug for sep in ("/", "\\", "\0")):
            return None
        return self.content_dir / f"{slug}{self._extension}"
