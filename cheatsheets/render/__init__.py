"""Markdown rendering: markdown-it parser, dialect rules and highlighter."""

from cheatsheets.render.highlight import (
    BaseHighlighter,
    HighlightError,
    NullHighlighter,
    PygmentsHighlighter,
    create_highlighter,
)
from cheatsheets.render.renderer import MarkdownRenderer
from cheatsheets.render.rules import is_safe_url
from cheatsheets.render.theme import DEFAULT_THEME, Theme

__all__ = [
    "BaseHighlighter",
    "DEFAULT_THEME",
    "HighlightError",
    "MarkdownRenderer",
    "NullHighlighter",
    "PygmentsHighlighter",
    "Theme",
    "create_highlighter",
    "is_safe_url",
]
