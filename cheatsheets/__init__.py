"""Markdown cheatsheet catalog and renderer."""

__version__ = "0.1.0"

# Domain entities
from cheatsheets.domain.cheatsheet import Cheatsheet, CheatsheetSummary

# Configuration
from cheatsheets.config import Config, load_config

# Content access
from cheatsheets.content.loader import CheatsheetLoader
from cheatsheets.content.search import filter_cheatsheets, list_categories

# Rendering
from cheatsheets.render.renderer import MarkdownRenderer
from cheatsheets.render.highlight import PygmentsHighlighter

__all__ = [
    # Domain
    "Cheatsheet",
    "CheatsheetSummary",
    # Config
    "Config",
    "load_config",
    # Content
    "CheatsheetLoader",
    "filter_cheatsheets",
    "list_categories",
    # Rendering
    "MarkdownRenderer",
    "PygmentsHighlighter",
]
