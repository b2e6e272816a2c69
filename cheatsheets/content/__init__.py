"""Cheatsheet corpus access: metadata parsing, loading and listing queries."""

from cheatsheets.content.frontmatter import MetadataDefaults, parse_frontmatter, resolve_metadata
from cheatsheets.content.loader import CheatsheetLoader
from cheatsheets.content.search import ALL_CATEGORIES, filter_cheatsheets, list_categories

__all__ = [
    "ALL_CATEGORIES",
    "CheatsheetLoader",
    "MetadataDefaults",
    "filter_cheatsheets",
    "list_categories",
    "parse_frontmatter",
    "resolve_metadata",
]
