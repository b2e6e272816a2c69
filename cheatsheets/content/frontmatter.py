"""Metadata header (frontmatter) parsing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import yaml
from frontmatter.default_handlers import YAMLHandler

logger = logging.getLogger(__name__)

_handler = YAMLHandler()


@dataclass(frozen=True)
class MetadataDefaults:
    """Fallback values for fields missing from the header."""

    description: str = "Cheatsheet"
    category: str = "Programming Language"


def parse_frontmatter(text: str) -> tuple[dict, str]:
    """Split a document into its metadata header and markdown body.

    The header is a YAML block delimited by ``---`` lines at the very top of
    the file. Parsing is tolerant: a missing, unterminated or malformed
    header yields an empty mapping and the whole text as body.

    Args:
        text: Full file contents

    Returns:
        Tuple of (metadata dict, body text)
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n")
    if not _handler.detect(text):
        return {}, text

    try:
        header, body = _handler.split(text)
    except ValueError:
        logger.warning("Metadata header is not terminated; treating file as body")
        return {}, text

    try:
        data = _handler.load(header)
    except yaml.YAMLError as exc:
        logger.warning("Malformed metadata header: %s", exc)
        return {}, text

    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.warning("Metadata header is not a key/value mapping; ignoring it")
        return {}, text

    return data, body.lstrip("\n")


def _field(metadata: dict, key: str) -> str | None:
    value = metadata.get(key)
    if value is None or isinstance(value, (dict, list)):
        return None
    value = str(value).strip()
    return value or None


def resolve_metadata(
    metadata: dict,
    slug: str,
    defaults: MetadataDefaults | None = None,
) -> tuple[str, str, str]:
    """Apply per-field fallbacks to parsed header values.

    Args:
        metadata: Parsed header mapping (possibly empty)
        slug: Document slug, used as the title fallback
        defaults: Fallback description and category

    Returns:
        Tuple of (title, description, category), all non-empty
    """
    defaults = defaults or MetadataDefaults()
    title = _field(metadata, "title") or slug
    description = _field(metadata, "description") or defaults.description
    category = _field(metadata, "category") or defaults.category
    return title, description, category
