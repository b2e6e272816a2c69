"""Listing queries: text search and category filter."""

from __future__ import annotations

from typing import Iterable

from cheatsheets.domain.cheatsheet import CheatsheetSummary

ALL_CATEGORIES = "All"


def filter_cheatsheets(
    cheatsheets: Iterable[CheatsheetSummary],
    query: str = "",
    category: str | None = None,
) -> list[CheatsheetSummary]:
    """Filter a listing by search text and category.

    Args:
        cheatsheets: Listing to filter (order is preserved)
        query: Case-insensitive substring matched against title or description
        category: Exact category name; None, empty or "All" matches every category

    Returns:
        Matching summaries
    """
    needle = (query or "").strip().casefold()
    wanted = None if not category or category == ALL_CATEGORIES else category

    results = []
    for sheet in cheatsheets:
        matches_search = (
            not needle
            or needle in sheet.title.casefold()
            or needle in sheet.description.casefold()
        )
        matches_category = wanted is None or sheet.category == wanted
        if matches_search and matches_category:
            results.append(sheet)
    return results


def list_categories(cheatsheets: Iterable[CheatsheetSummary]) -> list[str]:
    """Return "All" followed by the distinct categories in sorted order."""
    return [ALL_CATEGORIES, *sorted({sheet.category for sheet in cheatsheets})]
