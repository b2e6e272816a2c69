"""Domain entities for the cheatsheet catalog.

This module contains immutable data structures that represent the documents
served by the site: listing entries and fully rendered cheatsheets.
"""

from cheatsheets.domain.cheatsheet import Cheatsheet, CheatsheetSummary

__all__ = ["Cheatsheet", "CheatsheetSummary"]
