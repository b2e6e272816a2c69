"""Syntax highlighting for fenced code blocks."""

from abc import ABC, abstractmethod

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound


class HighlightError(Exception):
    """Raised when a code block cannot be highlighted."""


class BaseHighlighter(ABC):
    """Abstract base class for highlighters.

    The renderer treats any failure as recoverable and falls back to an
    escaped ``<pre><code>`` block.
    """

    @abstractmethod
    def highlight(self, code: str, language: str) -> str:
        """Convert code into highlighted HTML.

        Args:
            code: Raw (unescaped) source code
            language: Language name or alias (e.g., "python", "js")

        Returns:
            HTML string with all code text escaped

        Raises:
            HighlightError: If the language is not supported
        """
        pass


class PygmentsHighlighter(BaseHighlighter):
    """Highlighter backed by Pygments with inline styles."""

    def __init__(self, style: str = "github-dark"):
        """Initialize highlighter.

        Args:
            style: Pygments style name

        Raises:
            ValueError: If the style does not exist
        """
        try:
            get_style_by_name(style)
        except ClassNotFound as e:
            raise ValueError(f"Unknown highlight style: {style}") from e
        self.style = style

    def highlight(self, code: str, language: str) -> str:
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound as e:
            raise HighlightError(f"Unsupported language: {language}") from e

        formatter = HtmlFormatter(style=self.style, noclasses=True, cssclass="highlight")
        return pygments_highlight(code, lexer, formatter).rstrip("\n")


class NullHighlighter(BaseHighlighter):
    """Highlighter used when highlighting is disabled."""

    def highlight(self, code: str, language: str) -> str:
        raise HighlightError("Highlighting is disabled")


def create_highlighter(enabled: bool = True, style: str = "github-dark") -> BaseHighlighter:
    """Create highlighter from render settings.

    Args:
        enabled: Whether code blocks are highlighted at all
        style: Pygments style name

    Returns:
        BaseHighlighter instance
    """
    if not enabled:
        return NullHighlighter()
    return PygmentsHighlighter(style=style)
