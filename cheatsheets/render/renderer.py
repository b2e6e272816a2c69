"""Markdown to HTML rendering."""

from __future__ import annotations

import logging

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll

from cheatsheets.render.highlight import BaseHighlighter, NullHighlighter
from cheatsheets.render.rules import (
    is_safe_url,
    limit_heading_levels,
    split_blockquote_lines,
    tables_need_rows,
)
from cheatsheets.render.theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


def _trim_blank_lines(code: str) -> str:
    lines = code.split("\n")
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(line.rstrip() for line in lines[start:end])


class MarkdownRenderer:
    """Render a cheatsheet body into a styled HTML fragment.

    The body is parsed once by markdown-it into a token stream and each
    token type is rendered by its own rule. Raw HTML in the source is
    escaped, never passed through. Rendering is deterministic and keeps no
    state between calls.
    """

    def __init__(
        self,
        highlighter: BaseHighlighter | None = None,
        theme: Theme | None = None,
        default_language: str = "javascript",
    ):
        """Initialize renderer.

        Args:
            highlighter: Code highlighter (default: no highlighting)
            theme: CSS class hooks (default: site theme)
            default_language: Language for fences without a tag
        """
        self._highlighter = highlighter or NullHighlighter()
        self._theme = theme or DEFAULT_THEME
        self.default_language = default_language
        self._md = self._create_parser()

    def _create_parser(self) -> MarkdownIt:
        md = (
            MarkdownIt("commonmark", {"html": False, "xhtmlOut": False})
            .enable("table")
            .disable("lheading")
        )
        md.validateLink = is_safe_url

        md.core.ruler.after("block", "heading_levels", limit_heading_levels)
        md.core.ruler.after("heading_levels", "blockquote_lines", split_blockquote_lines)
        md.core.ruler.after("blockquote_lines", "table_rows", tables_need_rows)

        theme = self._theme
        rules = md.renderer.rules
        rules["heading_open"] = self._heading_open
        rules["table_open"] = self._table_open
        rules["table_close"] = self._table_close
        rules["fence"] = self._fence
        rules["softbreak"] = self._softbreak
        for token_type, css_class in (
            ("link_open", theme.link),
            ("blockquote_open", theme.blockquote),
            ("bullet_list_open", theme.bullet_list),
            ("ordered_list_open", theme.ordered_list),
            ("th_open", theme.header_cell),
            ("td_open", theme.data_cell),
            ("hr", theme.rule),
        ):
            rules[token_type] = self._with_class(css_class)
        return md

    def render(self, markdown: str) -> str:
        """Convert markdown body to HTML.

        Args:
            markdown: Markdown text without metadata header

        Returns:
            HTML fragment
        """
        return self._md.render(markdown).rstrip("\n")

    def render_code(self, code: str, language: str) -> str:
        """Highlight a code block, falling back to escaped plain text."""
        container = escapeHtml(self._theme.code_container)
        try:
            highlighted = self._highlighter.highlight(code, language)
        except Exception as e:
            logger.debug("Highlighting failed for language %r: %s", language, e)
            return (
                f'<div class="{container}">'
                f'<pre><code class="language-{escapeHtml(language)}">{escapeHtml(code)}</code></pre>'
                "</div>"
            )
        marker = escapeHtml(self._theme.highlighted_marker)
        return f'<div class="{container} {marker}">{highlighted}</div>'

    # -- render rules ----------------------------------------------------

    def _with_class(self, css_class: str):
        def rule(tokens, idx, options, env):
            tokens[idx].attrSet("class", css_class)
            return self._md.renderer.renderToken(tokens, idx, options, env)

        return rule

    def _heading_open(self, tokens, idx, options, env):
        token = tokens[idx]
        token.attrSet("class", self._theme.heading(int(token.tag[1:])))
        return self._md.renderer.renderToken(tokens, idx, options, env)

    def _table_open(self, tokens, idx, options, env):
        tokens[idx].attrSet("class", self._theme.table)
        wrapper = escapeHtml(self._theme.table_wrapper)
        return f'<div class="{wrapper}">' + self._md.renderer.renderToken(tokens, idx, options, env)

    def _table_close(self, tokens, idx, options, env):
        return "</table></div>\n"

    def _fence(self, tokens, idx, options, env):
        token = tokens[idx]
        info = unescapeAll(token.info).strip() if token.info else ""
        language = info.split()[0] if info else self.default_language
        return self.render_code(_trim_blank_lines(token.content), language) + "\n"

    def _softbreak(self, tokens, idx, options, env):
        # Lines of one paragraph are joined with spaces.
        return " "
