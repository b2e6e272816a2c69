"""Token stream rewrites for the cheatsheet markdown dialect.

The dialect is narrower than CommonMark. These core rules run on the block
tokens before inline parsing and bring the stream in line with it:

- only ``#`` to ``###`` are headings; deeper ones stay paragraph text
- every quoted line is its own blockquote
- a table needs at least one data row
"""

from __future__ import annotations

import re

from markdown_it.rules_core import StateCore
from markdown_it.token import Token

MAX_HEADING_LEVEL = 3

_UNSAFE_URL_RE = re.compile(r"^\s*(javascript|vbscript|file|data):", re.IGNORECASE)
_QUOTED_PARAGRAPH = [
    "blockquote_open",
    "paragraph_open",
    "inline",
    "paragraph_close",
    "blockquote_close",
]


def is_safe_url(url: str) -> bool:
    """Link validator: script and local-resource schemes are never linked."""
    return not _UNSAFE_URL_RE.match(url)


def limit_heading_levels(state: StateCore) -> None:
    tokens = state.tokens
    for index, token in enumerate(tokens):
        if token.type != "heading_open" or int(token.tag[1:]) <= MAX_HEADING_LEVEL:
            continue
        inline, close = tokens[index + 1], tokens[index + 2]
        inline.content = f"{token.markup} {inline.content}".rstrip()
        token.type, token.tag, token.markup = "paragraph_open", "p", ""
        close.type, close.tag, close.markup = "paragraph_close", "p", ""


def split_blockquote_lines(state: StateCore) -> None:
    tokens = state.tokens
    result: list[Token] = []
    index = 0
    while index < len(tokens):
        window = tokens[index:index + len(_QUOTED_PARAGRAPH)]
        if [t.type for t in window] == _QUOTED_PARAGRAPH and "\n" in window[2].content:
            open_quote, open_para, inline, close_para, close_quote = window
            for line in inline.content.split("\n"):
                result.extend(
                    [
                        open_quote.copy(),
                        open_para.copy(),
                        inline.copy(content=line.strip()),
                        close_para.copy(),
                        close_quote.copy(),
                    ]
                )
            index += len(window)
            continue
        result.append(tokens[index])
        index += 1
    tokens[:] = result


def tables_need_rows(state: StateCore) -> None:
    """Turn header-only tables back into the paragraph they were written as."""
    tokens = state.tokens
    lines = state.src.split("\n")
    result: list[Token] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if token.type != "table_open" or not token.map:
            result.append(token)
            index += 1
            continue

        close = index
        while not (tokens[close].type == "table_close" and tokens[close].level == token.level):
            close += 1

        if any(t.type == "td_open" for t in tokens[index:close]):
            result.extend(tokens[index:close + 1])
        else:
            start, end = token.map
            text = "\n".join(line.strip() for line in lines[start:end])
            result.extend(_paragraph(text, token))
        index = close + 1
    tokens[:] = result


def _paragraph(text: str, like: Token) -> list[Token]:
    return [
        Token("paragraph_open", "p", 1, map=like.map, level=like.level, block=True),
        Token(
            "inline",
            "",
            0,
            map=like.map,
            level=like.level + 1,
            content=text,
            children=[],
            block=True,
        ),
        Token("paragraph_close", "p", -1, level=like.level, block=True),
    ]
