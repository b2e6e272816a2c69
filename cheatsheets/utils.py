from __future__ import annotations

import logging
import re
import unicodedata


_space_re = re.compile(r"\s+")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def collation_key(text: str) -> tuple[str, str]:
    """Locale-aware sort key: accents and case only break ties."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = _space_re.sub(" ", stripped).strip().casefold()
    return primary, text


def configure_logging(level: str | int = "INFO") -> None:
    """Install a root handler once; later calls only adjust the level."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    root.setLevel(level)
