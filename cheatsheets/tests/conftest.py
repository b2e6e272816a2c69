"""Pytest configuration for cheatsheet tests."""

import sys
from pathlib import Path

import pytest

# Add repository root to path for imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

from cheatsheets.config import Config, ContentConfig, RenderConfig  # noqa: E402


SAMPLE_FILES = {
    "rust.md": """---
title: Rust
description: Ownership, borrowing and cargo
category: Systems
---
# Rust

```rust
fn main() {
    println!("hi");
}
```
""",
    "bash.md": """---
title: bash
description: Shell scripting basics
category: Tool
---
Use `set -euo pipefail` in **every** script.
""",
    "awk.md": """---
title: Awk
category: Tool
---
Text processing one-liners.
""",
    "untitled.md": "No header here, just a body.\n",
}


def write_corpus(directory: Path, files: dict[str, str]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        (directory / name).write_text(text, encoding="utf-8")
    return directory


@pytest.fixture
def content_dir(tmp_path):
    """Content directory with a small mixed corpus."""
    return write_corpus(tmp_path / "cheatsheets", SAMPLE_FILES)


@pytest.fixture
def config(content_dir):
    """Configuration pointing at the sample corpus, highlighting enabled."""
    return Config(
        content=ContentConfig(content_dir=str(content_dir)),
        render=RenderConfig(highlight=True),
    )
