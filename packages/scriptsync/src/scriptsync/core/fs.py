"""Filesystem primitives used by the sync engine.

Reads preserve the raw line endings on disk; writes always emit `\n`.
Target reads tolerate invalid UTF-8, template reads do not.
"""

from __future__ import annotations

from pathlib import Path


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text_if_exists(path: Path, encoding: str = "utf-8", errors: str = "replace") -> str | None:
    """Read a file that may have been edited by hand; undecodable bytes become U+FFFD."""
    try:
        with path.open("r", encoding=encoding, errors=errors, newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return None


def read_text(path: Path, encoding: str = "utf-8") -> str:
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def write_text(path: Path, content: str, encoding: str = "utf-8") -> Path:
    with path.open("w", encoding=encoding, newline="\n") as handle:
        handle.write(content)
    return path
