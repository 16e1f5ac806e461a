"""Repository root detection helpers.

`Path.cwd()` is only allowed in this module.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

REPO_MARKER = "rush.json"


def find_repo_root(start: Path | None = None) -> Path:
    cur = (start or Path.cwd()).resolve()
    if cur.is_file():
        cur = cur.parent
    while True:
        if (cur / REPO_MARKER).is_file():
            return cur
        if cur.parent == cur:
            raise ScriptError(
                f"unable to find {REPO_MARKER} in {start or Path.cwd()} or any parent folder",
                ERR_CONFIG,
                kind="repo_root_not_found",
            )
        cur = cur.parent
