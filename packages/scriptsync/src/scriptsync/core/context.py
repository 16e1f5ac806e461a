from __future__ import annotations

import subprocess
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from .env import getenv
from .repo_root import find_repo_root

OutputFormat = Literal["text", "json"]


def _git(repo_root: Path, *args: str) -> str | None:
    try:
        proc = subprocess.run(["git", *args], cwd=repo_root, text=True, capture_output=True, check=False)
    except FileNotFoundError:
        return None
    return proc.stdout.strip() if proc.returncode == 0 else None


def read_git_state(repo_root: Path) -> tuple[str, bool]:
    """Short HEAD sha and dirty flag; `("unknown", False)` outside a git checkout."""
    sha = _git(repo_root, "rev-parse", "--short", "HEAD") or "unknown"
    status = _git(repo_root, "status", "--porcelain")
    return sha, bool(status)


@dataclass(frozen=True)
class RunContext:
    run_id: str
    repo_root: Path
    output_format: OutputFormat
    verbose: bool
    quiet: bool
    log_json: bool
    git_sha: str
    git_dirty: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        run_id: str | None,
        cwd: str | None = None,
        output_format: OutputFormat = "text",
        verbose: bool = False,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        repo_root = find_repo_root(Path(cwd) if cwd else None)
        git_sha, git_dirty = read_git_state(repo_root)
        default_run = f"scriptsync-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}-{git_sha}"
        resolved_run_id = run_id or getenv("RUN_ID") or default_run
        return cls(
            run_id=resolved_run_id,
            repo_root=repo_root,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
            log_json=log_json,
            git_sha=git_sha,
            git_dirty=git_dirty,
        )
