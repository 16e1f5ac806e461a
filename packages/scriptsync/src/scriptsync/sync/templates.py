"""Bundled template store holding the canonical body of every standard script."""

from __future__ import annotations

from pathlib import Path

from ..core.env import getenv
from ..core.fs import read_text

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "assets" / "scripts"


def templates_root(override: Path | None = None) -> Path:
    if override is not None:
        return override
    configured = getenv("SCRIPTSYNC_TEMPLATES_DIR")
    return Path(configured) if configured else TEMPLATES_DIR


def template_path(name: str, templates_dir: Path | None = None) -> Path:
    return templates_root(templates_dir) / name


def read_template(name: str, templates_dir: Path | None = None) -> str:
    return read_text(template_path(name, templates_dir))


def available_templates(templates_dir: Path | None = None) -> list[str]:
    root = templates_root(templates_dir)
    if not root.is_dir():
        return []
    return sorted(p.name for p in root.iterdir() if p.is_file())
