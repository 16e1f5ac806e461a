from __future__ import annotations

import socket
from pathlib import Path

import pytest
from hypothesis import settings

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("scriptsync", deadline=None)
settings.load_profile("scriptsync")

PNPM_RUSH_JSON = """// This is the main configuration file for Rush.
{
  "$schema": "https://developer.microsoft.com/json-schemas/rush/v5/rush.schema.json",
  "rushVersion": "5.112.0",
  /*
   * Exactly one package manager version must be specified.
   */
  "pnpmVersion": "8.15.1",
  // "npmVersion": "6.14.15",
  "nodeSupportedVersionRange": ">=18.0.0",
  "projects": []
}
"""

NPM_RUSH_JSON = """{
  "rushVersion": "5.112.0",
  "npmVersion": "6.14.15",
  "projects": []
}
"""


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SCRIPTSYNC_TEMPLATES_DIR", raising=False)
    monkeypatch.setenv("RUN_ID", "pytest-run")


@pytest.fixture
def minimal_repo_root(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / "rush.json").write_text(PNPM_RUSH_JSON, encoding="utf-8")
    return repo


@pytest.fixture
def npm_repo_root(tmp_path: Path) -> Path:
    repo = tmp_path / "npm-repo"
    repo.mkdir()
    (repo / "rush.json").write_text(NPM_RUSH_JSON, encoding="utf-8")
    return repo


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    root.mkdir()
    (root / "install-run.js").write_text("console.log(1);\n", encoding="utf-8")
    (root / "install-run-rush.js").write_text("'use strict';\nrequire('./install-run');\n", encoding="utf-8")
    return root
