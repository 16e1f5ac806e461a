from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema

from ..core.fs import read_text
from ..core.repo_root import REPO_MARKER
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "rush-config.schema.json"

PACKAGE_MANAGER_KEYS: tuple[tuple[str, str], ...] = (
    ("pnpmVersion", "pnpm"),
    ("npmVersion", "npm"),
    ("yarnVersion", "yarn"),
)


@dataclass(frozen=True)
class RepoConfig:
    repo_root: Path
    rush_json_path: Path
    rush_version: str
    package_manager: str
    package_manager_version: str

    @property
    def common_folder(self) -> Path:
        return self.repo_root / "common"

    @property
    def common_scripts_folder(self) -> Path:
        return self.common_folder / "scripts"


def strip_json_comments(text: str) -> str:
    """Blank out `//` and `/* */` comments outside of string literals.

    Newlines inside comments are kept so parser errors still point at the
    right line.
    """
    out: list[str] = []
    i = 0
    n = len(text)
    in_string = False
    while i < n:
        ch = text[i]
        if in_string:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(text[i + 1])
                i += 2
                continue
            if ch == '"':
                in_string = False
            i += 1
            continue
        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
            continue
        if ch == "/" and i + 1 < n and text[i + 1] == "/":
            end = text.find("\n", i)
            i = n if end == -1 else end
            continue
        if ch == "/" and i + 1 < n and text[i + 1] == "*":
            end = text.find("*/", i + 2)
            if end == -1:
                raise ValueError("unterminated block comment")
            out.append("".join(c for c in text[i : end + 2] if c == "\n"))
            i = end + 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def _load_schema() -> dict[str, Any]:
    return json.loads(read_text(SCHEMA_PATH))


def parse_rush_json(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(strip_json_comments(read_text(path)))
    except ValueError as exc:
        raise ScriptError(f"{path}: invalid json ({exc})", ERR_CONFIG, kind="invalid_config") from exc
    try:
        jsonschema.validate(payload, _load_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise ScriptError(f"{path}: {location}: {exc.message}", ERR_CONFIG, kind="invalid_config") from exc
    return payload


def resolve_package_manager(payload: dict[str, Any], path: Path) -> tuple[str, str]:
    found = [(name, str(payload[key])) for key, name in PACKAGE_MANAGER_KEYS if key in payload]
    if len(found) != 1:
        keys = ", ".join(key for key, _ in PACKAGE_MANAGER_KEYS)
        raise ScriptError(
            f"{path}: exactly one of {keys} must be specified (found {len(found)})",
            ERR_CONFIG,
            kind="invalid_config",
        )
    return found[0]


def load_repo_config(repo_root: Path) -> RepoConfig:
    path = repo_root / REPO_MARKER
    payload = parse_rush_json(path)
    package_manager, package_manager_version = resolve_package_manager(payload, path)
    return RepoConfig(
        repo_root=repo_root,
        rush_json_path=path,
        rush_version=str(payload["rushVersion"]),
        package_manager=package_manager,
        package_manager_version=package_manager_version,
    )
