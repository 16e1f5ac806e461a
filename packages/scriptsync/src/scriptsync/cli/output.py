"""CLI payload output helpers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..contracts.output import validate_payload

if TYPE_CHECKING:
    from ..config.loader import RepoConfig
    from ..core.context import RunContext
    from ..sync.descriptors import ScriptDescriptor


def dumps_json(payload: dict[str, object], pretty: bool = False) -> str:
    return json.dumps(payload, indent=2 if pretty else None, sort_keys=True, default=str)


def emit(payload: dict[str, object], as_json: bool, schema_name: str | None = None) -> None:
    if schema_name:
        validate_payload(payload, schema_name)
    print(dumps_json(payload, pretty=not as_json))


def sync_payload(
    ctx: RunContext,
    config: RepoConfig,
    action: str,
    scripts: list[ScriptDescriptor],
    *,
    changed: bool,
    updated: list[str],
) -> dict[str, object]:
    return {
        "schema_version": 1,
        "tool": "scriptsync",
        "status": "ok",
        "action": action,
        "run_id": ctx.run_id,
        "package_manager": config.package_manager,
        "common_scripts_folder": str(config.common_scripts_folder),
        "changed": changed,
        "updated": sorted(updated),
        "scripts": [s.name for s in scripts],
    }


def resolve_output_format(*, cli_json: bool, cli_format: str | None) -> str:
    if cli_json:
        return "json"
    return cli_format or "text"


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if as_json:
        return dumps_json(
            {
                "schema_version": 1,
                "tool": "scriptsync",
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            },
            pretty=False,
        )
    return message
