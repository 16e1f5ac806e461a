from __future__ import annotations

import argparse
import threading
from pathlib import Path

from ..cli.output import emit, sync_payload
from ..config.loader import load_repo_config
from ..core.context import RunContext
from ..core.logging import log_event
from ..exit_codes import OK
from ..sync.catalog import select_scripts
from ..sync.engine import print_update_notice, update_scripts


def run_update_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = load_repo_config(ctx.repo_root)
    scripts = select_scripts(config.package_manager)
    log_event(
        ctx,
        "info",
        "update",
        "start",
        package_manager=config.package_manager,
        scripts=len(scripts),
        folder=config.common_scripts_folder,
    )
    updated: list[str] = []
    lock = threading.Lock()

    def _on_update(path: Path) -> None:
        with lock:
            updated.append(path.name)
            if not ctx.as_json:
                print_update_notice(path)

    changed = update_scripts(scripts, config.common_scripts_folder, on_update=_on_update)
    log_event(ctx, "info", "update", "finish", changed=changed, updated=len(updated))
    if ctx.as_json:
        emit(sync_payload(ctx, config, "update", scripts, changed=changed, updated=updated), True, "sync-report")
    elif changed:
        print()  # blank line after the notices
    return OK


def configure_update_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    p = sub.add_parser("update", help="rewrite stale or missing scripts in common/scripts")
    p.add_argument("--json", action="store_true", help="emit JSON output")
