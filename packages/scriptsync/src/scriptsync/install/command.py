from __future__ import annotations

import argparse

from ..cli.output import emit, sync_payload
from ..config.loader import load_repo_config
from ..core.context import RunContext
from ..core.logging import log_event
from ..exit_codes import OK
from ..sync.catalog import select_scripts
from ..sync.engine import validate_scripts


def run_install_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = load_repo_config(ctx.repo_root)
    scripts = select_scripts(config.package_manager)
    log_event(ctx, "debug", "install", "validate-scripts", package_manager=config.package_manager, scripts=len(scripts))
    validate_scripts(scripts, config.common_scripts_folder)
    if ctx.as_json:
        emit(sync_payload(ctx, config, "install", scripts, changed=False, updated=[]), True, "sync-report")
    return OK


def configure_install_parser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    for name, text in (
        ("install", "fail if scripts in common/scripts are stale or missing"),
        ("validate", "alias of `install`"),
    ):
        p = sub.add_parser(name, help=text)
        p.add_argument("--json", action="store_true", help="emit JSON output")
