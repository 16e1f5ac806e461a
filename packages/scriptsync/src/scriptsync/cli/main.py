from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..config.loader import load_repo_config
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_INTERNAL, ERR_IO, ERR_USAGE, OK
from ..install.command import configure_install_parser, run_install_command
from ..sync.catalog import select_scripts
from ..update.command import configure_update_parser, run_update_command
from .output import emit, render_error, resolve_output_format


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="scriptsync")
    p.add_argument("--version", action="version", version=f"scriptsync {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier for log events")
    p.add_argument("--cwd", help="run command from an explicit repository folder")
    p.add_argument("--log-json", action="store_true", help="emit log events as JSON lines on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable verbose diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    configure_update_parser(sub)
    configure_install_parser(sub)

    list_p = sub.add_parser("list", help="list the standard scripts for the configured package manager")
    list_p.add_argument("--json", action="store_true", help="emit JSON output")
    version_p = sub.add_parser("version", help="print versions and git context")
    version_p.add_argument("--json", action="store_true", help="emit JSON output")
    return p


def _run_list(ctx: RunContext) -> int:
    config = load_repo_config(ctx.repo_root)
    scripts = select_scripts(config.package_manager)
    if ctx.as_json:
        payload = {
            "schema_version": 1,
            "tool": "scriptsync",
            "status": "ok",
            "package_manager": config.package_manager,
            "scripts": [s.to_json() for s in scripts],
        }
        emit(payload, True, "script-list")
        return OK
    for script in scripts:
        print(script.name)
    return OK


def _run_version(ctx: RunContext) -> int:
    payload = {
        "schema_version": 1,
        "tool": "scriptsync",
        "status": "ok",
        "run_id": ctx.run_id,
        "scriptsync_version": __version__,
        "repo_root": str(ctx.repo_root),
        "git_sha": ctx.git_sha,
        "git_dirty": ctx.git_dirty,
    }
    if ctx.as_json:
        emit(payload, True)
    else:
        print(f"scriptsync {__version__} (git {ctx.git_sha}{'-dirty' if ctx.git_dirty else ''})")
    return OK


def main(argv: list[str] | None = None) -> int:
    raw_argv = argv if argv is not None else sys.argv[1:]
    p = build_parser()
    ns = p.parse_args(raw_argv)
    fmt = resolve_output_format(cli_json=("--json" in raw_argv), cli_format=ns.format)
    as_json = fmt == "json"
    try:
        ctx = RunContext.from_args(
            ns.run_id,
            ns.cwd,
            fmt,
            ns.verbose,
            ns.quiet,
            ns.log_json,
        )
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
        if ns.cmd == "update":
            return run_update_command(ctx, ns)
        if ns.cmd in {"install", "validate"}:
            return run_install_command(ctx, ns)
        if ns.cmd == "list":
            return _run_list(ctx)
        if ns.cmd == "version":
            return _run_version(ctx)
        return ERR_USAGE
    except ScriptError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except OSError as exc:
        print(
            render_error(as_json=as_json, message=f"filesystem error: {exc}", code=ERR_IO, kind="io_failure"),
            file=sys.stderr,
        )
        return ERR_IO
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
