"""Keeps generated scripts in the common scripts folder in sync with their templates.

`validate` mode never writes and raises on the first stale or missing script.
`repair` mode rewrites stale or missing scripts and reports whether anything
changed; re-running it converges.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Literal

from ..core.fs import ensure_dir, read_text_if_exists, write_text
from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG, ERR_DRIFT
from .descriptors import ScriptDescriptor, load_expected_content, normalize

SyncMode = Literal["validate", "repair"]
UpdateNotice = Callable[[Path], None]

SYNC_MODES: tuple[str, ...] = ("validate", "repair")
MAX_CONCURRENCY = 10

# notices come from worker threads; one at a time keeps lines whole
_NOTICE_LOCK = threading.Lock()


def print_update_notice(path: Path) -> None:
    print(f'Script is out of date; updating "{path}"')


def drift_error(path: Path) -> ScriptError:
    return ScriptError(
        f'The standard file "{path.name}" in the "{path.parent}" folder needs to be updated for this version.'
        ' Please run "scriptsync update" and commit the changes.',
        ERR_DRIFT,
        kind="drift_detected",
    )


def reconcile(
    descriptor: ScriptDescriptor,
    target_dir: Path,
    mode: SyncMode,
    *,
    templates_dir: Path | None = None,
    on_update: UpdateNotice | None = None,
) -> bool:
    """Compare one generated script with its template and update or raise.

    Returns True when the target was (re)written. A missing target counts as
    stale; any read error other than "not found" propagates unchanged.
    """
    target_path = target_dir / descriptor.name
    target_content = read_text_if_exists(target_path)
    target_normalized = normalize(target_content) if target_content is not None else None

    # the template is only read when there is something to compare against
    expected: str | None = None
    if target_normalized is not None:
        expected = load_expected_content(descriptor, templates_dir)
    files_are_same = target_normalized is not None and expected == target_normalized
    if files_are_same:
        return False

    if mode == "validate":
        raise drift_error(target_path)
    if expected is None:
        expected = load_expected_content(descriptor, templates_dir)
    with _NOTICE_LOCK:
        (on_update or print_update_notice)(target_path)
    write_text(target_path, expected)
    return True


def _reject_duplicates(descriptors: list[ScriptDescriptor]) -> None:
    seen: set[str] = set()
    for descriptor in descriptors:
        if descriptor.name in seen:
            raise ScriptError(f"duplicate script name in descriptor list: {descriptor.name}", ERR_CONFIG, kind="duplicate_script")
        seen.add(descriptor.name)


def ensure_up_to_date(
    descriptors: Iterable[ScriptDescriptor],
    target_dir: Path,
    mode: SyncMode,
    *,
    templates_dir: Path | None = None,
    on_update: UpdateNotice | None = None,
) -> bool:
    if mode not in SYNC_MODES:
        raise ValueError(f"unknown sync mode: {mode}")
    scripts = list(descriptors)
    _reject_duplicates(scripts)
    ensure_dir(target_dir)
    if not scripts:
        return False

    changed = False
    with ThreadPoolExecutor(max_workers=MAX_CONCURRENCY, thread_name_prefix="scriptsync") as pool:
        futures = [
            pool.submit(reconcile, script, target_dir, mode, templates_dir=templates_dir, on_update=on_update)
            for script in scripts
        ]
        try:
            for done in as_completed(futures):
                if done.result():
                    changed = True
        except BaseException:
            for future in futures:
                future.cancel()
            raise
    return changed


def update_scripts(
    descriptors: Iterable[ScriptDescriptor],
    target_dir: Path,
    *,
    templates_dir: Path | None = None,
    on_update: UpdateNotice | None = None,
) -> bool:
    return ensure_up_to_date(descriptors, target_dir, "repair", templates_dir=templates_dir, on_update=on_update)


def validate_scripts(
    descriptors: Iterable[ScriptDescriptor],
    target_dir: Path,
    *,
    templates_dir: Path | None = None,
) -> None:
    ensure_up_to_date(descriptors, target_dir, "validate", templates_dir=templates_dir)
