"""Generated-script synchronization for the common scripts folder."""

from .catalog import select_scripts
from .descriptors import ScriptDescriptor, build_expected_content, normalize
from .engine import MAX_CONCURRENCY, ensure_up_to_date, reconcile, update_scripts, validate_scripts

__all__ = [
    "MAX_CONCURRENCY",
    "ScriptDescriptor",
    "build_expected_content",
    "ensure_up_to_date",
    "normalize",
    "reconcile",
    "select_scripts",
    "update_scripts",
    "validate_scripts",
]
