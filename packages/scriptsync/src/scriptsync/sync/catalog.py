from __future__ import annotations

from ..errors import ScriptError
from ..exit_codes import ERR_CONFIG
from .descriptors import ScriptDescriptor

INSTALL_RUN = "install-run.js"
INSTALL_RUN_RUSH = "install-run-rush.js"
INSTALL_RUN_RUSHX = "install-run-rushx.js"
INSTALL_RUN_RUSH_PNPM = "install-run-rush-pnpm.js"

PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "pnpm", "yarn")

_AUTOMATION_INTRO = (
    "// This script is intended for usage in an automated build environment where the Rush command may not have",
    "// been preinstalled, or may have an unpredictable version.  This script will automatically install the version of Rush",
)

STANDARD_SCRIPTS: tuple[ScriptDescriptor, ...] = (
    ScriptDescriptor(
        INSTALL_RUN,
        (
            "// This script is intended for usage in an automated build environment where a Node tool may not have",
            "// been preinstalled, or may have an unpredictable version.  This script will automatically install the specified",
            "// version of the specified tool (if not already installed), and then pass a command-line to it.",
            "// An example usage would be:",
            "//",
            f"//    node common/scripts/{INSTALL_RUN} qrcode@1.2.2 qrcode https://rushjs.io",
        ),
    ),
    ScriptDescriptor(
        INSTALL_RUN_RUSH,
        (
            *_AUTOMATION_INTRO,
            "// specified in the rush.json configuration file (if not already installed), and then pass a command-line to it.",
            "// An example usage would be:",
            "//",
            f"//    node common/scripts/{INSTALL_RUN_RUSH} install",
        ),
    ),
    ScriptDescriptor(
        INSTALL_RUN_RUSHX,
        (
            *_AUTOMATION_INTRO,
            "// specified in the rush.json configuration file (if not already installed), and then pass a command-line to the",
            "// rushx command.",
            "//",
            "// An example usage would be:",
            "//",
            f"//    node common/scripts/{INSTALL_RUN_RUSHX} custom-command",
        ),
    ),
)

PNPM_ONLY_SCRIPTS: tuple[ScriptDescriptor, ...] = (
    ScriptDescriptor(
        INSTALL_RUN_RUSH_PNPM,
        (
            *_AUTOMATION_INTRO,
            "// specified in the rush.json configuration file (if not already installed), and then pass a command-line to the",
            "// rush-pnpm command.",
            "//",
            "// An example usage would be:",
            "//",
            f"//    node common/scripts/{INSTALL_RUN_RUSH_PNPM} pnpm-command",
        ),
    ),
)


def select_scripts(package_manager: str) -> list[ScriptDescriptor]:
    if package_manager not in PACKAGE_MANAGERS:
        raise ScriptError(
            f"unsupported package manager `{package_manager}` (expected one of: {', '.join(PACKAGE_MANAGERS)})",
            ERR_CONFIG,
            kind="unknown_package_manager",
        )
    if package_manager == "pnpm":
        return [*STANDARD_SCRIPTS, *PNPM_ONLY_SCRIPTS]
    return list(STANDARD_SCRIPTS)


def all_script_names() -> list[str]:
    return [d.name for d in (*STANDARD_SCRIPTS, *PNPM_ONLY_SCRIPTS)]
