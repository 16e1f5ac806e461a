"""Script descriptors and the expected content of a generated script.

A generated script is the attribution banner, the descriptor's own header
lines, the informational suffix and the canonical template body, joined with
`\n` and normalized. The body is joined as a single element even though it
spans many lines; files already committed in repositories depend on that.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .templates import read_template

HEADER_LINES_PREFIX: tuple[str, ...] = (
    "// THIS FILE WAS GENERATED BY A TOOL. ANY MANUAL MODIFICATIONS WILL GET OVERWRITTEN WHENEVER RUSH IS UPGRADED.",
    "//",
)

HEADER_LINES_SUFFIX: tuple[str, ...] = (
    "//",
    "// For more information, see: https://rushjs.io/pages/maintainer/setup_new_repo/",
    "",
)


@dataclass(frozen=True)
class ScriptDescriptor:
    name: str
    header_lines: tuple[str, ...] = ()

    def to_json(self) -> dict[str, object]:
        return {"name": self.name, "header_lines": list(self.header_lines)}


# ECMAScript WhiteSpace and LineTerminator code points, the set `trimRight()` strips.
# Unlike `str.rstrip()` it keeps U+001C..U+001F and U+0085 and strips U+FEFF.
TRAILING_WHITESPACE = "".join(
    chr(cp)
    for cp in (
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)


def normalize(content: str) -> str:
    # line endings from checkout-time conversion and trailing whitespace are not drift
    return "\n".join(line.rstrip(TRAILING_WHITESPACE) for line in content.split("\n"))


def build_expected_content(descriptor: ScriptDescriptor, body: str) -> str:
    joined = "\n".join([*HEADER_LINES_PREFIX, *descriptor.header_lines, *HEADER_LINES_SUFFIX, body])
    return normalize(joined)


def load_expected_content(descriptor: ScriptDescriptor, templates_dir: Path | None = None) -> str:
    return build_expected_content(descriptor, read_template(descriptor.name, templates_dir))
