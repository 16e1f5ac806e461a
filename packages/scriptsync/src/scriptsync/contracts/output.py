from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import ScriptError
from ..exit_codes import ERR_INTERNAL

SCHEMAS_DIR = Path(__file__).resolve().parents[1] / "schemas" / "output"


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    return json.loads((SCHEMAS_DIR / f"{name}.schema.json").read_text(encoding="utf-8"))


def validate_payload(payload: dict[str, object], schema_name: str) -> dict[str, object]:
    try:
        jsonschema.validate(payload, load_schema(schema_name))
    except jsonschema.ValidationError as exc:
        raise ScriptError(
            f"output contract `{schema_name}` violated: {exc.message}",
            ERR_INTERNAL,
            kind="output_contract",
        ) from exc
    return payload
