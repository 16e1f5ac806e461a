from .output import SCHEMAS_DIR, validate_payload

__all__ = ["SCHEMAS_DIR", "validate_payload"]
