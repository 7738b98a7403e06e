"""Map Swagger schema types onto GDScript.

Only primitive types are mapped; anything else becomes Object.
References are returned as-is, never followed.
"""

from __future__ import annotations

from typing import Any

FALLBACK_TYPE = "Object"

_GODOT_TYPES: dict[str, str] = {
    "string": "String",
    "integer": "int",
    "number": "float",
    "boolean": "bool",
}


def to_godot_type(type_name: Any) -> str:
    """Return the GDScript type for a Swagger primitive type name."""
    if not isinstance(type_name, str):
        return FALLBACK_TYPE
    return _GODOT_TYPES.get(type_name, FALLBACK_TYPE)


def get_schema_ref(schema: Any) -> str:
    """Return the schema's $ref value, or "" if it has none."""
    if not isinstance(schema, dict):
        return ""
    ref = schema.get("$ref")
    if ref is None:
        return ""
    return str(ref)
