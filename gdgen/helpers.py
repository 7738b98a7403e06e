"""Functions exposed to templates.

The set is fixed: templates can call exactly what build_helpers returns.
"""

from __future__ import annotations

from functools import partial
from typing import Any, Callable

from .schema import get_schema_ref, to_godot_type
from .urls import parse_url_params


def to_upper(value: str) -> str:
    return value.upper()


def replace(value: str, old: str, new: str, count: int = -1) -> str:
    """Replace ``old`` with ``new``; a negative count replaces all."""
    return value.replace(old, new, count)


def max_index(items: list[Any] | None) -> int:
    """Return the last valid index of ``items`` (-1 when empty)."""
    return len(items or []) - 1


def build_helpers(strict: bool = False) -> dict[str, Callable[..., Any]]:
    """Return the helper table for the template environment."""
    return {
        "to_upper": to_upper,
        "replace": replace,
        "to_godot_type": to_godot_type,
        "get_schema_ref": get_schema_ref,
        "parse_url_params": partial(parse_url_params, strict=strict),
        "max_index": max_index,
    }
