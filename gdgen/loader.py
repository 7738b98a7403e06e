"""Load Swagger API descriptions.

Reads one JSON document per description and exposes its paths.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import DescriptionError
from .log import get_logger

logger = get_logger(__name__)


def load_description(path: Path, compat: bool = False) -> dict[str, Any]:
    """Load an API description from disk.

    Read and parse failures raise DescriptionError. With ``compat`` they
    yield an empty description instead, matching the old generator.
    """
    try:
        with open(path, encoding="utf-8") as f:
            description = json.load(f)
    except (OSError, ValueError) as exc:
        if compat:
            logger.debug("Ignoring unreadable description %s: %s", path, exc)
            return {}
        raise DescriptionError(f"Cannot load {path}: {exc}") from exc

    if not isinstance(description, dict):
        if compat:
            logger.debug("Ignoring non-object description %s", path)
            return {}
        raise DescriptionError(f"Cannot load {path}: top level is not an object")
    return description


def get_paths(description: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the description."""
    paths = description.get("paths", {})
    if not isinstance(paths, dict):
        return {}
    return paths
