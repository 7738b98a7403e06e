"""Build GDScript URL expressions from Swagger path templates.

Path parameters are substituted positionally with GDScript's % operator:

  /v1/gameservers/{id}      -> ("/v1/gameservers/%s"% [id])
  /v1/a/{x}/b/{y}           -> ("/v1/a/%s/b/%s"% [x, y])
  /v1/health                -> ("/v1/health")
"""

from __future__ import annotations

import re
from typing import Any

from .errors import UnmatchedPlaceholderError

_PLACEHOLDER_RE = re.compile(r"\{[^{}]+\}")


def parse_url_params(url: str, params: list[Any] | None, strict: bool = False) -> str:
    """Return a GDScript expression that evaluates to the substituted URL.

    Only parameters with ``in == "path"`` take part, in list order.
    Placeholders without a matching path parameter are left untouched
    unless ``strict`` is set, in which case UnmatchedPlaceholderError
    is raised.
    """
    literal = f'"{url}"'
    args: list[str] = []

    for param in params or []:
        if not isinstance(param, dict) or param.get("in") != "path":
            continue
        name = str(param["name"])
        literal = literal.replace(f"{{{name}}}", "%s")
        args.append(name)

    if strict:
        leftover = _PLACEHOLDER_RE.findall(literal)
        if leftover:
            raise UnmatchedPlaceholderError(url, leftover)

    if args:
        literal += "% [" + ", ".join(args) + "]"
    return f"({literal})"
