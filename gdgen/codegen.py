"""Render templates and write generated output.

Each path of a description is rendered through request.gd.j2; the
concatenated fragments are then rendered into template.gd.j2 and written
as one GDScript file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import jinja2

from .errors import OutputError, TemplateRenderError
from .loader import get_paths
from .log import get_logger

REQUEST_TEMPLATE = "request.gd.j2"
FILE_TEMPLATE = "template.gd.j2"

logger = get_logger(__name__)


def create_environment(
    template_dir: Path | None = None,
    helpers: dict[str, Callable[..., Any]] | None = None,
    loader: jinja2.BaseLoader | None = None,
) -> jinja2.Environment:
    """Build the Jinja2 environment with the helper table as globals."""
    env = jinja2.Environment(
        loader=loader or jinja2.FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.globals.update(helpers or {})
    return env


def _get_template(env: jinja2.Environment, name: str, identifier: str) -> jinja2.Template:
    try:
        return env.get_template(name)
    except jinja2.TemplateError as exc:
        raise TemplateRenderError(identifier, f"{name} parsing failed: {exc}") from exc


def render_fragments(env: jinja2.Environment, description: dict[str, Any], identifier: str) -> str:
    """Render one fragment per path, in sorted path order, and join them."""
    template = _get_template(env, REQUEST_TEMPLATE, identifier)
    paths = get_paths(description)
    fragments: list[str] = []

    for path in sorted(paths):
        try:
            fragments.append(template.render(path=path, data=paths[path]))
        except Exception as exc:
            raise TemplateRenderError(identifier, str(exc), path=path) from exc
        logger.debug("Parsing %s", path)

    return "".join(fragments)


def assemble_file(
    env: jinja2.Environment,
    fragments: str,
    output_path: Path,
    header: str,
    identifier: str = "",
) -> Path:
    """Render the client file around ``fragments`` and write it.

    The file is only created once rendering has succeeded.
    """
    template = _get_template(env, FILE_TEMPLATE, identifier)
    try:
        output = template.render(header=header, data=fragments)
    except Exception as exc:
        raise TemplateRenderError(identifier, f"Execution failed: {exc}") from exc

    try:
        output_path.write_text(output, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Failed to create {output_path}: {exc}") from exc
    return output_path
