"""Run a GDScript formatter over generated files."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path

from .errors import FormatterError
from .log import get_logger

DEFAULT_FORMATTER = "gdformat"

logger = get_logger(__name__)


def format_files(paths: list[Path], command: str = DEFAULT_FORMATTER) -> None:
    """Format ``paths`` in place with one formatter invocation."""
    if not paths:
        return

    argv = shlex.split(command) + [str(p) for p in paths]
    logger.info("Formatting %d file(s) with %s", len(paths), argv[0])
    try:
        subprocess.run(argv, check=True)
    except FileNotFoundError as exc:
        raise FormatterError(f"Formatter not found: {argv[0]}") from exc
    except subprocess.CalledProcessError as exc:
        raise FormatterError(f"{argv[0]} exited with status {exc.returncode}") from exc
