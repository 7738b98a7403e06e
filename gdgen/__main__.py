"""Entry point: python -m gdgen

Reads ../swagger/<id>.swagger.json for sdk, alpha and beta and writes
addons/com.google.agones/Agones<Id>.gd.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import DEFAULT_IDENTIFIERS, OUTPUT_DIR, SWAGGER_DIR, TEMPLATE_DIR, GeneratorConfig
from .driver import run
from .errors import GeneratorError
from .formatter import DEFAULT_FORMATTER
from .log import configure_logging, get_logger

EXIT_SUCCESS = 0
EXIT_DESCRIPTION_ERROR = 1
EXIT_GENERATION_ERROR = 2

logger = get_logger()


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gdgen",
        description="Generate Godot client bindings from Swagger descriptions",
    )
    parser.add_argument(
        "identifiers",
        nargs="*",
        default=list(DEFAULT_IDENTIFIERS),
        metavar="IDENTIFIER",
        help="Descriptions to generate (default: %(default)s)",
    )
    parser.add_argument(
        "--swagger-dir",
        type=Path,
        default=SWAGGER_DIR,
        help="Directory holding <identifier>.swagger.json (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=OUTPUT_DIR,
        help="Output directory (default: %(default)s)",
    )
    parser.add_argument(
        "--template-dir", "-t",
        type=Path,
        default=TEMPLATE_DIR,
        help="Template directory",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on URL placeholders without a matching path parameter",
    )
    parser.add_argument(
        "--compat",
        action="store_true",
        help="Treat unreadable descriptions as empty instead of failing",
    )
    parser.add_argument(
        "--format",
        action="store_true",
        help="Format generated files after the run",
    )
    parser.add_argument(
        "--format-command",
        default=DEFAULT_FORMATTER,
        metavar="COMMAND",
        help="Formatter used with --format (default: %(default)s)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log every rendered path")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    parsed = parse_args(args)
    configure_logging(verbose=parsed.verbose, quiet=parsed.quiet)

    config = GeneratorConfig.from_identifiers(
        parsed.identifiers,
        swagger_dir=parsed.swagger_dir,
        output_dir=parsed.output_dir,
        template_dir=parsed.template_dir,
        strict=parsed.strict,
        compat=parsed.compat,
        format_command=parsed.format_command if parsed.format else None,
    )

    try:
        report = run(config)
    except GeneratorError as exc:
        logger.error("%s", exc)
        return EXIT_GENERATION_ERROR

    return EXIT_SUCCESS if report.ok else EXIT_DESCRIPTION_ERROR


if __name__ == "__main__":
    sys.exit(main())
