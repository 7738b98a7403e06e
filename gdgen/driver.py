"""Generate one client file per configured API description."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from .codegen import assemble_file, create_environment, render_fragments
from .config import GeneratorConfig
from .errors import DescriptionError, OutputError
from .formatter import format_files
from .helpers import build_helpers
from .loader import load_description
from .log import get_logger

logger = get_logger(__name__)

_WORD_START_RE = re.compile(r"(?<!\w)\w")


@dataclass
class RunReport:
    """What a run produced and which descriptions failed to load."""

    written: dict[str, Path] = field(default_factory=dict)
    failures: dict[str, DescriptionError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


def output_filename(identifier: str) -> str:
    """Return the client file name for a description identifier.

    Only the first letter of each word is upper-cased; letters after
    digits or underscores are left alone (v1beta1 -> AgonesV1beta1.gd).
    """
    title = _WORD_START_RE.sub(lambda m: m.group().upper(), identifier)
    return f"Agones{title}.gd"


def run(config: GeneratorConfig) -> RunReport:
    """Generate every configured description, in order.

    Load failures are collected in the report. Template and output
    failures propagate and stop the run; files written before stay.
    """
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Cannot create {config.output_dir}: {exc}") from exc

    env = create_environment(config.template_dir, build_helpers(strict=config.strict))
    report = RunReport()

    for source in config.sources:
        identifier = source.identifier
        logger.info(identifier.upper())

        try:
            description = load_description(source.path, compat=config.compat)
        except DescriptionError as exc:
            logger.error("Skipping %s: %s", identifier, exc)
            report.failures[identifier] = exc
            continue

        fragments = render_fragments(env, description, identifier)
        output_path = config.output_dir / output_filename(identifier)
        report.written[identifier] = assemble_file(
            env, fragments, output_path, config.header, identifier
        )

    if config.format_command and report.written:
        format_files(list(report.written.values()), config.format_command)

    if report.failures:
        logger.warning(
            "%d description(s) failed: %s",
            len(report.failures),
            ", ".join(report.failures),
        )
    logger.info("Complete!")
    return report
