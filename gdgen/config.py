"""Generator configuration.

The defaults reproduce the Agones layout: sdk, alpha and beta descriptions
read from ../swagger and written to addons/com.google.agones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
OUTPUT_DIR = Path("addons/com.google.agones")
SWAGGER_DIR = Path("../swagger")

DEFAULT_IDENTIFIERS = ("sdk", "alpha", "beta")
DEFAULT_SOURCE_TEMPLATE = "{identifier}.swagger.json"

HEADER = "# This code is generated by gdgen.\n# DO NOT EDIT BY HAND!"


@dataclass(frozen=True)
class DescriptionSource:
    """One API description to generate a client file for."""

    identifier: str
    source: str = str(SWAGGER_DIR / DEFAULT_SOURCE_TEMPLATE)

    @property
    def path(self) -> Path:
        return Path(self.source.format(identifier=self.identifier))


@dataclass
class GeneratorConfig:
    sources: list[DescriptionSource] = field(
        default_factory=lambda: [DescriptionSource(i) for i in DEFAULT_IDENTIFIERS]
    )
    output_dir: Path = OUTPUT_DIR
    template_dir: Path = TEMPLATE_DIR
    header: str = HEADER
    strict: bool = False
    compat: bool = False
    format_command: str | None = None

    @classmethod
    def from_identifiers(
        cls,
        identifiers: Iterable[str],
        swagger_dir: Path | None = None,
        **options,
    ) -> GeneratorConfig:
        """Build a config reading each identifier from ``swagger_dir``."""
        source = str((swagger_dir or SWAGGER_DIR) / DEFAULT_SOURCE_TEMPLATE)
        sources = [DescriptionSource(i, source) for i in identifiers]
        return cls(sources=sources, **options)
