"""Exceptions raised by the generator.

DescriptionError is recoverable: the run records it and moves on to the
next description. Everything else aborts the run.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all generator errors."""


class DescriptionError(GeneratorError):
    """An API description could not be read or parsed."""


class UnmatchedPlaceholderError(GeneratorError):
    """A URL placeholder has no matching path parameter (strict mode)."""

    def __init__(self, url: str, placeholders: list[str]) -> None:
        self.url = url
        self.placeholders = placeholders
        names = ", ".join(placeholders)
        super().__init__(f"{url}: no path parameter for {names}")


class TemplateRenderError(GeneratorError):
    """A template failed to parse or render."""

    def __init__(self, identifier: str, message: str, path: str | None = None) -> None:
        self.identifier = identifier
        self.path = path
        where = f"{identifier} {path}" if path else identifier
        super().__init__(f"Rendering `{where}` failed: {message}")


class OutputError(GeneratorError):
    """A generated file could not be written."""


class FormatterError(GeneratorError):
    """The post-generation formatter failed."""
