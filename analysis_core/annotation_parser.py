"""Interface of the pluggable per-file parser."""

from collections.abc import Collection
from pathlib import Path
from typing import Any, Protocol


class AnnotationParserError(Exception):
    """Wraps the failure of a parser; the original error is the __cause__."""


class AnnotationParser(Protocol):
    """Parses one workspace file into annotations for a module."""

    def parse(self, file: Path, module: str) -> Collection[Any]:
        """Return the annotations found in file.

        Implementations raise AnnotationParserError for unparsable files.
        """
        ...


class NullAnnotationParser:
    """Parser that accepts every file and reports nothing."""

    def parse(self, file: Path, module: str) -> Collection[Any]:  # noqa: ARG002
        return []
