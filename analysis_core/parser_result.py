"""Data model for the outcome of scanning a workspace."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class ParserResult:
    """Annotations, modules and diagnostics collected while parsing files."""

    workspace: Path
    annotations: list[Any] = field(default_factory=list)
    modules: set[str] = field(default_factory=set)
    error_messages: list[str] = field(default_factory=list)
    module_errors: dict[str, list[str]] = field(default_factory=dict)
    files: dict[str, str] = field(default_factory=dict)  # file -> module

    def add_annotations(self, annotations: Iterable[Any]) -> None:
        """Append the annotations found in one file."""
        self.annotations.extend(annotations)

    def add_file(self, file: Path, module: str) -> None:
        """Record the module a scanned file was attributed to."""
        self.files[str(file)] = module

    def add_module(self, module: str) -> None:
        """Record that a file of module has been parsed."""
        self.modules.add(module)

    def add_error_message(self, message: str, module: str | None = None) -> None:
        """Record a diagnostic, globally or against a module."""
        if module is None:
            self.error_messages.append(message)
        else:
            self.module_errors.setdefault(module, []).append(message)

    @property
    def number_of_annotations(self) -> int:
        """Total number of annotations collected."""
        return len(self.annotations)

    @property
    def has_errors(self) -> bool:
        """Whether any diagnostic has been recorded."""
        return bool(self.error_messages or self.module_errors)
