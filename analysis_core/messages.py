"""Diagnostic messages recorded in scan results."""

from pathlib import Path

NO_FILES = "No files found. Configuration error?"
CANCELED = "Parsing has been canceled."


def no_permission(module: str, file: Path) -> str:
    return (
        f"Skipping file {file} of module {module} because there is no "
        "permission to read the file."
    )


def empty_file(module: str, file: Path) -> str:
    return f"Skipping file {file} of module {module} because it is empty."


def parse_exception(file: Path) -> str:
    return f"Parsing of file {file} failed due to an exception:"


def parsed_file(file: Path, module: str, count: int) -> str:
    return f"Successfully parsed file {file} of module {module} with {count} warnings."
