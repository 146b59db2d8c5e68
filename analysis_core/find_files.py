"""Logic for finding workspace files that match Ant-style patterns."""

from collections.abc import Callable, Iterable
from pathlib import Path

from analysis_core.errors import ScanCancelledError

PATTERN_SEPARATOR = ","


def split_patterns(pattern: str) -> list[str]:
    """Split a comma separated pattern list, dropping blank entries."""
    return [p.strip() for p in pattern.split(PATTERN_SEPARATOR) if p.strip()]


def find_files(
    root: Path,
    pattern: str,
    is_cancelled: Callable[[], bool] | None = None,
    excludes: Iterable[str] = (),
) -> list[str]:
    """Return the files below root matching pattern as sorted relative paths.

    Patterns use Ant syntax: ``**/`` matches any number of directories
    (including none), so ``**/pom.xml`` also finds ``root/pom.xml``. Several
    patterns may be given separated by commas. Returned paths always use
    forward slashes.
    """
    found: set[str] = set()
    for include in split_patterns(pattern):
        found.update(_glob(root, include, is_cancelled))

    for exclude in excludes:
        for p in split_patterns(exclude):
            found.difference_update(_glob(root, p, is_cancelled))

    return sorted(found)


def _glob(
    root: Path, pattern: str, is_cancelled: Callable[[], bool] | None
) -> set[str]:
    if pattern.endswith("**"):
        # Ant: a trailing ** means every file below that directory
        pattern += "/*"
    matches: set[str] = set()
    for path in root.glob(pattern):
        if is_cancelled is not None and is_cancelled():
            msg = f"File search in {root} was canceled"
            raise ScanCancelledError(msg)
        if path.is_file():
            matches.add(path.relative_to(root).as_posix())
    return matches
