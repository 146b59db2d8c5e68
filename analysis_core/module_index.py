"""Data model for the path-prefix to module-name index."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from analysis_core.normalize_path import normalize_path


@dataclass(frozen=True)
class ModuleIndexEntry:
    """Maps a directory prefix (with trailing slash) to a module name."""

    path_prefix: str
    module_name: str


class ModuleIndex:
    """Immutable, lexicographically sorted collection of module prefixes."""

    def __init__(self, entries: Iterable[ModuleIndexEntry] = ()) -> None:
        """Sort and freeze the given entries."""
        self._entries = tuple(sorted(entries, key=lambda e: e.path_prefix))

    @property
    def entries(self) -> tuple[ModuleIndexEntry, ...]:
        """Entries in prefix order."""
        return self._entries

    def __iter__(self) -> Iterator[ModuleIndexEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def lookup(self, file_path: str) -> str:
        """Return the module of the last prefix (in sort order) matching file_path.

        Every matching prefix overwrites the previous match, so the
        lexicographically greatest match wins rather than the longest one.
        """
        full_path = normalize_path(file_path)
        guessed = ""
        for entry in self._entries:
            if full_path.startswith(entry.path_prefix):
                guessed = entry.module_name
        return guessed

    def as_dict(self) -> dict[str, str]:
        """Return the index as a prefix to module name mapping."""
        return {e.path_prefix: e.module_name for e in self._entries}
