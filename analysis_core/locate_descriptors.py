"""Logic for locating Maven and Ant project descriptors in a workspace."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from analysis_core.find_files import find_files
from analysis_core.normalize_path import SLASH, normalize_path

MAVEN_POM = "pom.xml"
ANT_PROJECT = "build.xml"
ALL_DIRECTORIES = "**/"

FileFinder = Callable[[Path, str], list[str]]


class DescriptorKind(Enum):
    """Build tool that owns a project descriptor."""

    MAVEN = MAVEN_POM
    ANT = ANT_PROJECT

    @property
    def filename(self) -> str:
        """File name of descriptors of this kind."""
        return self.value


@dataclass(frozen=True)
class DescriptorFile:
    """A discovered project descriptor."""

    path: str  # absolute, forward slashes
    kind: DescriptorKind


def locate_descriptors(
    root: Path, descriptor_filename: str, finder: FileFinder = find_files
) -> list[str]:
    """Return absolute paths of every descriptor_filename below root."""
    relative_names = finder(root, ALL_DIRECTORIES + descriptor_filename)
    absolute_root = str(root.absolute())
    return [normalize_path(absolute_root + SLASH + name) for name in relative_names]


def locate_descriptor_files(
    root: Path, kind: DescriptorKind, finder: FileFinder = find_files
) -> list[DescriptorFile]:
    """Locate descriptors of one kind, tagged with that kind."""
    return [
        DescriptorFile(path=path, kind=kind)
        for path in locate_descriptors(root, kind.filename, finder)
    ]
