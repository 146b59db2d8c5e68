"""Detects module names from descriptors or the path of a file."""

from pathlib import Path

from analysis_core.build_module_index import build_module_index
from analysis_core.descriptor_parser import DescriptorParser
from analysis_core.find_files import find_files
from analysis_core.locate_descriptors import FileFinder
from analysis_core.module_index import ModuleIndex
from analysis_core.normalize_path import SLASH, normalize_path
from analysis_core.substring import substring_after_last, substring_before_last

# Source folder; files directly inside it belong to the directory above it.
SOURCE_FOLDER = "src"


def strip_source_folder(directory: str) -> str:
    """Drop a trailing ``src`` segment from directory, if it has a parent."""
    head, sep, last = directory.rpartition(SLASH)
    if sep and head and last == SOURCE_FOLDER:
        return head
    return directory


class ModuleDetector:
    """Guesses the module a file belongs to.

    Two modes are offered: a lookup in a precomputed workspace index, and a
    heuristic that reads the descriptor next to the file or falls back to the
    name of the file's directory.
    """

    def __init__(
        self,
        index: ModuleIndex | None = None,
        parser: DescriptorParser | None = None,
    ) -> None:
        """Initialize the detector with an optional prebuilt index."""
        self.index = index if index is not None else ModuleIndex()
        self.parser = parser or DescriptorParser()

    @classmethod
    def for_workspace(
        cls,
        workspace: Path,
        parser: DescriptorParser | None = None,
        finder: FileFinder = find_files,
    ) -> "ModuleDetector":
        """Create a detector owning the module index of workspace."""
        parser = parser or DescriptorParser()
        return cls(build_module_index(workspace, parser, finder), parser)

    def resolve_by_index(self, file_path: str) -> str:
        """Return the module of the matching index prefix, or ""."""
        return self.index.lookup(file_path)

    def resolve_by_heuristic(
        self, file_path: str, is_maven_build: bool, is_ant_build: bool
    ) -> str:
        """Guess the module from the pom.xml, the build.xml or the folder name."""
        unix_name = normalize_path(file_path)

        if is_maven_build:
            project_name = self.parser.parse_maven_name(unix_name)
            if project_name.strip():
                return project_name

        path = substring_before_last(unix_name, SLASH)

        if is_ant_build:
            project_name = self.parser.parse_ant_name(path)
            if project_name.strip():
                return project_name

        path = strip_source_folder(path)
        if SLASH in path:
            return substring_after_last(path, SLASH)
        return path


def build_index(root: Path) -> ModuleIndex:
    """Build the module index of the workspace at root."""
    return build_module_index(root)


def resolve_module(file_path: str, index: ModuleIndex | None = None) -> str:
    """Resolve the module of file_path; "" when nothing applies."""
    detector = ModuleDetector(index)
    if index is not None:
        return detector.resolve_by_index(file_path)
    return detector.resolve_by_heuristic(
        file_path, is_maven_build=False, is_ant_build=False
    )
