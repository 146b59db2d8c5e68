"""Logic for reading project names from Maven and Ant descriptors."""

import logging
from collections.abc import Callable
from typing import BinaryIO

from analysis_core.extract_xml_name import extract_child_text, extract_root_attribute
from analysis_core.locate_descriptors import ANT_PROJECT, MAVEN_POM
from analysis_core.normalize_path import SLASH
from analysis_core.open_stream import StreamOpener, open_file_stream
from analysis_core.substring import substring_before_last

logger = logging.getLogger(__name__)

# Maven build output folder; files below it belong to the sibling pom.xml.
TARGET = "/target"


class DescriptorParser:
    """Reads declared project names; any failure yields an empty name."""

    def __init__(self, opener: StreamOpener = open_file_stream) -> None:
        """Initialize the parser with the capability used to open files."""
        self.opener = opener

    def parse_maven_name(self, path: str) -> str:
        """Return the project/name of the POM that owns path, or ""."""
        if path.endswith(MAVEN_POM):
            pom = path
        elif TARGET in path:
            pom = substring_before_last(path, TARGET) + SLASH + MAVEN_POM
        else:
            return ""
        return self._read(pom, lambda s: extract_child_text(s, "project", "name"))

    def parse_ant_name(self, directory: str) -> str:
        """Return the name attribute of directory/build.xml, or ""."""
        if directory.strip():
            build_file = directory + SLASH + ANT_PROJECT
        else:
            build_file = ANT_PROJECT
        return self._read(
            build_file, lambda s: extract_root_attribute(s, "project", "name")
        )

    def _read(
        self, path: str, extract: Callable[[BinaryIO], str | None]
    ) -> str:
        try:
            with self.opener(path) as stream:
                name = extract(stream)
        except OSError as exc:
            logger.debug("Cannot read descriptor %s: %s", path, exc)
            return ""
        return name or ""
