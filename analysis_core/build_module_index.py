"""Logic for building the module index of a workspace."""

import logging
from pathlib import Path

from analysis_core.descriptor_parser import DescriptorParser
from analysis_core.find_files import find_files
from analysis_core.locate_descriptors import (
    DescriptorFile,
    DescriptorKind,
    FileFinder,
    locate_descriptor_files,
)
from analysis_core.module_index import ModuleIndex, ModuleIndexEntry
from analysis_core.substring import substring_before_last

logger = logging.getLogger(__name__)


def build_module_index(
    root: Path,
    parser: DescriptorParser | None = None,
    finder: FileFinder = find_files,
) -> ModuleIndex:
    """Index the Maven modules of root, or its Ant projects if there are none.

    Ant descriptors are only consulted when no pom.xml anywhere in the
    workspace yields a module name.
    """
    parser = parser or DescriptorParser()

    entries = _index_entries(
        locate_descriptor_files(root, DescriptorKind.MAVEN, finder), parser
    )
    if not entries:
        entries = _index_entries(
            locate_descriptor_files(root, DescriptorKind.ANT, finder), parser
        )

    index = ModuleIndex(entries)
    logger.info("Found %d modules in workspace %s", len(index), root)
    return index


def _index_entries(
    descriptors: list[DescriptorFile], parser: DescriptorParser
) -> list[ModuleIndexEntry]:
    entries: dict[str, ModuleIndexEntry] = {}
    for descriptor in descriptors:
        name = _parse_name(descriptor, parser)
        if not name.strip():
            continue
        prefix = substring_before_last(descriptor.path, descriptor.kind.filename)
        entries[prefix] = ModuleIndexEntry(path_prefix=prefix, module_name=name)
        logger.debug("Registered module %s for %s", name, prefix)
    return list(entries.values())


def _parse_name(descriptor: DescriptorFile, parser: DescriptorParser) -> str:
    if descriptor.kind is DescriptorKind.MAVEN:
        return parser.parse_maven_name(descriptor.path)
    return parser.parse_ant_name(substring_before_last(descriptor.path, "/"))
