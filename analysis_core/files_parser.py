"""Orchestration logic for parsing the files of a workspace.

Files matching an Ant pattern are attributed to a module and handed to an
annotation parser. Problems with single files are recorded in the result as
diagnostics of the file's module and never stop the scan.
"""

import logging
import os
import traceback
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from analysis_core import messages
from analysis_core.annotation_parser import AnnotationParser, AnnotationParserError
from analysis_core.descriptor_parser import DescriptorParser
from analysis_core.errors import ScanCancelledError
from analysis_core.find_files import find_files
from analysis_core.module_detector import ModuleDetector
from analysis_core.parser_result import ParserResult

logger = logging.getLogger(__name__)

PatternFinder = Callable[..., list[str]]


class FilesParser:
    """Parses the workspace files matching a pattern into a ParserResult."""

    def __init__(
        self,
        file_pattern: str,
        parser: AnnotationParser,
        is_maven_build: bool = False,
        is_ant_build: bool = False,
        module_name: str = "",
        *,
        use_module_index: bool = False,
        excludes: Iterable[str] = (),
        finder: PatternFinder = find_files,
        is_cancelled: Callable[[], bool] | None = None,
        descriptor_parser: DescriptorParser | None = None,
    ) -> None:
        """Configure the scan; module_name, if set, is used for every file."""
        self.file_pattern = file_pattern
        self.parser = parser
        self.is_maven_build = is_maven_build
        self.is_ant_build = is_ant_build
        self.module_name = module_name
        self.use_module_index = use_module_index
        self.excludes = list(excludes)
        self.finder = finder
        self.is_cancelled = is_cancelled
        self.descriptor_parser = descriptor_parser or DescriptorParser()

    @classmethod
    def for_module(
        cls,
        file_pattern: str,
        parser: AnnotationParser,
        module_name: str,
        **kwargs: Any,
    ) -> "FilesParser":
        """Create a parser for a Maven build whose files all belong to module_name."""
        return cls(file_pattern, parser, True, False, module_name, **kwargs)

    def invoke(self, workspace: Path) -> ParserResult:
        """Scan workspace and return the collected result."""
        result = ParserResult(workspace)
        try:
            file_names = self.finder(
                workspace,
                self.file_pattern,
                is_cancelled=self.is_cancelled,
                excludes=self.excludes,
            )
            if not file_names and not self.is_maven_build:
                result.add_error_message(messages.NO_FILES)
                logger.warning("%s (pattern: %s)", messages.NO_FILES, self.file_pattern)
            else:
                self._parse_files(workspace, file_names, result)
        except ScanCancelledError:
            logger.info(messages.CANCELED)

        return result

    def _parse_files(
        self, workspace: Path, file_names: list[str], result: ParserResult
    ) -> None:
        detector = self._create_detector(workspace)

        for file_name in file_names:
            if self.is_cancelled is not None and self.is_cancelled():
                raise ScanCancelledError(messages.CANCELED)

            file = (workspace / file_name).absolute()
            module = self._module_of(detector, file)
            result.add_file(file, module)

            if not os.access(file, os.R_OK):
                message = messages.no_permission(module, file)
                logger.warning(message)
                result.add_error_message(message, module)
                continue
            if file.stat().st_size <= 0:
                message = messages.empty_file(module, file)
                logger.warning(message)
                result.add_error_message(message, module)
                continue

            self._parse_file(file, module, result)
            result.add_module(module)

    def _create_detector(self, workspace: Path) -> ModuleDetector:
        if self.use_module_index and not self.module_name.strip():
            return ModuleDetector.for_workspace(workspace, self.descriptor_parser)
        return ModuleDetector(parser=self.descriptor_parser)

    def _module_of(self, detector: ModuleDetector, file: Path) -> str:
        if self.module_name.strip():
            return self.module_name
        path = str(file)
        if self.use_module_index:
            module = detector.resolve_by_index(path)
            if module:
                return module
        return detector.resolve_by_heuristic(
            path, self.is_maven_build, self.is_ant_build
        )

    def _parse_file(self, file: Path, module: str, result: ParserResult) -> None:
        try:
            annotations = self.parser.parse(file, module)
        except AnnotationParserError as exc:
            cause = exc.__cause__ or exc
            trace = "".join(traceback.format_exception(cause))
            message = messages.parse_exception(file) + "\n\n" + trace
            result.add_error_message(message, module)
            logger.error(message)
            return
        except Exception as exc:  # noqa: BLE001
            trace = "".join(traceback.format_exception(exc))
            message = messages.parse_exception(file) + "\n\n" + trace
            result.add_error_message(message, module)
            logger.exception(messages.parse_exception(file))
            return

        result.add_annotations(annotations)
        logger.info(messages.parsed_file(file, module, len(annotations)))
