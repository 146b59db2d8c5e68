"""Scan a build workspace, attribute its files to modules and parse them.

Modules are taken from Maven pom.xml or Ant build.xml descriptors where
possible and from the directory layout otherwise. The parsed result is printed
as a per-module summary and can be written as a JSON report.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from analysis_core.annotation_parser import NullAnnotationParser
from analysis_core.compute_config_hash import compute_config_hash
from analysis_core.errors import ConfigError
from analysis_core.files_parser import FilesParser
from analysis_core.load_config import load_config
from analysis_core.load_parser import load_parser
from analysis_core.module_detector import build_index
from analysis_core.scan_report import ScanReport

if TYPE_CHECKING:
    from analysis_core.parser_result import ParserResult

logger = logging.getLogger(__name__)


def apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> None:
    """Let command line options take precedence over the configuration file."""
    scan = config["scan"]
    if args.pattern:
        scan["pattern"] = args.pattern
    if args.module_name:
        scan["module_name"] = args.module_name
    if args.maven:
        scan["maven_build"] = True
    if args.ant:
        scan["ant_build"] = True
    if args.use_module_index:
        scan["use_module_index"] = True
    if args.exclude:
        config["excludes"] = [*config["excludes"], *args.exclude]
    if args.verbose:
        config["logging"]["level"] = "DEBUG"


def list_modules(workspace: Path) -> int:
    """Print the module index of the workspace."""
    index = build_index(workspace)
    if not index:
        print(f"No Maven or Ant modules found under: {workspace}")
        return 0
    for entry in index:
        print(f"{entry.module_name}\t{entry.path_prefix}")
    return 0


def run_scan(
    workspace: Path, config: dict[str, Any], parser_ref: str | None
) -> ParserResult:
    """Run the configured scan over the workspace."""
    scan = config["scan"]
    parser = load_parser(parser_ref) if parser_ref else NullAnnotationParser()
    files_parser = FilesParser(
        scan["pattern"],
        parser,
        bool(scan["maven_build"]),
        bool(scan["ant_build"]),
        str(scan["module_name"] or ""),
        use_module_index=bool(scan["use_module_index"]),
        excludes=config["excludes"],
    )
    return files_parser.invoke(workspace)


def print_summary(result: ParserResult) -> None:
    """Print modules, annotation counts and diagnostics."""
    for message in result.error_messages:
        print(f"ERROR: {message}")

    files_per_module: dict[str, int] = {}
    for module in result.files.values():
        files_per_module[module] = files_per_module.get(module, 0) + 1

    for module in sorted(files_per_module):
        label = module or "(unknown module)"
        errors = len(result.module_errors.get(module, []))
        print(f"{label}: {files_per_module[module]} files, {errors} errors")

    print(
        f"Parsed {len(result.files)} files of {len(result.modules)} modules "
        f"with {result.number_of_annotations} annotations."
    )


def main(argv: list[str] | None = None) -> int:
    """Run the workspace scan."""
    ap = argparse.ArgumentParser(
        description="Attribute workspace files to Maven/Ant modules and parse them.",
    )
    ap.add_argument("workspace", type=Path, help="Root directory of the workspace")
    ap.add_argument(
        "--pattern",
        help="Ant-style pattern(s) of files to parse, comma separated",
    )
    ap.add_argument(
        "--parser",
        help="Annotation parser as 'package.module:Name' (default: no annotations)",
    )
    ap.add_argument("--module-name", help="Use this module name for every file")
    ap.add_argument(
        "--maven", action="store_true", help="Read module names from pom.xml files"
    )
    ap.add_argument(
        "--ant", action="store_true", help="Read module names from build.xml files"
    )
    ap.add_argument(
        "--use-module-index",
        action="store_true",
        help="Index all descriptors of the workspace before scanning",
    )
    ap.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Ant-style pattern of files to skip (repeatable)",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument("--report", help="Write a JSON report to this path")
    ap.add_argument(
        "--list-modules",
        action="store_true",
        help="Print the module index of the workspace and exit",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    try:
        config = load_config(args.config)
        apply_overrides(config, args)
        logging.basicConfig(
            level=str(config["logging"]["level"]).upper(),
            format="%(levelname)s %(name)s: %(message)s",
        )

        workspace = args.workspace.resolve()
        if args.list_modules:
            return list_modules(workspace)

        if not config["scan"]["pattern"]:
            msg = "No file pattern given (use --pattern or scan.pattern)"
            raise ConfigError(msg)

        report = ScanReport(compute_config_hash(config))
        logger.debug("Scanning %s with config %s", workspace, report.config_hash)
        result = run_scan(workspace, config, args.parser)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print_summary(result)
    if args.report:
        report.set_result(result)
        report.generate_report(args.report)
        print(f"Report written to: {args.report}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
