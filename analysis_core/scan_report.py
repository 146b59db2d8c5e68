"""Logic for writing JSON summaries of a workspace scan."""

import json
import time
from pathlib import Path
from typing import Any

from analysis_core.parser_result import ParserResult

REPORT_SCHEMA_VERSION = 1


class ScanReport:
    """Summarizes a ParserResult together with the configuration used."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.start_time = time.time()
        self.result: ParserResult | None = None

    def set_result(self, result: ParserResult) -> None:
        """Attach the result of the finished scan."""
        self.result = result

    def to_dict(self) -> dict[str, Any]:
        """Return the report as plain JSON-compatible data."""
        result = self.result
        modules = sorted(result.modules) if result else []
        errors = list(result.error_messages) if result else []
        module_errors = (
            {m: list(msgs) for m, msgs in sorted(result.module_errors.items())}
            if result
            else {}
        )
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "schema_version": REPORT_SCHEMA_VERSION,
                "workspace": str(result.workspace) if result else "",
                "total_annotations": result.number_of_annotations if result else 0,
                "total_modules": len(modules),
            },
            "modules": modules,
            "files": dict(sorted(result.files.items())) if result else {},
            "errors": errors,
            "module_errors": module_errors,
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        files_per_module: dict[str, int] = {}
        file_modules = self.result.files.values() if self.result else []
        for module in file_modules:
            files_per_module[module] = files_per_module.get(module, 0) + 1

        error_counts: dict[str, int] = {}
        if self.result:
            for module, msgs in self.result.module_errors.items():
                error_counts[module] = len(msgs)

        return {
            "files_per_module": files_per_module,
            "errors_per_module": error_counts,
            "unresolved_files": files_per_module.get("", 0),
        }
