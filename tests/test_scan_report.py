"""Tests for the ScanReport logic."""

import json
from pathlib import Path

from analysis_core.parser_result import ParserResult
from analysis_core.scan_report import ScanReport


def test_scan_report_generation(tmp_path: Path) -> None:
    """Verify that the scan report is generated correctly."""
    result = ParserResult(tmp_path)
    result.add_file(tmp_path / "core" / "a.txt", "Core")
    result.add_file(tmp_path / "core" / "b.txt", "Core")
    result.add_file(tmp_path / "c.txt", "")
    result.add_annotations(["w1", "w2", "w3"])
    result.add_module("Core")
    result.add_module("")
    result.add_error_message("global problem")
    result.add_error_message("empty file", "Core")

    report = ScanReport("hash123")
    report.set_result(result)
    output_file = tmp_path / "report.json"
    report.generate_report(str(output_file))

    content = json.loads(output_file.read_text(encoding="utf-8"))

    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["total_annotations"] == 3
    assert content["meta"]["total_modules"] == 2
    assert content["modules"] == ["", "Core"]
    assert content["errors"] == ["global problem"]
    assert content["module_errors"] == {"Core": ["empty file"]}
    assert len(content["files"]) == 3

    stats = content["stats"]
    assert stats["files_per_module"] == {"Core": 2, "": 1}
    assert stats["errors_per_module"] == {"Core": 1}
    assert stats["unresolved_files"] == 1


def test_scan_report_without_result() -> None:
    """Verify a report can be rendered before a result is attached."""
    data = ScanReport("h").to_dict()
    assert data["modules"] == []
    assert data["files"] == {}
    assert data["stats"]["unresolved_files"] == 0
