"""Tests for reading module names from Maven and Ant descriptors."""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from analysis_core.descriptor_parser import DescriptorParser

POM = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
  <modelVersion>4.0.0</modelVersion>
  <artifactId>core</artifactId>
  <name>
    Core Module
  </name>
  <build><name>not this one</name></build>
</project>
"""

BUILD_XML = """<?xml version="1.0"?>
<project name="web-app" default="compile" basedir=".">
  <target name="compile"/>
</project>
"""


@pytest.fixture
def parser() -> DescriptorParser:
    """Parser reading from the real file system."""
    return DescriptorParser()


def write(path: Path, content: str) -> Path:
    """Write content to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_parse_maven_name(tmp_path: Path, parser: DescriptorParser) -> None:
    """Verify the stripped project/name text is returned despite the namespace."""
    pom = write(tmp_path / "core" / "pom.xml", POM)
    assert parser.parse_maven_name(pom.as_posix()) == "Core Module"


def test_parse_maven_name_without_name(tmp_path: Path, parser: DescriptorParser) -> None:
    """Verify a POM without a name element yields an empty name."""
    pom = write(tmp_path / "pom.xml", "<project><artifactId>a</artifactId></project>")
    assert parser.parse_maven_name(pom.as_posix()) == ""


def test_parse_maven_name_wrong_root(tmp_path: Path, parser: DescriptorParser) -> None:
    """Verify only a name directly below project counts."""
    pom = write(tmp_path / "pom.xml", "<settings><name>x</name></settings>")
    assert parser.parse_maven_name(pom.as_posix()) == ""


def test_parse_maven_name_from_target(tmp_path: Path, parser: DescriptorParser) -> None:
    """Verify files below target/ are resolved through the sibling POM."""
    write(tmp_path / "proj" / "pom.xml", "<project><name>proj</name></project>")
    file_name = (tmp_path / "proj" / "target" / "classes" / "Foo.class").as_posix()
    assert parser.parse_maven_name(file_name) == "proj"


def test_parse_maven_name_other_file(tmp_path: Path, parser: DescriptorParser) -> None:
    """Verify paths that are neither a POM nor below target/ are not read."""
    write(tmp_path / "proj" / "pom.xml", "<project><name>proj</name></project>")
    opener = MagicMock()
    assert DescriptorParser(opener).parse_maven_name(
        (tmp_path / "proj" / "src" / "A.java").as_posix()
    ) == ""
    opener.assert_not_called()
    assert parser.parse_maven_name("/ws/proj/src/A.java") == ""


def test_parse_maven_name_missing_file(parser: DescriptorParser) -> None:
    """Verify a missing POM yields an empty name instead of an error."""
    assert parser.parse_maven_name("/does/not/exist/pom.xml") == ""


@pytest.mark.parametrize(
    "content",
    [
        "",
        "<project><name>broken</project>",
        "not xml at all",
        '<!DOCTYPE project [<!ENTITY x "boom">]><project><name>&x;</name></project>',
    ],
)
def test_parse_maven_name_malformed(
    tmp_path: Path, parser: DescriptorParser, content: str
) -> None:
    """Verify malformed or unsafe XML never raises."""
    pom = write(tmp_path / "pom.xml", content)
    assert parser.parse_maven_name(pom.as_posix()) == ""


def test_parse_ant_name(tmp_path: Path, parser: DescriptorParser) -> None:
    """Verify the project name attribute is read from directory/build.xml."""
    write(tmp_path / "web" / "build.xml", BUILD_XML)
    assert parser.parse_ant_name((tmp_path / "web").as_posix()) == "web-app"


def test_parse_ant_name_without_attribute(
    tmp_path: Path, parser: DescriptorParser
) -> None:
    """Verify a project element without a name yields an empty name."""
    write(tmp_path / "build.xml", '<project default="all"/>')
    assert parser.parse_ant_name(tmp_path.as_posix()) == ""


def test_parse_ant_name_malformed(tmp_path: Path, parser: DescriptorParser) -> None:
    """Verify a broken build.xml yields an empty name."""
    write(tmp_path / "build.xml", '<project name="x">')
    assert parser.parse_ant_name(tmp_path.as_posix()) == ""
    assert parser.parse_ant_name((tmp_path / "missing").as_posix()) == ""


def test_parse_ant_name_blank_directory() -> None:
    """Verify a blank directory reads build.xml relative to the working dir."""
    opener = MagicMock(return_value=io.BytesIO(b'<project name="local"/>'))
    assert DescriptorParser(opener).parse_ant_name("") == "local"
    opener.assert_called_once_with("build.xml")


def test_injected_opener_paths() -> None:
    """Verify the opener receives the derived descriptor paths."""
    opener = MagicMock(return_value=io.BytesIO(b"<project><name>m</name></project>"))
    parser = DescriptorParser(opener)
    assert parser.parse_maven_name("/ws/m/target/x.jar") == "m"
    opener.assert_called_once_with("/ws/m/pom.xml")

    opener.reset_mock(return_value=True)
    opener.return_value = io.BytesIO(b'<project name="a"/>')
    assert parser.parse_ant_name("/ws/a") == "a"
    opener.assert_called_once_with("/ws/a/build.xml")


def test_injected_opener_errors_are_swallowed() -> None:
    """Verify I/O errors raised by the opener are converted to empty names."""
    opener = MagicMock(side_effect=PermissionError("denied"))
    parser = DescriptorParser(opener)
    assert parser.parse_maven_name("/ws/pom.xml") == ""
    assert parser.parse_ant_name("/ws") == ""
