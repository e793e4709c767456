"""Tests for pom.xml report rendering and writing."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from pom_report.generators.pom import render_pom, write_pom
from pom_report.generators.pom.pom_xml import render_dependencies
from pom_report.models.pom import DependencyDeclaration, ProjectIdentity, Scope

IDENTITY = ProjectIdentity.of("io.example", "demo", "1.2.3")
GUAVA = DependencyDeclaration("com.google.guava", "guava", "31.1", Scope.COMPILE)
JUNIT = DependencyDeclaration("junit", "junit", "4.13.2", Scope.TEST)


def _parse(path: Path) -> ET.Element:
    return ET.parse(path).getroot()


class TestRenderPom:
    """Tests for the rendered document."""

    def test_contains_identity_and_dependency(self):
        xml = render_pom(IDENTITY, [GUAVA])

        assert "<groupId>io.example</groupId>" in xml
        assert "<artifactId>demo</artifactId>" in xml
        assert "<version>1.2.3</version>" in xml
        assert "<groupId>com.google.guava</groupId>" in xml
        assert "<artifactId>guava</artifactId>" in xml
        assert "<version>31.1</version>" in xml
        assert "<scope>compile</scope>" in xml

    def test_block_order(self):
        root = ET.fromstring(render_pom(IDENTITY, [GUAVA]))

        assert root.tag == "project"
        assert [child.tag for child in root] == [
            "groupId",
            "artifactId",
            "version",
            "inceptionYear",
            "licenses",
            "dependencies",
        ]

    def test_static_blocks(self):
        root = ET.fromstring(render_pom(IDENTITY, []))

        assert root.findtext("inceptionYear") == "2015"
        license = root.find("licenses/license")
        assert license is not None
        assert license.findtext("name") == "Apache License, Version 2.0"
        assert license.findtext("url") == "https://www.apache.org/licenses/LICENSE-2.0"

    def test_empty_dependencies(self):
        xml = render_pom(IDENTITY, [])
        root = ET.fromstring(xml)

        dependencies = root.find("dependencies")
        assert dependencies is not None
        assert list(dependencies) == []

    def test_escapes_values(self):
        identity = ProjectIdentity.of("io.example", "demo<&>", "1.0")
        root = ET.fromstring(render_pom(identity, []))
        assert root.findtext("artifactId") == "demo<&>"

    def test_multiline_values_kept_verbatim(self):
        identity = ProjectIdentity.of("io.example", "demo", "1.0\nrc")
        dependency = DependencyDeclaration("com.google.guava", "guava", "31.1\njre")

        root = ET.fromstring(render_pom(identity, [dependency]))

        assert root.findtext("version") == "1.0\nrc"
        assert root.findtext("dependencies/dependency/version") == "31.1\njre"

    def test_nesting_indentation(self):
        lines = render_pom(IDENTITY, [GUAVA]).splitlines()

        assert "  <groupId>io.example</groupId>" in lines
        assert "  <dependencies>" in lines
        assert "    <dependency>" in lines
        assert "      <scope>compile</scope>" in lines
        assert "  </dependencies>" in lines
        assert lines[-1] == "</project>"

    def test_render_dependencies_consumes_iterator(self):
        block = render_dependencies(iter([GUAVA, JUNIT]))
        assert block.count("<dependency>") == 2


class TestWritePom:
    """Tests for writing the report file."""

    @pytest.mark.parametrize("dependencies", [[], [GUAVA], [GUAVA, JUNIT, GUAVA]])
    def test_dependency_count_and_field_order(self, tmp_path, dependencies):
        path = write_pom(IDENTITY, dependencies, tmp_path / "pom.xml")

        entries = _parse(path).findall("dependencies/dependency")
        assert len(entries) == len(dependencies)
        for entry, expected in zip(entries, dependencies):
            assert [child.tag for child in entry] == ["groupId", "artifactId", "version", "scope"]
            assert [child.text for child in entry] == list(expected.to_dict().values())

    def test_non_ascii_values_parse(self, tmp_path):
        identity = ProjectIdentity.of("io.example", "démo", "1.0")
        path = write_pom(identity, [], tmp_path / "pom.xml")

        assert _parse(path).findtext("artifactId") == identity.artifact_id

    def test_overwrites_existing_content(self, tmp_path):
        path = tmp_path / "pom.xml"
        path.write_text("x" * 10_000, encoding="utf-8")

        write_pom(IDENTITY, [GUAVA], path)

        assert path.read_text(encoding="utf-8").startswith('<?xml version="1.0"')
        assert "xxx" not in path.read_text(encoding="utf-8")

    def test_idempotent(self, tmp_path):
        first = write_pom(IDENTITY, [GUAVA, JUNIT], tmp_path / "first.xml")
        second = write_pom(IDENTITY, [GUAVA, JUNIT], tmp_path / "second.xml")
        again = write_pom(IDENTITY, [GUAVA, JUNIT], first)

        assert first.read_bytes() == second.read_bytes()
        assert again.read_bytes() == second.read_bytes()

    def test_unix_line_endings(self, tmp_path):
        path = write_pom(IDENTITY, [GUAVA], tmp_path / "pom.xml")
        assert b"\r\n" not in path.read_bytes()

    def test_missing_parent_directory(self, tmp_path):
        with pytest.raises(OSError):
            write_pom(IDENTITY, [GUAVA], tmp_path / "missing" / "pom.xml")

    def test_returns_path(self, tmp_path):
        destination = tmp_path / "pom.xml"
        assert write_pom(IDENTITY, [], str(destination)) == destination
