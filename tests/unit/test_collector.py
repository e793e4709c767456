"""Tests for first-level dependency collection."""

import logging

import pytest

from pom_report.collector import DependencyCollection, collect_dependencies, scope_for
from pom_report.models.pom import DependencyDeclaration, Scope
from pom_report.models.project import BuildProject, DeclaredDependency, DescriptorError


def _dep(group, name, version="1.0", configuration="implementation", scope=None):
    return DeclaredDependency(group, name, version, configuration=configuration, scope=scope)


class TestScopeFor:
    """Tests for configuration to scope mapping."""

    @pytest.mark.parametrize(
        "configuration, scope",
        [
            ("api", Scope.COMPILE),
            ("implementation", Scope.COMPILE),
            ("runtimeOnly", Scope.RUNTIME),
            ("testImplementation", Scope.TEST),
            ("testRuntimeOnly", Scope.TEST),
            ("compileOnly", Scope.PROVIDED),
            ("annotationProcessor", Scope.PROVIDED),
        ],
    )
    def test_known_configurations(self, configuration, scope):
        assert scope_for(_dep("g", "n", configuration=configuration)) is scope

    def test_unknown_configuration_is_undefined(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pom_report"):
            assert scope_for(_dep("g", "n", configuration="protobuf")) is Scope.UNDEFINED
        assert "protobuf" in caplog.text

    def test_explicit_scope_wins(self):
        dependency = _dep("g", "n", configuration="implementation", scope="Provided")
        assert scope_for(dependency) is Scope.PROVIDED

    def test_unknown_explicit_scope(self):
        with pytest.raises(DescriptorError, match="Unknown scope 'optional'"):
            scope_for(_dep("g", "n", scope="optional"))


class TestCollectDependencies:
    """Tests for collect_dependencies."""

    def test_empty_project(self):
        assert list(collect_dependencies(BuildProject(name="demo"))) == []

    def test_traversal_order(self):
        project = BuildProject(
            name="root",
            dependencies=[_dep("r", "one"), _dep("r", "two")],
            subprojects=[
                BuildProject(
                    name="a",
                    dependencies=[_dep("a", "one")],
                    subprojects=[BuildProject(name="a1", dependencies=[_dep("a1", "one")])],
                ),
                BuildProject(name="b", dependencies=[_dep("b", "one")]),
            ],
        )

        coordinates = [(d.group_id, d.artifact_id) for d in collect_dependencies(project)]

        assert coordinates == [
            ("r", "one"),
            ("r", "two"),
            ("a", "one"),
            ("a1", "one"),
            ("b", "one"),
        ]

    def test_duplicates_across_subprojects_kept(self):
        guava = _dep("com.google.guava", "guava", "31.1")
        project = BuildProject(
            name="root",
            subprojects=[
                BuildProject(name="a", dependencies=[guava]),
                BuildProject(name="b", dependencies=[guava]),
            ],
        )

        declarations = list(collect_dependencies(project))

        assert declarations == [
            DependencyDeclaration("com.google.guava", "guava", "31.1", Scope.COMPILE),
            DependencyDeclaration("com.google.guava", "guava", "31.1", Scope.COMPILE),
        ]

    def test_differing_versions_not_merged(self):
        project = BuildProject(
            name="root",
            dependencies=[_dep("g", "lib", "1.0")],
            subprojects=[BuildProject(name="a", dependencies=[_dep("g", "lib", "2.0")])],
        )
        assert [d.version for d in collect_dependencies(project)] == ["1.0", "2.0"]

    def test_restartable(self, sample_project):
        collection = collect_dependencies(sample_project)
        assert isinstance(collection, DependencyCollection)
        assert list(collection) == list(collection)
        assert len(list(collection)) == 2

    def test_lazy(self):
        project = BuildProject(name="root", dependencies=[_dep("g", "n", scope="bogus")])
        collection = collect_dependencies(project)

        with pytest.raises(DescriptorError):
            list(collection)

    def test_sees_later_changes(self):
        project = BuildProject(name="root")
        collection = collect_dependencies(project)
        project.dependencies.append(_dep("g", "late"))
        assert [d.artifact_id for d in collection] == ["late"]
