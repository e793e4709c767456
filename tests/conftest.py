"""Pytest configuration and fixtures for pom-report tests."""

import logging
from pathlib import Path

import pytest

from pom_report.models.project import BuildProject, DeclaredDependency, ProjectDescriptor
from pom_report.plugins import reset_plugins

SAMPLE_TOML = """\
[project]
group = "io.example"
name = "demo"
version = "1.2.3"
dependencies = [
    { configuration = "implementation", notation = "com.google.guava:guava:31.1" },
]

[[project.subprojects]]
name = "core"
dependencies = [
    { configuration = "testImplementation", group = "junit", name = "junit", version = "4.13.2" },
]

[[project.subprojects]]
name = "server"
dependencies = [
    { configuration = "runtimeOnly", notation = "org.slf4j:slf4j-simple:2.0.9" },
]

[properties]
groupId = "io.fallback"
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test.

    Tests calling setup_logging() must not affect tests relying on caplog.
    """
    yield

    logger = logging.getLogger("pom_report")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fresh_plugins():
    """Start from an uninitialized plugin system and leave it clean."""
    reset_plugins()
    yield
    reset_plugins()


@pytest.fixture
def sample_toml(tmp_path: Path) -> Path:
    """A TOML descriptor with a root project and two subprojects."""
    path = tmp_path / "project.toml"
    path.write_text(SAMPLE_TOML, encoding="utf-8")
    return path


@pytest.fixture
def sample_project() -> BuildProject:
    """Root project with one dependency and one subproject with one dependency."""
    return BuildProject(
        name="demo",
        group="io.example",
        version="1.2.3",
        dependencies=[DeclaredDependency("com.google.guava", "guava", "31.1")],
        subprojects=[
            BuildProject(
                name="core",
                path=":core",
                dependencies=[
                    DeclaredDependency("junit", "junit", "4.13.2", configuration="testImplementation")
                ],
            )
        ],
    )


@pytest.fixture
def sample_descriptor(sample_project: BuildProject) -> ProjectDescriptor:
    """Descriptor wrapping sample_project with no extra properties."""
    return ProjectDescriptor(project=sample_project)
