"""Report pipeline: resolve identity, collect dependencies, write the report."""

from dataclasses import dataclass
from pathlib import Path

from pom_report.collector import collect_dependencies
from pom_report.generators.pom import write_pom
from pom_report.identity import resolve_identity
from pom_report.logging import get_logger
from pom_report.models.pom import DependencyDeclaration, ProjectIdentity
from pom_report.models.project import ProjectDescriptor

logger = get_logger(__name__)


@dataclass
class PomReportResult:
    """Outcome of a report generation.

    Attributes:
        identity: Resolved identity of the reported project
        dependency_count: Number of dependency entries written
        output_path: Path of the written report
    """

    identity: ProjectIdentity
    dependency_count: int
    output_path: Path


class _CountingIterator:
    """Pass-through iterator that counts the items it yields."""

    def __init__(self, items):
        self._items = iter(items)
        self.count = 0

    def __iter__(self):
        return self

    def __next__(self) -> DependencyDeclaration:
        item = next(self._items)
        self.count += 1
        return item


def generate_pom_report(descriptor: ProjectDescriptor, destination: Path) -> PomReportResult:
    """Write the first-level dependency report of ``descriptor``.

    Args:
        descriptor: Loaded project descriptor
        destination: File to write; existing content is replaced

    Returns:
        PomReportResult describing the written report

    Raises:
        MissingPropertyError: If the project identity cannot be resolved
        OSError: If the report cannot be written
    """
    identity = resolve_identity(descriptor.project, descriptor.properties)
    dependencies = _CountingIterator(collect_dependencies(descriptor.project))

    output_path = write_pom(identity, dependencies, Path(destination))
    logger.info(
        f"Wrote {output_path} for {identity.group_id}:{identity.artifact_id}:{identity.version} "
        f"({dependencies.count} dependencies)"
    )
    return PomReportResult(
        identity=identity,
        dependency_count=dependencies.count,
        output_path=output_path,
    )
