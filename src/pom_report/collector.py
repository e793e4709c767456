"""Collection of first-level dependencies across a project tree."""

from collections.abc import Iterator

from pom_report.config import CONFIGURATION_SCOPES
from pom_report.logging import get_logger
from pom_report.models.pom import DependencyDeclaration, Scope
from pom_report.models.project import BuildProject, DeclaredDependency, DescriptorError

logger = get_logger(__name__)


def scope_for(dependency: DeclaredDependency) -> Scope:
    """Map a declared dependency to its Maven scope.

    An explicit scope wins over the configuration name. Configurations
    without a Maven counterpart map to ``Scope.UNDEFINED``.

    Raises:
        DescriptorError: If an explicit scope is not a known Maven scope
    """
    if dependency.scope is not None:
        try:
            return Scope(dependency.scope.lower())
        except ValueError as e:
            raise DescriptorError(
                f"Unknown scope '{dependency.scope}' for {dependency.group}:{dependency.name}"
            ) from e

    scope = CONFIGURATION_SCOPES.get(dependency.configuration)
    if scope is None:
        logger.debug(
            f"Configuration '{dependency.configuration}' of "
            f"{dependency.group}:{dependency.name} has no Maven scope"
        )
        return Scope.UNDEFINED
    return Scope(scope)


class DependencyCollection:
    """Lazy view over the first-level dependencies of a project tree.

    Every iteration walks the tree again: the project itself first, then its
    subprojects depth-first, each in declaration order. Identical
    coordinates declared by several projects are all kept.
    """

    def __init__(self, project: BuildProject):
        self.project = project

    def __iter__(self) -> Iterator[DependencyDeclaration]:
        for project in self.project.all_projects():
            for dependency in project.dependencies:
                yield DependencyDeclaration(
                    group_id=dependency.group,
                    artifact_id=dependency.name,
                    version=dependency.version,
                    scope=scope_for(dependency),
                )


def collect_dependencies(project: BuildProject) -> DependencyCollection:
    """Collect the declared dependencies of ``project`` and its subprojects."""
    return DependencyCollection(project)
