"""Resolution of the reported project's identity.

Each coordinate is read from the project first; when the project leaves it
empty or blank, the same-named key is read from the extra properties.
"""

from collections.abc import Mapping, Sequence

from pom_report.config import ARTIFACT_ID_KEY, GROUP_ID_KEY, VERSION_KEY
from pom_report.logging import get_logger
from pom_report.models.pom import MissingPropertyError, ProjectIdentity
from pom_report.models.project import BuildProject

logger = get_logger(__name__)


def lookup_property(key: str, sources: Sequence[Mapping[str, str]]) -> str:
    """Return the first non-blank value of ``key`` across ordered sources.

    Args:
        key: Property name
        sources: Mappings to consult, highest priority first

    Returns:
        The first non-blank value found

    Raises:
        MissingPropertyError: If no source supplies a non-blank value
    """
    for source in sources:
        value = source.get(key)
        if value is not None and str(value).strip():
            return str(value)
    raise MissingPropertyError(key)


def project_properties(project: BuildProject) -> dict[str, str]:
    """Expose the project's intrinsic fields under the identity keys."""
    return {
        GROUP_ID_KEY: project.group,
        ARTIFACT_ID_KEY: project.name,
        VERSION_KEY: project.version,
    }


def resolve_identity(project: BuildProject, fallback: Mapping[str, str]) -> ProjectIdentity:
    """Resolve the identity of ``project``, falling back to ``fallback``.

    Raises:
        MissingPropertyError: If a coordinate is in neither source
        ValueError: If a resolved coordinate holds a character XML cannot carry
    """
    sources = [project_properties(project), fallback]
    identity = ProjectIdentity.of(
        group_id=lookup_property(GROUP_ID_KEY, sources),
        artifact_id=lookup_property(ARTIFACT_ID_KEY, sources),
        version=lookup_property(VERSION_KEY, sources),
    )
    logger.debug(
        f"Resolved identity {identity.group_id}:{identity.artifact_id}:{identity.version}"
    )
    return identity
