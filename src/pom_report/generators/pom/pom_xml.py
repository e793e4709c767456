"""pom.xml-like report generation.

The report lists the project identity followed by every first-level
dependency of the project and its subprojects. It describes the build for
humans and is not meant to be consumed by Maven.
"""

from collections.abc import Iterable
from pathlib import Path
from textwrap import indent
from xml.sax.saxutils import escape

from pom_report.config import OUTPUT_ENCODING
from pom_report.generators.pom.templates import (
    DEPENDENCIES_CLOSE,
    DEPENDENCIES_OPEN,
    DEPENDENCY_TEMPLATE,
    EMPTY_DEPENDENCIES_BLOCK,
    FOOTER_TEMPLATE,
    HEADER_TEMPLATE,
    IDENTITY_TEMPLATE,
    INCEPTION_YEAR_BLOCK,
    INDENT,
    LICENSE_BLOCK,
)
from pom_report.logging import get_logger
from pom_report.models.pom import DependencyDeclaration, ProjectIdentity

logger = get_logger(__name__)


def _nest(template: str, depth: int) -> str:
    # Indent before substituting; values are never re-indented.
    return indent(template, INDENT * depth)


def render_identity(identity: ProjectIdentity, depth: int = 1) -> str:
    """Render the groupId/artifactId/version block."""
    return _nest(IDENTITY_TEMPLATE, depth).format(
        group_id=escape(identity.group_id),
        artifact_id=escape(identity.artifact_id),
        version=escape(identity.version),
    )


def render_dependency(dependency: DependencyDeclaration, depth: int = 2) -> str:
    """Render a single <dependency> element."""
    return _nest(DEPENDENCY_TEMPLATE, depth).format(
        group_id=escape(dependency.group_id),
        artifact_id=escape(dependency.artifact_id),
        version=escape(dependency.version),
        scope=escape(dependency.scope.value),
    )


def render_dependencies(dependencies: Iterable[DependencyDeclaration], depth: int = 1) -> str:
    """Render the <dependencies> block, consuming ``dependencies`` once."""
    rendered = "".join(render_dependency(d, depth + 1) for d in dependencies)
    if not rendered:
        return _nest(EMPTY_DEPENDENCIES_BLOCK, depth)
    return _nest(DEPENDENCIES_OPEN, depth) + rendered + _nest(DEPENDENCIES_CLOSE, depth)


def render_pom(identity: ProjectIdentity, dependencies: Iterable[DependencyDeclaration]) -> str:
    """Render the full report document.

    Blocks appear in a fixed order: identity, inception year, licenses,
    dependencies.

    Args:
        identity: Identity of the reported project
        dependencies: First-level dependencies, iterated exactly once

    Returns:
        Complete document as a string
    """
    blocks = [
        render_identity(identity),
        _nest(INCEPTION_YEAR_BLOCK, 1),
        _nest(LICENSE_BLOCK, 1),
        render_dependencies(dependencies),
    ]
    return HEADER_TEMPLATE + "".join(blocks) + FOOTER_TEMPLATE


def write_pom(
    identity: ProjectIdentity,
    dependencies: Iterable[DependencyDeclaration],
    destination: Path,
) -> Path:
    """Write the report to ``destination``, replacing any existing content.

    The document is rendered in memory before the file is opened. Writers
    targeting the same path must be serialized by the caller.

    Args:
        identity: Identity of the reported project
        dependencies: First-level dependencies, iterated exactly once
        destination: File to write

    Returns:
        Path to the written file

    Raises:
        OSError: If the file cannot be written
    """
    destination = Path(destination)
    content = render_pom(identity, dependencies)

    with open(destination, "w", encoding=OUTPUT_ENCODING, newline="\n") as f:
        f.write(content)

    logger.debug(f"Wrote {len(content)} characters to {destination}")
    return destination
