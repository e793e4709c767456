"""Report models: project identity and first-level dependencies."""

from dataclasses import dataclass
from enum import Enum

from packageurl import PackageURL

from pom_report.utils import find_invalid_xml_char


class Scope(Enum):
    """Maven scope of a first-level dependency.

    Values:
        COMPILE: Needed to compile and run
        RUNTIME: Needed only at runtime
        TEST: Needed only by tests
        PROVIDED: Supplied by the environment, compile-time only
        SYSTEM: Supplied from the local system
        UNDEFINED: Declared in a configuration with no Maven counterpart
    """

    COMPILE = "compile"
    RUNTIME = "runtime"
    TEST = "test"
    PROVIDED = "provided"
    SYSTEM = "system"
    UNDEFINED = "undefined"


class MissingPropertyError(ValueError):
    """An identity property is absent from both the project and the fallback."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Cannot resolve '{key}': the project does not declare it "
            f"and it is missing from the extra properties"
        )


@dataclass(frozen=True)
class ProjectIdentity:
    """Group ID, artifact ID and version of the reported project."""

    group_id: str
    artifact_id: str
    version: str

    @classmethod
    def of(cls, group_id: str, artifact_id: str, version: str) -> "ProjectIdentity":
        """Validate the coordinates and create an identity.

        Raises:
            ValueError: If any of the coordinates is blank or holds a
                character XML cannot carry
        """
        for label, value in (
            ("groupId", group_id),
            ("artifactId", artifact_id),
            ("version", version),
        ):
            if not value or not value.strip():
                raise ValueError(f"Project {label} cannot be blank.")
            char = find_invalid_xml_char(value)
            if char is not None:
                raise ValueError(f"Project {label} contains {char!r}, which XML does not allow.")
        return cls(group_id=group_id, artifact_id=artifact_id, version=version)


@dataclass(frozen=True)
class DependencyDeclaration:
    """A single first-level dependency as it appears in the report."""

    group_id: str
    artifact_id: str
    version: str
    scope: Scope = Scope.COMPILE

    @property
    def purl(self) -> PackageURL:
        """Maven package URL of the dependency (version omitted when unknown)."""
        return PackageURL(
            type="maven",
            namespace=self.group_id,
            name=self.artifact_id,
            version=self.version or None,
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary in report field order."""
        return {
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "version": self.version,
            "scope": self.scope.value,
        }
