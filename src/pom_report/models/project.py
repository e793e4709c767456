"""Project tree models read from a project descriptor.

A descriptor stands in for the host build tool: it describes the root
project, its declared (first-level) dependencies, its subprojects, and the
extra properties used as identity fallback.
"""

from dataclasses import dataclass, field
from typing import Any

from pom_report.utils import find_invalid_xml_char, split_notation


class DescriptorError(ValueError):
    """A project descriptor is missing, unsupported, or malformed."""


def _text(value: Any, where: str) -> str:
    """Coerce a scalar descriptor value to a string the report can carry."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise DescriptorError(f"{where}: expected a scalar value, got {type(value).__name__}")
    text = str(value)
    char = find_invalid_xml_char(text)
    if char is not None:
        raise DescriptorError(
            f"{where}: value {text!r} contains {char!r}, which XML does not allow"
        )
    return text


@dataclass(frozen=True)
class DeclaredDependency:
    """A dependency declared directly by one project.

    Attributes:
        group: Maven group of the dependency
        name: Maven artifact name
        version: Declared version (may be empty when managed elsewhere)
        configuration: Gradle configuration the dependency is declared in
        scope: Explicit Maven scope, overriding the configuration mapping
    """

    group: str
    name: str
    version: str = ""
    configuration: str = "implementation"
    scope: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "dependency") -> "DeclaredDependency":
        """Create a DeclaredDependency from a descriptor entry.

        The entry holds either a ``notation`` string or separate
        ``group``/``name``/``version`` keys.

        Raises:
            DescriptorError: If the entry is incomplete or malformed
        """
        if isinstance(data, str):
            data = {"notation": data}
        if not isinstance(data, dict):
            raise DescriptorError(f"{where}: expected a table, got {type(data).__name__}")

        if "notation" in data:
            notation = _text(data["notation"], where)
            try:
                group, name, version = split_notation(notation)
            except ValueError as e:
                raise DescriptorError(f"{where}: {e}") from e
        else:
            group = _text(data.get("group"), where)
            name = _text(data.get("name"), where)
            version = _text(data.get("version"), where)

        if not group or not name:
            raise DescriptorError(f"{where}: both 'group' and 'name' are required")

        scope = data.get("scope")
        return cls(
            group=group,
            name=name,
            version=version,
            configuration=_text(data.get("configuration", "implementation"), where),
            scope=_text(scope, where) if scope is not None else None,
        )


@dataclass
class BuildProject:
    """A project or subproject of the build.

    ``group``, ``name`` and ``version`` are empty strings when the
    descriptor does not declare them.
    """

    name: str = ""
    group: str = ""
    version: str = ""
    path: str = ":"
    dependencies: list[DeclaredDependency] = field(default_factory=list)
    subprojects: list["BuildProject"] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = ":") -> "BuildProject":
        """Create a BuildProject tree from a descriptor ``project`` table.

        Raises:
            DescriptorError: If any project or dependency entry is malformed
        """
        if not isinstance(data, dict):
            raise DescriptorError(f"project '{path}': expected a table, got {type(data).__name__}")

        raw_dependencies = data.get("dependencies", [])
        if not isinstance(raw_dependencies, list):
            raise DescriptorError(f"project '{path}': 'dependencies' must be a list")

        dependencies = [
            DeclaredDependency.from_dict(entry, where=f"project '{path}' dependency #{index + 1}")
            for index, entry in enumerate(raw_dependencies)
        ]

        raw_subprojects = data.get("subprojects", [])
        if not isinstance(raw_subprojects, list):
            raise DescriptorError(f"project '{path}': 'subprojects' must be a list")

        subprojects = []
        for index, entry in enumerate(raw_subprojects):
            child_name = _text(entry.get("name") if isinstance(entry, dict) else None, path)
            if not child_name:
                raise DescriptorError(f"project '{path}': subproject #{index + 1} has no name")
            child_path = f"{path}{child_name}" if path == ":" else f"{path}:{child_name}"
            subprojects.append(cls.from_dict(entry, path=child_path))

        return cls(
            name=_text(data.get("name"), path),
            group=_text(data.get("group"), path),
            version=_text(data.get("version"), path),
            path=path,
            dependencies=dependencies,
            subprojects=subprojects,
        )

    def all_projects(self) -> list["BuildProject"]:
        """This project followed by every descendant, depth-first."""
        projects = [self]
        for child in self.subprojects:
            projects.extend(child.all_projects())
        return projects


@dataclass
class ProjectDescriptor:
    """A loaded descriptor: the project tree and its extra properties."""

    project: BuildProject
    properties: dict[str, str] = field(default_factory=dict)
    source: str | None = None
    """Path of the file the descriptor was loaded from"""

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> "ProjectDescriptor":
        """Create a ProjectDescriptor from plain descriptor data.

        Raises:
            DescriptorError: If the ``project`` table is missing or malformed
        """
        if not isinstance(data, dict) or "project" not in data:
            raise DescriptorError(f"{source or 'descriptor'}: missing [project] table")

        raw_properties = data.get("properties", {})
        if not isinstance(raw_properties, dict):
            raise DescriptorError(f"{source or 'descriptor'}: 'properties' must be a table")

        properties = {
            str(key): _text(value, f"property '{key}'") for key, value in raw_properties.items()
        }
        return cls(
            project=BuildProject.from_dict(data["project"]),
            properties=properties,
            source=source,
        )
