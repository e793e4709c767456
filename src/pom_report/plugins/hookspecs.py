"""Hook specifications for pom-report plugins.

Plugins read project descriptors in a given file format and hand the
descriptor back as plain data. Plugins use the @hookimpl decorator to
implement these hooks.

Example plugin implementation:

    from pom_report import hookimpl

    @hookimpl
    def register_project_loaders():
        return {
            "name": "yaml",
            "description": "YAML project descriptor",
            "extensions": [".yaml", ".yml"],
        }

    @hookimpl
    def load_project(loader_name, path):
        if loader_name != "yaml":
            return None
        return yaml.safe_load(path.read_text())
"""

from pathlib import Path
from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("pom_report")


class ProjectLoaderSpec:
    """Hook specifications for project descriptor loaders."""

    @hookspec
    def register_project_loaders(self) -> dict:  # type: ignore[empty-body]
        """Register a descriptor loader provided by this plugin.

        Returns:
            Dict with loader info:
                - name: Loader identifier (required)
                - description: Human-readable description
                - extensions: File extensions handled, with leading dot
        """
        ...

    @hookspec
    def load_project(self, loader_name: str, path: Path) -> dict[str, Any] | None:
        """Read a descriptor file into plain data.

        Args:
            loader_name: Name of the loader selected for the file
            path: Descriptor file

        Returns:
            Dict with a ``project`` table and an optional ``properties``
            table, or None if this plugin does not provide ``loader_name``.
        """
