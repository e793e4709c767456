"""Project descriptor loader management.

Provides functions for working with descriptor loaders:
    from pom_report.loaders import (
        get_registered_loaders,
        list_available_loaders,
        loader_for_path,
        load_descriptor,
    )

Bundled plugins:
- toml: TOML project descriptor
- json: JSON project descriptor
"""

from pathlib import Path

from pom_report.logging import get_logger
from pom_report.models.loader import LoaderInfo
from pom_report.models.project import DescriptorError, ProjectDescriptor
from pom_report.utils import ExpansionError, expand_descriptor

logger = get_logger(__name__)

_registered_loaders: dict[str, LoaderInfo] = {}


def _register_loaders(pm) -> None:
    """Register descriptor loaders from plugins.

    Called by initialize_plugins() in pom_report.plugins.

    Args:
        pm: The pluggy PluginManager instance
    """
    global _registered_loaders
    _registered_loaders = {}

    for loader_data in pm.hook.register_project_loaders():
        if loader_data:
            info = LoaderInfo.from_dict(loader_data)
            _registered_loaders[info.name] = info
            logger.debug(f"Registered loader: {info.name}")


def _reset_loaders() -> None:
    """Reset the loader registry.

    Called by reset_plugins() in pom_report.plugins.
    """
    global _registered_loaders
    _registered_loaders = {}


def get_registered_loaders() -> dict[str, LoaderInfo]:
    """Get all registered loaders, keyed by name."""
    from pom_report.plugins import initialize_plugins

    initialize_plugins()
    return _registered_loaders.copy()


def list_available_loaders() -> list[str]:
    """Get the names of all registered loaders."""
    return list(get_registered_loaders().keys())


def get_loader_info(name: str) -> LoaderInfo | None:
    """Get info for a specific loader, or None if it is not registered."""
    return get_registered_loaders().get(name)


def loader_for_path(path: Path) -> LoaderInfo | None:
    """Find the loader handling the extension of ``path``."""
    for info in get_registered_loaders().values():
        if info.handles(Path(path).suffix):
            return info
    return None


def load_descriptor(path: Path, loader_name: str | None = None) -> ProjectDescriptor:
    """Load a project descriptor file.

    Args:
        path: Descriptor file
        loader_name: Loader to use; picked by file extension when omitted

    Returns:
        The loaded ProjectDescriptor

    Raises:
        DescriptorError: If the file is missing, no loader handles it,
            or its contents are malformed
    """
    from pom_report.plugins import pm

    path = Path(path)
    if not path.is_file():
        raise DescriptorError(f"Descriptor not found: {path}")

    if loader_name is not None:
        info = get_loader_info(loader_name)
        if info is None:
            raise DescriptorError(
                f"Unknown loader: {loader_name}. Available: {', '.join(list_available_loaders())}"
            )
    else:
        info = loader_for_path(path)
        if info is None:
            raise DescriptorError(
                f"No loader handles '{path.suffix or path.name}'. "
                f"Available: {', '.join(list_available_loaders())}"
            )

    logger.debug(f"Loading {path} with the '{info.name}' loader")

    for data in pm.hook.load_project(loader_name=info.name, path=path):
        if data is not None:
            if not isinstance(data, dict):
                raise DescriptorError(f"{path}: expected a table at the top level")
            try:
                expanded = expand_descriptor(data)
            except ExpansionError as e:
                raise DescriptorError(f"{path}: {e}") from e
            return ProjectDescriptor.from_dict(expanded, source=str(path))

    raise DescriptorError(f"No plugin loaded {path} with the '{info.name}' loader")


__all__ = [
    "get_registered_loaders",
    "list_available_loaders",
    "get_loader_info",
    "loader_for_path",
    "load_descriptor",
]
