"""Plugin system for pom-report.

Uses Pluggy for plugin discovery and hook management.

Core plugin functions:
    from pom_report.plugins import initialize_plugins, reset_plugins, get_plugins

For descriptor loaders, import from pom_report.loaders:
    from pom_report.loaders import (
        get_registered_loaders,
        list_available_loaders,
        load_descriptor,
    )
"""

import contextlib
import importlib

import pluggy

from pom_report.logging import get_logger
from pom_report.plugins.hookspecs import ProjectLoaderSpec

logger = get_logger(__name__)


# Loaders bundled with pom-report, loaded on initialization
DEFAULT_PLUGINS = (
    "pom_report.loaders.toml_descriptor",
    "pom_report.loaders.json_descriptor",
)


pm = pluggy.PluginManager("pom_report")
pm.add_hookspecs(ProjectLoaderSpec)

_initialized: bool = False


def _load_default_plugins() -> None:
    """Load plugins bundled with pom-report."""
    for plugin_path in DEFAULT_PLUGINS:
        try:
            module = importlib.import_module(plugin_path)
            pm.register(module, name=plugin_path)
            logger.debug(f"Loaded plugin: {plugin_path}")
        except ImportError as e:
            logger.warning(f"Could not load plugin {plugin_path}: {e}")


def _load_external_plugins() -> None:
    """Discover and load external plugins via entry points."""
    try:
        num_loaded = pm.load_setuptools_entrypoints("pom_report")
        if num_loaded > 0:
            logger.debug(f"Loaded {num_loaded} external plugin(s)")
    except Exception as e:
        logger.warning(f"Error loading external plugins: {e}")


def initialize_plugins() -> None:
    """Initialize the plugin system.

    Loads bundled plugins first, then external plugins from entry points,
    and collects loader registrations. Calling it again has no effect.
    """
    global _initialized

    if _initialized:
        return

    _load_default_plugins()
    _load_external_plugins()

    from pom_report.loaders import _register_loaders

    _register_loaders(pm)
    _initialized = True

    from pom_report.loaders import _registered_loaders

    logger.debug(f"Plugin system initialized with {len(_registered_loaders)} loader(s)")


def reset_plugins() -> None:
    """Reset the plugin system (mainly for testing).

    Unregisters all plugins and clears the loader registry. The next call
    to initialize_plugins() re-initializes the system.
    """
    global _initialized

    for plugin in list(pm.get_plugins()):
        with contextlib.suppress(Exception):
            pm.unregister(plugin)

    from pom_report.loaders import _reset_loaders

    _reset_loaders()
    _initialized = False


def get_plugins() -> list[dict]:
    """Get information about loaded plugins.

    Returns:
        List of plugin info dictionaries with name and module.
    """
    if not _initialized:
        initialize_plugins()

    return [
        {
            "name": pm.get_name(plugin),
            "module": getattr(plugin, "__name__", str(plugin)),
        }
        for plugin in pm.get_plugins()
    ]


__all__ = [
    "pm",
    "DEFAULT_PLUGINS",
    "initialize_plugins",
    "reset_plugins",
    "get_plugins",
]
