"""TOML project descriptor loader plugin."""

from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from pom_report import hookimpl
from pom_report.models.project import DescriptorError

LOADER_NAME = "toml"


@hookimpl
def register_project_loaders() -> dict:
    """Register the TOML descriptor loader."""
    return {
        "name": LOADER_NAME,
        "description": "TOML project descriptor ([project] and [properties] tables)",
        "extensions": [".toml"],
    }


@hookimpl
def load_project(loader_name: str, path: Path) -> dict[str, Any] | None:
    """Parse a TOML descriptor into plain Python data."""
    if loader_name != LOADER_NAME:
        return None

    try:
        with open(path, encoding="utf-8") as f:
            doc = tomlkit.load(f)
    except TOMLKitError as e:
        raise DescriptorError(f"Failed to parse {path}: {e}") from e

    return doc.unwrap()
