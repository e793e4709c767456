"""JSON project descriptor loader plugin."""

import json
from pathlib import Path
from typing import Any

from pom_report import hookimpl
from pom_report.models.project import DescriptorError

LOADER_NAME = "json"


@hookimpl
def register_project_loaders() -> dict:
    """Register the JSON descriptor loader."""
    return {
        "name": LOADER_NAME,
        "description": "JSON project descriptor (\"project\" and \"properties\" objects)",
        "extensions": [".json"],
    }


@hookimpl
def load_project(loader_name: str, path: Path) -> dict[str, Any] | None:
    """Parse a JSON descriptor."""
    if loader_name != LOADER_NAME:
        return None

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise DescriptorError(f"Failed to parse {path}: {e}") from e
