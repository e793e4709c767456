"""Helpers shared by descriptor loaders."""

from __future__ import annotations

import re
from typing import Any

from expandvars import ExpandvarsException, expandvars

# Characters outside the XML 1.0 Char production
_XML_INVALID_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


class ExpansionError(ValueError):
    """A ``${VAR}`` reference in a descriptor value could not be expanded."""

    def __init__(self, location: str, reason: str):
        self.location = location
        super().__init__(f"{location}: {reason}")


def expand_descriptor(data: dict[str, Any], location: str = "") -> dict[str, Any]:
    """Expand ``${VAR}`` references in every string value of a descriptor.

    Keys are never expanded. Failures name the dotted location of the
    offending value, e.g. ``project.dependencies[0].notation``.

    Raises:
        ExpansionError: If a reference is malformed or a required variable is unset
    """

    def expand_item(item: Any, where: str) -> Any:
        if isinstance(item, str):
            try:
                return expandvars(item)
            except ExpandvarsException as e:
                raise ExpansionError(where, str(e)) from e
        if isinstance(item, dict):
            return expand_descriptor(item, where)
        if isinstance(item, list):
            return [expand_item(value, f"{where}[{index}]") for index, value in enumerate(item)]
        return item

    return {
        key: expand_item(value, f"{location}.{key}" if location else str(key))
        for key, value in data.items()
    }


def find_invalid_xml_char(value: str) -> str | None:
    """Return the first character of ``value`` that XML 1.0 cannot carry, if any."""
    match = _XML_INVALID_CHARS.search(value)
    return match.group() if match else None


def split_notation(notation: str) -> tuple[str, str, str]:
    """Split a ``group:name:version`` dependency notation.

    The version part may be omitted (``group:name``), in which case an
    empty version is returned.

    Raises:
        ValueError: If the notation does not have two or three parts
    """
    parts = notation.strip().split(":")
    if len(parts) == 2:
        return parts[0], parts[1], ""
    if len(parts) == 3:
        return parts[0], parts[1], parts[2]
    raise ValueError(f"Invalid dependency notation '{notation}', expected 'group:name:version'")
