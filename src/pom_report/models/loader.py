"""Descriptor loader metadata models."""

from dataclasses import dataclass, field


@dataclass
class LoaderInfo:
    """Information about a descriptor loader plugin.

    Attributes:
        name: Loader name (e.g., 'toml', 'json')
        description: Human-readable description
        extensions: File extensions the loader handles (e.g., ['.toml'])
    """

    name: str
    description: str = ""
    extensions: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: dict) -> "LoaderInfo":
        """Create LoaderInfo from plugin dict."""
        return cls(
            name=d["name"],
            description=d.get("description", ""),
            extensions=[ext.lower() for ext in d.get("extensions", [])],
        )

    def handles(self, suffix: str) -> bool:
        """Whether files with ``suffix`` belong to this loader."""
        return suffix.lower() in self.extensions
