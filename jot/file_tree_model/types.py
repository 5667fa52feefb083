"""Domain datatype for one listed directory child."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child row."""

    name: str
    path: Path
    is_dir: bool

    def label(self) -> str:
        """Row label: directories carry a trailing slash."""
        return f"{self.name}/" if self.is_dir else self.name


def directory_sort_key(child: DirectoryChild) -> tuple[bool, str, str]:
    """Directories first, then case-insensitive name, then exact name."""
    return (not child.is_dir, child.name.casefold(), child.name)


__all__ = ["DirectoryChild", "directory_sort_key"]
