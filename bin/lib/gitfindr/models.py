"""Domain models for repository tracking."""

# ============================================================
# Imports
# ============================================================

import os
from dataclasses import dataclass, field
from typing import Any

from .config import GIT_MARKER


# ============================================================
# Repository Models
# ============================================================

@dataclass(frozen=True)
class RepositoryRecord:
    """
    A tracked repository.

    The .git marker is checked when the record is created; the record
    itself never re-validates.

    Attributes:
        name: Alias, unique within a registry
        path: Location of the repository root
    """

    name: str
    path: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RepositoryRecord':
        """
        Create a RepositoryRecord from stored data.

        Args:
            data: Dictionary with 'name' and 'path' strings

        Returns:
            RepositoryRecord instance
        """
        name = data.get('name')
        path = data.get('path')
        if not isinstance(name, str) or not isinstance(path, str):
            raise ValueError(f"Invalid repository entry: {data}")
        return cls(name=name, path=path)

    def to_dict(self) -> dict[str, str]:
        """Serialize to a plain dictionary."""
        return {'name': self.name, 'path': self.path}

    def has_marker(self) -> bool:
        """Check whether the .git entry is still present at the path."""
        return os.path.lexists(os.path.join(self.path, GIT_MARKER))

    def __str__(self) -> str:
        return self.path


# ============================================================
# Scan Models
# ============================================================

@dataclass(frozen=True)
class ScanFailure:
    """
    A directory the walker could not process.

    Attributes:
        path: Directory that failed
        message: Human-readable reason
    """

    path: str
    message: str


@dataclass
class ScanResult:
    """
    Outcome of a directory scan.

    Attributes:
        repositories: Discovered repositories, unordered, names may repeat
        failures: Per-directory errors that were skipped
    """

    repositories: list[RepositoryRecord] = field(default_factory=list)
    failures: list[ScanFailure] = field(default_factory=list)

    def names(self) -> set[str]:
        """Get the set of discovered repository names."""
        return {repo.name for repo in self.repositories}
