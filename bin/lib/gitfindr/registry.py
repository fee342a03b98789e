"""
Repository registry: alias to repository mapping.

The registry is loaded once per invocation from repos.json in the data
directory and written back whole at the end.
"""

# ============================================================
# Imports
# ============================================================

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .errors import ConfigStoreError, RepoAlreadyExistsError, RepoDoesNotExistError
from .models import RepositoryRecord


# ============================================================
# Registry
# ============================================================

class Registry:
    """In-memory mapping from alias to RepositoryRecord with unique aliases."""

    def __init__(self):
        self._repos: dict[str, RepositoryRecord] = {}

    def add(self, record: RepositoryRecord) -> None:
        """
        Register a repository under its name.

        Raises:
            RepoAlreadyExistsError: If the name is already registered
        """
        if record.name in self._repos:
            raise RepoAlreadyExistsError(record.name)
        self._repos[record.name] = record

    def remove(self, name: str) -> None:
        """
        Unregister a repository.

        Raises:
            RepoDoesNotExistError: If the name is not registered
        """
        if name not in self._repos:
            raise RepoDoesNotExistError(name)
        del self._repos[name]

    def get(self, name: str) -> RepositoryRecord | None:
        """Look up a repository by name."""
        return self._repos.get(name)

    def is_empty(self) -> bool:
        return not self._repos

    def items(self) -> Iterator[tuple[str, RepositoryRecord]]:
        """Iterate (name, record) pairs."""
        return iter(list(self._repos.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._repos

    def __len__(self) -> int:
        return len(self._repos)

    # --------------------------------------------------------
    # Serialization
    # --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize as {'repos': {alias: {'name': ..., 'path': ...}}}."""
        return {'repos': {name: record.to_dict() for name, record in self._repos.items()}}

    @classmethod
    def from_dict(cls, data: Any) -> 'Registry':
        """
        Build a registry from serialized data.

        Raises:
            ConfigStoreError: If the data is malformed or an alias does
                not match its record's name
        """
        if not isinstance(data, dict) or not isinstance(data.get('repos', {}), dict):
            raise ConfigStoreError("expected a 'repos' table")

        registry = cls()
        for name, entry in data.get('repos', {}).items():
            if not isinstance(entry, dict):
                raise ConfigStoreError(f"invalid entry '{name}'")
            try:
                record = RepositoryRecord.from_dict(entry)
            except ValueError as e:
                raise ConfigStoreError(str(e)) from e
            if record.name != name:
                raise ConfigStoreError(f"entry '{name}' is named '{record.name}'")
            registry.add(record)

        return registry


# ============================================================
# Persistence
# ============================================================

def load_registry(path: Path) -> Registry:
    """
    Load the registry from a JSON file.

    A missing file yields an empty registry.

    Raises:
        ConfigStoreError: If the file is unreadable or malformed
    """
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return Registry()
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigStoreError(f"{path}: {e}") from e

    return Registry.from_dict(data)


def save_registry(registry: Registry, path: Path) -> None:
    """
    Write the whole registry to a JSON file, replacing its contents.

    Raises:
        ConfigStoreError: If the file or its directory cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(registry.to_dict(), f, indent=2, sort_keys=True)
            f.write('\n')
    except OSError as e:
        raise ConfigStoreError(f"{path}: {e}") from e
