"""Local git repository tracking library."""

from .command_add import execute_add
from .command_list import execute_list
from .command_remove import execute_remove
from .command_show import execute_show
from .config import Config
from .discovery import default_name, is_repo, scan_directory, validate_repo
from .errors import (
    ConfigStoreError,
    ErrorKind,
    GitfindrError,
    NameExtractionError,
    NotARepositoryError,
    RepoAlreadyExistsError,
    RepoDoesNotExistError,
)
from .models import RepositoryRecord, ScanFailure, ScanResult
from .registry import Registry, load_registry, save_registry

__all__ = [
    # Configuration
    'Config',
    # Domain models
    'RepositoryRecord',
    'ScanFailure',
    'ScanResult',
    'Registry',
    # Errors
    'ErrorKind',
    'GitfindrError',
    'ConfigStoreError',
    'NameExtractionError',
    'NotARepositoryError',
    'RepoAlreadyExistsError',
    'RepoDoesNotExistError',
    # Discovery
    'default_name',
    'is_repo',
    'scan_directory',
    'validate_repo',
    # Persistence
    'load_registry',
    'save_registry',
    # Commands
    'execute_add',
    'execute_list',
    'execute_remove',
    'execute_show',
]
