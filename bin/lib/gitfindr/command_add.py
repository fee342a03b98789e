"""Add command implementation."""

# ============================================================
# Imports
# ============================================================

import argparse
import os

from .config import Config
from .discovery import default_name, scan_directory, validate_repo
from .errors import GitfindrError, RepoAlreadyExistsError
from .models import RepositoryRecord
from .output import print_error, print_header, print_info, print_success
from .registry import Registry


# ============================================================
# Entry Point
# ============================================================

def execute_add(config: Config, registry: Registry, args: argparse.Namespace) -> bool:
    """
    Register a single repository, or every repository under a directory.

    Args:
        config: Configuration object
        registry: Registry to add to
        args: Parsed arguments with 'path', 'alias' and 'directory'

    Returns:
        False if anything was reported and skipped
    """
    if args.directory is not None:
        return add_directory(config, registry, args.directory)
    if args.path is not None:
        return add_repository(registry, args.path, args.alias)

    print_error("Either a path or a directory is required")
    return False


# ============================================================
# Single Repository
# ============================================================

def add_repository(registry: Registry, path: str, alias: str | None = None) -> bool:
    """
    Validate a path and register it under an alias.

    The alias defaults to the repository's directory name.

    Returns:
        True if the repository was added
    """
    repo_path = os.path.abspath(path)

    try:
        validate_repo(repo_path)
        name = alias or default_name(repo_path)
        registry.add(RepositoryRecord(name=name, path=repo_path))
    except GitfindrError as e:
        print_error(str(e))
        return False
    except OSError as e:
        print_error(f"{repo_path}: {e.strerror or e}")
        return False

    print_success(f"Added {name} : {repo_path}")
    return True


# ============================================================
# Directory Scan
# ============================================================

def add_directory(config: Config, registry: Registry, directory: str) -> bool:
    """
    Scan a directory and register each repository under its own name.

    Name collisions and unreadable directories are reported and skipped;
    the remaining repositories are still added.

    Returns:
        True if every directory was read and every repository was added
    """
    root = os.path.abspath(directory)
    if not os.path.isdir(root):
        print_error(f"Not a directory: {root}")
        return False

    print_header(f"Scanning {root}")

    result = scan_directory(
        root,
        descend_into_repositories=config.descend_into_repositories,
        skip_hidden=config.skip_hidden,
    )

    for failure in result.failures:
        print_error(f"{failure.path}: {failure.message}")

    added = 0
    for record in sorted(result.repositories, key=lambda r: r.path):
        try:
            registry.add(record)
        except RepoAlreadyExistsError as e:
            print_error(f"Skipped {record.path}: {e}")
            continue
        print_success(f"Added {record.name} : {record.path}")
        added += 1

    print_info(f"Added {added} of {len(result.repositories)} repositories found")
    return not result.failures and added == len(result.repositories)
