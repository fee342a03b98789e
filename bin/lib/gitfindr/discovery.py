"""Discover git repositories under a directory.

Walks the directory tree looking for .git markers. Descends into
repositories as well, so nested repositories (submodules, vendored
checkouts) are found unless the caller turns that off.
"""

# ============================================================
# Imports
# ============================================================

import os
from collections.abc import Iterable

from .config import GIT_MARKER
from .errors import NameExtractionError, NotARepositoryError
from .models import RepositoryRecord, ScanFailure, ScanResult


# ============================================================
# Validation
# ============================================================

def has_git_marker(entries: Iterable[os.DirEntry]) -> bool:
    """Check directory entries for a .git file or directory. Stops at the first match."""
    return any(entry.name == GIT_MARKER for entry in entries)


def validate_repo(path: str) -> None:
    """
    Check that a directory is a git repository.

    Only the name is checked, so a .git file (worktree or submodule link)
    counts the same as a .git directory.

    Raises:
        NotARepositoryError: If the directory has no .git entry
        OSError: If the directory cannot be listed
    """
    with os.scandir(path) as it:
        found = has_git_marker(it)

    if not found:
        raise NotARepositoryError(path)


def is_repo(path: str) -> bool:
    """Return True if path is a git repository. OSError propagates."""
    try:
        validate_repo(path)
    except NotARepositoryError:
        return False
    return True


def default_name(path: str) -> str:
    """
    Derive a repository name from the last component of its path.

    Raises:
        NameExtractionError: If the path has no usable final component
    """
    name = os.path.basename(path.rstrip(os.sep))
    if name in ('', '.', '..'):
        raise NameExtractionError(path)
    return name


# ============================================================
# Directory Walk
# ============================================================

def scan_directory(
    root: str,
    descend_into_repositories: bool = True,
    skip_hidden: bool = False,
) -> ScanResult:
    """
    Find every git repository in the subtree rooted at root.

    The walk is iterative and does not follow symlinks. The root itself
    is checked. Unreadable directories and unnamed repositories are
    recorded as failures and the walk continues.

    Args:
        root: Directory to scan
        descend_into_repositories: Keep walking below a found repository
        skip_hidden: Do not descend into directories starting with '.'

    Returns:
        ScanResult with repositories in unspecified order
    """
    result = ScanResult()
    pending = [root]

    while pending:
        directory = pending.pop()

        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            result.failures.append(ScanFailure(directory, e.strerror or str(e)))
            continue

        is_repository = has_git_marker(entries)
        if is_repository:
            try:
                name = default_name(directory)
            except NameExtractionError as e:
                result.failures.append(ScanFailure(directory, e.kind.value))
            else:
                result.repositories.append(RepositoryRecord(name=name, path=directory))

            if not descend_into_repositories:
                continue

        for entry in entries:
            if skip_hidden and entry.name.startswith('.'):
                continue
            if _is_walkable_dir(entry):
                pending.append(entry.path)

    return result


def _is_walkable_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
