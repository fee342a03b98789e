"""Error kinds and exceptions."""

# ============================================================
# Imports
# ============================================================

from enum import Enum


# ============================================================
# Enums
# ============================================================

class ErrorKind(Enum):
    """Kind of failure, valued by its human-readable message."""

    NOT_A_REPOSITORY = "The given directory is not a valid repository."
    ALREADY_EXISTS = "The given repository already exists."
    DOES_NOT_EXIST = "The given repository does not exist."
    NAME_EXTRACTION = "Could not derive a repository name from the path."
    CONFIG_STORE = "Could not access the configuration store."


# ============================================================
# Exceptions
# ============================================================

class GitfindrError(Exception):
    """
    Base error carrying an ErrorKind and optional detail.

    Attributes:
        kind: Kind of failure
        detail: Context such as the offending path or alias
    """

    kind: ErrorKind

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind.value} ({self.detail})"
        return self.kind.value


class NotARepositoryError(GitfindrError):
    kind = ErrorKind.NOT_A_REPOSITORY


class RepoAlreadyExistsError(GitfindrError):
    kind = ErrorKind.ALREADY_EXISTS


class RepoDoesNotExistError(GitfindrError):
    kind = ErrorKind.DOES_NOT_EXIST


class NameExtractionError(GitfindrError):
    kind = ErrorKind.NAME_EXTRACTION


class ConfigStoreError(GitfindrError):
    """Failure to read or write the configuration store. Always fatal."""

    kind = ErrorKind.CONFIG_STORE
