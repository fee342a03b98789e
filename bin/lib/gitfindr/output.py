"""Formatted output utilities."""

# ============================================================
# Imports
# ============================================================

import os
import sys

from .models import RepositoryRecord


# ============================================================
# Configuration
# ============================================================

class Color:
    """ANSI color codes for terminal output."""

    RESET = '\033[0m'
    BOLD = '\033[1m'
    CYAN = '\033[36m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'


def colorize(text: str, color: str) -> str:
    """Wrap text in a color code unless stdout is not a terminal or NO_COLOR is set."""
    if os.environ.get('NO_COLOR') or not sys.stdout.isatty():
        return text
    return f"{color}{text}{Color.RESET}"


# ============================================================
# Output Functions
# ============================================================

def print_header(message: str) -> None:
    """Print a section header with bold cyan formatting."""
    print()
    print(colorize(f"# {message}", Color.BOLD + Color.CYAN))
    print()


def print_info(message: str) -> None:
    """Print an informational message."""
    print(message)


def print_error(message: str) -> None:
    """Print an error message to stderr with 'Error:' prefix."""
    print(f"Error: {message}", file=sys.stderr)


def print_success(message: str) -> None:
    """Print a success message in green."""
    print(colorize(message, Color.GREEN))


def print_key_value(key: str, value: str) -> None:
    """Print a key-value pair with cyan-colored key."""
    print(f"{colorize(key + ':', Color.CYAN)} {value}")


def print_repository(name: str, record: RepositoryRecord, verbose: bool = False) -> None:
    """
    Print a registry entry as 'alias : path'.

    Args:
        name: Alias the record is registered under
        record: The repository record
        verbose: If True, flag entries whose .git marker is gone
    """
    line = f"{colorize(name, Color.CYAN)} : {record.path}"
    if verbose and not record.has_marker():
        line += f" {colorize('(missing .git)', Color.YELLOW)}"
    print(line)
