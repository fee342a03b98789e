"""Remove command implementation."""

# ============================================================
# Imports
# ============================================================

import argparse

from .config import Config
from .errors import RepoDoesNotExistError
from .output import print_error, print_success
from .registry import Registry


# ============================================================
# Entry Point
# ============================================================

def execute_remove(config: Config, registry: Registry, args: argparse.Namespace) -> bool:
    """Stop tracking the repository registered under args.name."""
    try:
        registry.remove(args.name)
    except RepoDoesNotExistError as e:
        print_error(str(e))
        return False

    print_success(f"Removed {args.name}")
    return True
