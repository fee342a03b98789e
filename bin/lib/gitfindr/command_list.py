"""List command implementation."""

import argparse

from .config import Config
from .output import print_info, print_repository
from .registry import Registry


def execute_list(config: Config, registry: Registry, args: argparse.Namespace) -> bool:
    """Print every tracked repository."""
    if registry.is_empty():
        print_info("No repos to show!")
        return True

    for name, record in sorted(registry.items()):
        print_repository(name, record, verbose=args.verbose)
    return True
