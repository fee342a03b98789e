"""Show command implementation."""

# ============================================================
# Imports
# ============================================================

import argparse

from .config import Config
from .output import print_info, print_key_value
from .registry import Registry


# ============================================================
# Entry Point
# ============================================================

def execute_show(config: Config, registry: Registry, args: argparse.Namespace) -> bool:
    """
    Print the record registered under args.name.

    A missing alias is a normal outcome: it is reported and False is returned.
    """
    record = registry.get(args.name)
    if record is None:
        print_info(f"No repo named '{args.name}'")
        return False

    print_key_value("Name", record.name)
    print_key_value("Path", record.path)

    if args.verbose:
        print_key_value("Marker", "present" if record.has_marker() else "missing")
    return True
