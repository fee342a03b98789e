#!/usr/bin/env python3
"""Git repository tracker.

Keeps a registry of local git repositories under short aliases.
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "lib"))
from gitfindr import (
    Config,
    ConfigStoreError,
    execute_add,
    execute_list,
    execute_remove,
    execute_show,
    load_registry,
    save_registry,
)
from gitfindr.output import print_error, print_info


# --------------------------------------------------------------------------- #
# Configuration
# --------------------------------------------------------------------------- #

COMMANDS = {
    "add":    execute_add,
    "remove": execute_remove,
    "list":   execute_list,
    "show":   execute_show,
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="gitfindr",
        description="Helps you manage your local git repositories.",
    )
    parser.add_argument("--dry-run", action="store_true",
                        help="run the command without saving the registry")
    parser.add_argument("--home", metavar="DIR",
                        help="data directory (default: $GITFINDR_HOME or ~/.config/gitfindr)")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="command")

    add = subparsers.add_parser("add", help="add a local git repo to be tracked")
    source = add.add_mutually_exclusive_group(required=True)
    source.add_argument("-p", "--path", help="repository to add")
    source.add_argument("-d", "--directory", metavar="DIR",
                        help="scan DIR and add every repository found")
    add.add_argument("-a", "--alias",
                     help="name to track the repository under (default: its directory name)")

    remove = subparsers.add_parser("remove", help="stop tracking a repo")
    remove.add_argument("-n", "--name", required=True, help="alias of the repo")

    list_ = subparsers.add_parser("list", help="display the tracked repositories")
    list_.add_argument("-v", "--verbose", action="store_true",
                       help="flag repos whose .git entry is missing")

    show = subparsers.add_parser("show", help="show a tracked repository")
    show.add_argument("-n", "--name", required=True, help="alias of the repo")
    show.add_argument("-v", "--verbose", action="store_true",
                      help="also check the .git entry")

    return parser


# --------------------------------------------------------------------------- #
# Main
# --------------------------------------------------------------------------- #

def main(argv=None):
    """Parse arguments, run one command against the registry, and save it.

    Commands:
      add     - Track a repository (-p PATH [-a ALIAS]) or scan a directory (-d DIR)
      remove  - Stop tracking a repository
      list    - Print all tracked repositories
      show    - Print one tracked repository

    Per-command failures are reported and the registry is still saved.
    Only failing to read or write the registry exits non-zero.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "add" and args.alias and args.directory:
        parser.error("--alias cannot be used with --directory")

    # Initialize configuration
    config = Config(args.home)
    config.dryrun = args.dry_run

    try:
        config.load_settings()
        registry = load_registry(config.registry_file)

        # Dispatch command
        COMMANDS[args.command](config, registry, args)

        if not config.dryrun:
            save_registry(registry, config.registry_file)
    except ConfigStoreError as e:
        print_error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print_info("\nInterrupted")
        sys.exit(130)
    except Exception as e:
        print_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
