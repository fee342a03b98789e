"""Configuration management."""

# ============================================================
# Imports
# ============================================================

import os
import sys
from pathlib import Path
from typing import Any

# Require Python 3.11+ for tomllib
if sys.version_info < (3, 11):
    print("Error: Python 3.11 or higher is required", file=sys.stderr)
    sys.exit(1)

import tomllib

from .errors import ConfigStoreError


# ============================================================
# Constants
# ============================================================

CONFIG_NAME = "gitfindr"
REGISTRY_FILE = "repos.json"
SETTINGS_FILE = "config.toml"
GIT_MARKER = ".git"

HOME_ENV_VAR = "GITFINDR_HOME"

DEFAULT_SETTINGS: dict[str, bool] = {
    'descend_into_repositories': True,
    'skip_hidden': False,
}


# ============================================================
# Configuration
# ============================================================

class Config:
    """Configuration paths, scan settings and runtime flags."""

    def __init__(self, home: Path | str | None = None):
        # Resolve data directory: explicit override, environment, default
        if home is None:
            home = os.environ.get(HOME_ENV_VAR) or Path.home() / ".config" / CONFIG_NAME
        self.home = Path(home).expanduser()

        # Configuration file paths
        self.registry_file = self.home / REGISTRY_FILE
        self.settings_file = self.home / SETTINGS_FILE

        # Scan settings
        self.descend_into_repositories = DEFAULT_SETTINGS['descend_into_repositories']
        self.skip_hidden = DEFAULT_SETTINGS['skip_hidden']

        # Runtime flags
        self.dryrun = False

    def load_settings(self) -> None:
        """Apply scan settings from config.toml, keeping defaults when absent."""
        for key, value in load_settings(self.settings_file).items():
            setattr(self, key, value)


# ============================================================
# TOML Loading
# ============================================================

def load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file."""
    with open(path, 'rb') as f:
        return tomllib.load(f)


def load_settings(path: Path) -> dict[str, bool]:
    """
    Extract scan settings from config.toml.

    Returns the defaults when the file is missing. Unknown keys are ignored.

    Raises:
        ConfigStoreError: If the file is unreadable, is not valid TOML,
            or holds a setting that is not a boolean
    """
    settings = dict(DEFAULT_SETTINGS)

    try:
        data = load_toml(path)
    except FileNotFoundError:
        return settings
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigStoreError(f"{path}: {e}") from e

    for key in DEFAULT_SETTINGS:
        if key not in data:
            continue
        if not isinstance(data[key], bool):
            raise ConfigStoreError(f"{path}: '{key}' must be true or false")
        settings[key] = data[key]

    return settings
