"""File locations for rootkeeper.

rootkeeper keeps three files, each under the XDG base directory that
matches how it is used:

- settings.toml and theme.toml: $XDG_CONFIG_HOME/rootkeeper (~/.config)
- root-folders.json, the root folder store: $XDG_STATE_HOME/rootkeeper
  (~/.local/state)
- library.toml, the library inventory: $XDG_DATA_HOME/rootkeeper
  (~/.local/share)

Every lookup reads the environment at call time, so tests can redirect
all files by setting the XDG variables.
"""

import os
from pathlib import Path

APP_NAME = "rootkeeper"

# XDG variable -> fallback relative to the home directory
_XDG_FALLBACKS = {
    "XDG_CONFIG_HOME": ".config",
    "XDG_STATE_HOME": ".local/state",
    "XDG_DATA_HOME": ".local/share",
}


def _app_dir(env_var: str) -> Path:
    """Resolve the rootkeeper directory below one XDG base directory.

    An unset or empty variable falls back to the home-relative default.
    """
    base = os.environ.get(env_var)
    root = Path(base) if base else Path.home() / _XDG_FALLBACKS[env_var]
    return root / APP_NAME


def get_config_dir() -> Path:
    """Directory holding user-edited settings and theme overrides."""
    return _app_dir("XDG_CONFIG_HOME")


def get_state_dir() -> Path:
    """Directory holding the root folder store."""
    return _app_dir("XDG_STATE_HOME")


def get_data_dir() -> Path:
    """Directory holding the library inventory."""
    return _app_dir("XDG_DATA_HOME")


def get_settings_path() -> Path:
    return get_config_dir() / "settings.toml"


def get_user_theme_path() -> Path:
    return get_config_dir() / "theme.toml"


def get_store_path() -> Path:
    """Default location of the JSON root folder store."""
    return get_state_dir() / "root-folders.json"


def get_inventory_path() -> Path:
    """Default location of the TOML library inventory."""
    return get_data_dir() / "library.toml"
