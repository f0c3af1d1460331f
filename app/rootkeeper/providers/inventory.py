"""TOML file implementation of InventoryProvider.

The inventory lists the folders of library items that are already managed.
It is maintained by the library itself; rootkeeper only reads it.

File layout::

    [items]
    "show-1" = "/media/tv/Show One"
    "show-2" = "/media/tv/Show Two"
"""

import logging
import tomllib
from pathlib import Path
from typing import cast

from rootkeeper.core.paths import get_inventory_path
from rootkeeper.providers.base import InventoryProvider

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    """Base exception for inventory errors."""


class InventoryParseError(InventoryError):
    """Raised when the inventory file cannot be parsed."""


class TomlInventoryProvider(InventoryProvider):
    """Reads library item paths from a TOML file on every call.

    Args:
        inventory_path: Optional override for the inventory file.
            Default: ~/.local/share/rootkeeper/library.toml
    """

    def __init__(self, inventory_path: Path | None = None) -> None:
        self._inventory_path = (
            inventory_path if inventory_path is not None else get_inventory_path()
        )

    @property
    def inventory_path(self) -> Path:
        return self._inventory_path

    def all_paths(self) -> dict[str, str]:
        """Load the item key to path mapping.

        Returns:
            Mapping of item key to path; empty if the file does not exist.

        Raises:
            InventoryParseError: If the TOML syntax is invalid.
            InventoryError: If the file is unreadable or malformed.
        """
        if not self._inventory_path.exists():
            logger.debug("No inventory at %s, treating library as empty", self._inventory_path)
            return {}

        try:
            with open(self._inventory_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InventoryParseError(f"Invalid TOML syntax: {e}") from e
        except OSError as e:
            raise InventoryError(f"Failed to read inventory: {e}") from e

        items_raw: object = data.get("items", {})
        if not isinstance(items_raw, dict):
            msg = f"Invalid 'items' section in {self._inventory_path}"
            raise InventoryError(msg)

        items: dict[str, str] = {}
        for key, value in cast(dict[str, object], items_raw).items():
            if not isinstance(value, str):
                msg = f"Inventory item {key!r} must be a path string, got {type(value).__name__}"
                raise InventoryError(msg)
            items[key] = value
        return items
