"""Interfaces implemented by the engine's file and item providers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from d2shared.enums import InventoryItemType


@runtime_checkable
class FileProvider(Protocol):
    """Something that can provide the contents of game files."""

    def load_file(self, file_name: str) -> bytes:
        """Return the raw contents of ``file_name``."""
        ...


@runtime_checkable
class InventoryItem(Protocol):
    """An item that can be placed in an inventory."""

    def inventory_item_name(self) -> str:
        """Name of this inventory item."""
        ...

    def inventory_item_type(self) -> InventoryItemType:
        """Kind of item this is."""
        ...

    def inventory_grid_size(self) -> tuple[int, int]:
        """Width and height of the item in inventory grid cells."""
        ...

    def item_code(self) -> str:
        """The item's code."""
        ...

    def serialize(self) -> bytes:
        """Serialize the item for transport."""
        ...