"""Storage backends the resolvers read from.

A backend answers four questions: which item has this ID, what are the
parents of an item, and which files or folders carry a given name. The
resolvers never write through a backend.
"""

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, Optional, Protocol, Union

from .api import DriveClient
from .exceptions import DriveInvalidResponseError, DriveNotFoundError
from .file_entries_manager import FileEntriesManager
from .models import Item
from .utils import DEFAULT_ROOT_NAME, ROOT_ID

logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """Read-only view of a hierarchical storage namespace."""

    def get_item(self, item_id: str) -> Item:
        """Return the item with this ID or raise DriveNotFoundError."""
        ...

    def get_parents(self, item: Item) -> Iterable[Item]:
        """Return the parents of an item, possibly none."""
        ...

    def list_files_by_name(self, name: str) -> Iterable[Item]:
        """Return all files named exactly ``name``."""
        ...

    def list_folders_by_name(self, name: str) -> Iterable[Item]:
        """Return all folders named exactly ``name``."""
        ...


class InMemoryBackend:
    """Backend over a fixed set of items, e.g. a JSON snapshot.

    Items without parents are roots. Parents are enumerated in the order
    they are declared on the item, names in insertion order.
    """

    def __init__(self, items: Iterable[Item] = ()):
        self._items: dict[str, Item] = {}
        for item in items:
            self.add(item)

    def add(self, item: Item) -> None:
        """Add or replace an item."""
        self._items[item.id] = item

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())

    @classmethod
    def from_dict(cls, data: Union[dict[str, Any], list[Any]]) -> "InMemoryBackend":
        """Build a backend from snapshot data.

        Args:
            data: Either a list of item dictionaries or a dictionary with an
                ``items`` list. Each item needs ``id`` and ``name`` and may
                set ``type`` and ``parents``.

        Returns:
            InMemoryBackend instance
        """
        raw_items = data.get("items", []) if isinstance(data, dict) else data
        if not isinstance(raw_items, list):
            raise DriveInvalidResponseError("Snapshot 'items' must be a list")
        items = []
        for raw in raw_items:
            try:
                items.append(Item.from_dict(raw))
            except (AttributeError, KeyError, TypeError) as e:
                raise DriveInvalidResponseError(f"Invalid snapshot item {raw!r}") from e
        return cls(items)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryBackend":
        """Load a snapshot from a JSON file."""
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise DriveInvalidResponseError(f"Invalid snapshot {path}: {e}") from e
        backend = cls.from_dict(data)
        logger.debug(f"Loaded {len(backend)} items from snapshot {path}")
        return backend

    def get_item(self, item_id: str) -> Item:
        try:
            return self._items[item_id]
        except KeyError:
            raise DriveNotFoundError(f"Item {item_id} not found") from None

    def get_parents(self, item: Item) -> list[Item]:
        return [self.get_item(parent_id) for parent_id in item.parent_ids]

    def list_files_by_name(self, name: str) -> list[Item]:
        return [i for i in self._items.values() if i.name == name and not i.is_folder]

    def list_folders_by_name(self, name: str) -> list[Item]:
        return [i for i in self._items.values() if i.name == name and i.is_folder]


class ApiBackend:
    """Backend over the storage REST API.

    Entries that report no parent live directly below the account root,
    which the API never returns as an entry. It is represented by a
    synthetic folder (id ``"0"``) without parents of its own.

    Entries fetched through one backend instance are kept for its
    lifetime; create a new instance to see later changes.
    """

    def __init__(
        self,
        client: DriveClient,
        workspace_id: int = 0,
        root_name: str = DEFAULT_ROOT_NAME,
        per_page: Optional[int] = None,
    ):
        """Initialize the API backend.

        Args:
            client: Storage API client
            workspace_id: Workspace to resolve in (default: 0 for personal)
            root_name: Display name of the account root folder
            per_page: Page size for name searches (client default if None)
        """
        self.manager = FileEntriesManager(client, workspace_id=workspace_id)
        self.root = Item(id=ROOT_ID, name=root_name, type="folder")
        self._search_kwargs: dict[str, Any] = {}
        if per_page is not None:
            self._search_kwargs["per_page"] = per_page

    def get_item(self, item_id: str) -> Item:
        if item_id == self.root.id:
            return self.root
        return self.manager.get_entry(item_id)

    def get_parents(self, item: Item) -> list[Item]:
        if item.id == self.root.id:
            return []
        if not item.parent_ids:
            return [self.root]
        return [self.get_item(parent_id) for parent_id in item.parent_ids]

    def list_files_by_name(self, name: str) -> list[Item]:
        return self.manager.search_by_name(
            name, exact_match=True, entry_type="file", **self._search_kwargs
        )

    def list_folders_by_name(self, name: str) -> list[Item]:
        return self.manager.search_by_name(
            name, exact_match=True, entry_type="folder", **self._search_kwargs
        )
