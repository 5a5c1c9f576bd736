"""Manager for fetching file entries with automatic pagination."""

import logging
from typing import Any, Optional

from .api import DriveClient
from .exceptions import DriveAPIError, DriveInvalidResponseError, DriveNotFoundError
from .models import Item
from .utils import DEFAULT_PER_PAGE

logger = logging.getLogger(__name__)


def _has_next_page(result: Any) -> bool:
    current = result.get("current_page")
    last = result.get("last_page")
    return current is not None and last is not None and current < last


class FileEntriesManager:
    """Fetches file entries page by page and parses them into Items."""

    def __init__(self, client: DriveClient, workspace_id: int = 0):
        """Initialize the file entries manager.

        Args:
            client: Storage API client
            workspace_id: Workspace ID to query (default: 0 for personal)
        """
        self.client = client
        self.workspace_id = workspace_id
        self._cache: dict[str, Item] = {}

    def get_entry(self, entry_id: str, use_cache: bool = True) -> Item:
        """Get a single entry by ID.

        Args:
            entry_id: Entry ID
            use_cache: Whether to reuse an entry fetched earlier

        Returns:
            The parsed entry

        Raises:
            DriveNotFoundError: If the entry does not exist
        """
        if use_cache and entry_id in self._cache:
            return self._cache[entry_id]

        result = self.client.get_file_entry(entry_id, workspace_id=self.workspace_id)
        if not isinstance(result, dict):
            raise DriveInvalidResponseError(
                f"Unexpected response for entry {entry_id}: {type(result).__name__}"
            )
        data = result.get("fileEntry", result)
        if not data or "id" not in data:
            raise DriveNotFoundError(f"Entry {entry_id} not found")

        entry = Item.from_dict(data)
        if use_cache:
            self._cache[entry_id] = entry
        return entry

    def search_by_name(
        self,
        query: str,
        exact_match: bool = True,
        entry_type: Optional[str] = None,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> list[Item]:
        """Search for entries by name across all result pages.

        Args:
            query: Search query
            exact_match: Whether to keep only entries named exactly ``query``
            entry_type: ``"folder"`` for folders only, ``"file"`` for
                everything else, or a concrete type such as ``"image"``
            per_page: Number of entries per page

        Returns:
            Matching entries in API order

        Raises:
            DriveAPIError: If a page cannot be fetched
        """
        all_entries: list[Item] = []
        current_page = 1

        while True:
            try:
                result = self.client.get_file_entries(
                    query=query,
                    workspace_id=self.workspace_id,
                    per_page=per_page,
                    page=current_page,
                )
            except DriveAPIError as e:
                logger.warning(
                    f"API error on page {current_page} while searching "
                    f"for '{query}' ({len(all_entries)} matches so far): {e}"
                )
                raise

            page_entries = [Item.from_dict(d) for d in result.get("data", [])]

            if exact_match:
                page_entries = [e for e in page_entries if e.name == query]

            if entry_type == "folder":
                page_entries = [e for e in page_entries if e.is_folder]
            elif entry_type == "file":
                page_entries = [e for e in page_entries if not e.is_folder]
            elif entry_type:
                page_entries = [e for e in page_entries if e.type == entry_type]

            for entry in page_entries:
                self._cache.setdefault(entry.id, entry)
            all_entries.extend(page_entries)

            if not _has_next_page(result):
                break
            current_page += 1

        logger.debug(
            f"search_by_name: '{query}' ({entry_type or 'any'}) -> "
            f"{len(all_entries)} entries over {current_page} page(s)"
        )
        return all_entries

    def clear_cache(self) -> None:
        """Clear the internal cache."""
        self._cache.clear()
