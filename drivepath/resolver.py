"""Resolve item IDs to paths and names to item IDs.

An item may be filed under several folders at once. ``PathResolver``
returns one path per immediate parent in that case; above the immediate
parent each lineage follows the first parent the backend lists.
``IdResolver`` uses those paths to tell apart items that share a name.
"""

import logging
from collections.abc import Callable, Iterable
from numbers import Real
from typing import Any

from .backend import StorageBackend
from .exceptions import DriveNotFoundError
from .models import (
    Disambiguated,
    IdResult,
    Item,
    MultiplePaths,
    NoMatch,
    PathResult,
    ResolutionError,
    SingleId,
    SinglePath,
    TooMany,
    not_found,
)
from .utils import DEFAULT_DELIMITER, DEFAULT_MAX_RESULTS, join_path, with_id
from .validation import check_delimiter, check_item_id, check_limit, check_name

logger = logging.getLogger(__name__)


class PathResolver:
    """Builds the full folder path(s) of an item."""

    def __init__(self, backend: StorageBackend):
        """Initialize the resolver.

        Args:
            backend: Storage backend to read items and parents from
        """
        self.backend = backend

    def resolve(
        self,
        item_id: Any,
        delimiter: Any = DEFAULT_DELIMITER,
        max_paths: Any = DEFAULT_MAX_RESULTS,
    ) -> PathResult:
        """Resolve an item ID to its path, or one path per parent.

        Args:
            item_id: ID of the file or folder
            delimiter: Separator between folder names (coerced to str)
            max_paths: Maximum number of immediate parents accepted

        Returns:
            SinglePath, MultiplePaths, or a ResolutionError for invalid
            arguments, unknown IDs and too many parents

        Raises:
            DriveAPIError: If the backend fails while walking the hierarchy
        """
        error = (
            check_item_id(item_id)
            or check_delimiter(delimiter)
            or check_limit(max_paths, "max_paths")
        )
        if error:
            return error

        try:
            item = self.backend.get_item(item_id)
        except DriveNotFoundError:
            return not_found(f"No item found with ID '{item_id}'")

        return self.resolve_item(item, str(delimiter), max_paths)

    def resolve_item(
        self,
        item: Item,
        delimiter: str = DEFAULT_DELIMITER,
        max_paths: Real = DEFAULT_MAX_RESULTS,
    ) -> PathResult:
        """Resolve the path(s) of an already fetched item.

        Arguments are not validated here; use ``resolve`` for caller input.
        """
        parents = list(self.backend.get_parents(item))
        count = len(parents)
        logger.debug(f"Item '{item.id}' ({item.name}) has {count} parent(s)")

        if count == 0:
            return not_found(f"Item '{item.id}' has no parent folders")
        if count > max_paths:
            return TooMany(
                f"Item '{item.id}' has {count} parent folders, "
                f"more than the maximum of {max_paths}",
                count=count,
                limit=max_paths,
            )

        # lineages computed during this call, keyed by folder id
        lineages: dict[str, tuple[str, ...]] = {}
        if count == 1:
            return SinglePath(join_path(self._lineage(parents[0], lineages), delimiter))

        return MultiplePaths(
            [join_path(self._lineage(p, lineages), delimiter) for p in parents]
        )

    def _lineage(
        self, folder: Item, lineages: dict[str, tuple[str, ...]]
    ) -> tuple[str, ...]:
        """Folder names from the root down to ``folder`` (inclusive).

        Walks up through the first parent of each ancestor and stores the
        lineage of every folder it passes in ``lineages``.
        """
        chain: list[Item] = []
        prefix: tuple[str, ...] = ()
        seen: set[str] = set()
        current = folder

        while current is not None:
            known = lineages.get(current.id)
            if known is not None:
                prefix = known
                break
            if current.id in seen:
                logger.warning(
                    f"Folder '{current.id}' is its own ancestor, "
                    f"path of '{folder.id}' stops there"
                )
                break
            seen.add(current.id)
            chain.append(current)
            current = next(iter(self.backend.get_parents(current)), None)

        lineage = prefix
        for ancestor in reversed(chain):
            lineage = lineage + (ancestor.name,)
            lineages[ancestor.id] = lineage
        return lineage


class IdResolver:
    """Looks up the ID of a file or folder by its name."""

    def __init__(self, backend: StorageBackend):
        self.backend = backend
        self.paths = PathResolver(backend)

    def resolve_file_id(
        self, name: Any, max_files: Any = DEFAULT_MAX_RESULTS
    ) -> IdResult:
        """Resolve a file name to its ID.

        Args:
            name: Exact file name
            max_files: Maximum number of matching files accepted

        Returns:
            SingleId for a unique match, Disambiguated ``"<path> > <id>"``
            entries for several matches, NoMatch, TooMany, or a
            ResolutionError for invalid arguments
        """
        return self._resolve(
            name, max_files, "max_files", "file", self.backend.list_files_by_name
        )

    def resolve_folder_id(
        self, name: Any, max_folders: Any = DEFAULT_MAX_RESULTS
    ) -> IdResult:
        """Resolve a folder name to its ID. Same results as resolve_file_id."""
        return self._resolve(
            name,
            max_folders,
            "max_folders",
            "folder",
            self.backend.list_folders_by_name,
        )

    def _resolve(
        self,
        name: Any,
        limit: Any,
        limit_label: str,
        kind: str,
        list_by_name: Callable[[str], Iterable[Item]],
    ) -> IdResult:
        error = check_name(name, f"{kind.capitalize()} name") or check_limit(
            limit, limit_label
        )
        if error:
            return error

        name = str(name)
        matches = list(list_by_name(name))
        count = len(matches)
        logger.debug(f"{count} {kind}(s) named '{name}'")

        if count == 0:
            return NoMatch(f"No {kind} named '{name}' found")
        if count > limit:
            return TooMany(
                f"Found {count} {kind}s named '{name}', "
                f"more than the maximum of {limit}",
                count=count,
                limit=limit,
            )
        if count == 1:
            return SingleId(matches[0].id)

        entries: list[str] = []
        for match in matches:
            result = self.paths.resolve_item(match, DEFAULT_DELIMITER)
            if isinstance(result, ResolutionError):
                return result
            if isinstance(result, MultiplePaths):
                entries.extend(with_id(p, match.id) for p in result.paths)
            else:
                entries.append(with_id(result.path, match.id))
        return Disambiguated(entries)


def resolve_path(
    backend: StorageBackend,
    item_id: Any,
    delimiter: Any = DEFAULT_DELIMITER,
    max_paths: Any = DEFAULT_MAX_RESULTS,
) -> PathResult:
    """Resolve an item ID to its path(s). See ``PathResolver.resolve``."""
    return PathResolver(backend).resolve(item_id, delimiter, max_paths)


def resolve_file_id(
    backend: StorageBackend, name: Any, max_files: Any = DEFAULT_MAX_RESULTS
) -> IdResult:
    """Resolve a file name to its ID. See ``IdResolver.resolve_file_id``."""
    return IdResolver(backend).resolve_file_id(name, max_files)


def resolve_folder_id(
    backend: StorageBackend, name: Any, max_folders: Any = DEFAULT_MAX_RESULTS
) -> IdResult:
    """Resolve a folder name to its ID. See ``IdResolver.resolve_folder_id``."""
    return IdResolver(backend).resolve_folder_id(name, max_folders)
