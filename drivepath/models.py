"""Data models for storage items and resolution results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class Item:
    """A file or folder in the storage hierarchy.

    Items are read-only views of backend data. ``parent_ids`` keeps the
    order in which the backend lists the parents.
    """

    id: str
    name: str
    type: str = "folder"
    parent_ids: tuple[str, ...] = ()

    @property
    def is_folder(self) -> bool:
        """Check if this item is a folder."""
        return self.type == "folder"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Item":
        """Create an Item from an API or snapshot dictionary.

        Accepts either a ``parent_ids``/``parents`` list or a single
        ``parent_id``. A missing, null or zero ``parent_id`` means the
        item sits directly below the root. Entries without a ``type`` are
        treated as files.

        Args:
            data: Dictionary with at least ``id`` and ``name``

        Returns:
            Item instance
        """
        raw_parents = data.get("parent_ids")
        if raw_parents is None:
            raw_parents = data.get("parents")
        if raw_parents is None:
            parent_id = data.get("parent_id")
            raw_parents = [] if parent_id in (None, 0, "0", "") else [parent_id]

        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            type=data.get("type") or "file",
            parent_ids=tuple(str(p) for p in raw_parents),
        )


class ErrorKind(str, Enum):
    """Category of a resolution failure."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    LIMIT_EXCEEDED = "limit_exceeded"


@dataclass(frozen=True)
class SinglePath:
    """The one path of an item with a single lineage."""

    path: str
    ok = True

    def to_value(self) -> str:
        return self.path


@dataclass(frozen=True)
class MultiplePaths:
    """One path per immediate parent of a multi-parented item."""

    paths: list[str] = field(default_factory=list)
    ok = True

    def to_value(self) -> list[str]:
        return list(self.paths)


@dataclass(frozen=True)
class SingleId:
    """The ID of the only item matching a name."""

    id: str
    ok = True

    def to_value(self) -> str:
        return self.id


@dataclass(frozen=True)
class Disambiguated:
    """``"<path> > <id>"`` strings for every item sharing a name."""

    entries: list[str] = field(default_factory=list)
    ok = True

    def to_value(self) -> list[str]:
        return list(self.entries)


@dataclass(frozen=True)
class ResolutionError:
    """A descriptive failure returned in place of a result."""

    message: str
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT
    ok = False

    def to_value(self) -> str:
        return self.message

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class NoMatch(ResolutionError):
    """No item matches the queried name."""

    kind: ErrorKind = ErrorKind.NOT_FOUND


@dataclass(frozen=True)
class TooMany(ResolutionError):
    """More results than the configured cap allows."""

    kind: ErrorKind = ErrorKind.LIMIT_EXCEEDED
    count: int = 0
    limit: float = 0


def invalid_argument(message: str) -> ResolutionError:
    return ResolutionError(message, ErrorKind.INVALID_ARGUMENT)


def not_found(message: str) -> ResolutionError:
    return ResolutionError(message, ErrorKind.NOT_FOUND)


PathResult = Union[SinglePath, MultiplePaths, ResolutionError]
IdResult = Union[SingleId, Disambiguated, ResolutionError]
