"""drivepath - Resolve cloud storage names, IDs and folder paths."""

from .api import DriveClient
from .backend import ApiBackend, InMemoryBackend, StorageBackend
from .exceptions import (
    DriveAPIError,
    DriveAuthenticationError,
    DriveConfigError,
    DriveInvalidResponseError,
    DriveNetworkError,
    DriveNotFoundError,
    DrivePermissionError,
    DriveRateLimitError,
)
from .models import (
    Disambiguated,
    ErrorKind,
    IdResult,
    Item,
    MultiplePaths,
    NoMatch,
    PathResult,
    ResolutionError,
    SingleId,
    SinglePath,
    TooMany,
)
from .resolver import (
    IdResolver,
    PathResolver,
    resolve_file_id,
    resolve_folder_id,
    resolve_path,
)

__all__ = [
    "ApiBackend",
    "Disambiguated",
    "DriveAPIError",
    "DriveAuthenticationError",
    "DriveClient",
    "DriveConfigError",
    "DriveInvalidResponseError",
    "DriveNetworkError",
    "DriveNotFoundError",
    "DrivePermissionError",
    "DriveRateLimitError",
    "ErrorKind",
    "IdResolver",
    "IdResult",
    "InMemoryBackend",
    "Item",
    "MultiplePaths",
    "NoMatch",
    "PathResolver",
    "PathResult",
    "ResolutionError",
    "SingleId",
    "SinglePath",
    "StorageBackend",
    "TooMany",
    "resolve_file_id",
    "resolve_folder_id",
    "resolve_path",
]
