"""Exceptions raised by the storage backends and the REST client."""


class DriveAPIError(Exception):
    """Base exception for storage API failures."""


class DriveConfigError(DriveAPIError):
    """Raised when required configuration (e.g. the API key) is missing."""


class DriveAuthenticationError(DriveAPIError):
    """Raised when the API key is invalid or unauthorized."""


class DrivePermissionError(DriveAPIError):
    """Raised when access to a resource is forbidden."""


class DriveNotFoundError(DriveAPIError):
    """Raised when an item cannot be found in storage."""


class DriveRateLimitError(DriveAPIError):
    """Raised when the API rate limit has been exceeded."""


class DriveNetworkError(DriveAPIError):
    """Raised on transport level failures (connection, timeout)."""


class DriveInvalidResponseError(DriveAPIError):
    """Raised when the server returns a response that is not valid JSON."""
