"""Shared constants and small helpers for drivepath."""

from collections.abc import Iterable

# =============================================================================
# Resolution defaults
# =============================================================================

# Separator placed between folder names of a path
DEFAULT_DELIMITER: str = " > "

# Cap on parents (paths) and on name matches per call
DEFAULT_MAX_RESULTS: int = 10

# Id and display name of the implicit root folder of API backends
ROOT_ID: str = "0"
DEFAULT_ROOT_NAME: str = "Root"

# =============================================================================
# Transport defaults
# =============================================================================

DEFAULT_API_URL: str = "https://app.drime.cloud/api/v1"
DEFAULT_MAX_RETRIES: int = 3
DEFAULT_RETRY_DELAY: float = 1.0  # seconds
DEFAULT_TIMEOUT: float = 30.0  # seconds
DEFAULT_PER_PAGE: int = 100


def join_path(names: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join folder names (root first) into a single path string.

    Examples:
        >>> join_path(["Root", "Projects", "2024"])
        'Root > Projects > 2024'
        >>> join_path(["Root"], "/")
        'Root'
    """
    return delimiter.join(names)


def with_id(path: str, item_id: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Append an item ID to a path as its last segment.

    Examples:
        >>> with_id("Root > X", "A")
        'Root > X > A'
    """
    return f"{path}{delimiter}{item_id}"
