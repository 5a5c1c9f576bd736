"""Argument checks run before any backend call.

Each check returns ``None`` when the value is acceptable, or a
``ResolutionError`` describing the problem. Resolvers return that error
unchanged instead of raising.
"""

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Optional

from .models import ResolutionError, invalid_argument

_STRUCTURED = (Mapping, list, tuple, set, frozenset)


def _is_structured(value: Any) -> bool:
    return isinstance(value, _STRUCTURED)


def check_item_id(item_id: Any) -> Optional[ResolutionError]:
    """Check that an item ID is a non-empty string.

    Examples:
        >>> check_item_id("abc") is None
        True
        >>> check_item_id("").message
        'Item ID must be a non-empty string'
    """
    if not isinstance(item_id, str) or not item_id.strip():
        return invalid_argument("Item ID must be a non-empty string")
    return None


def check_delimiter(delimiter: Any) -> Optional[ResolutionError]:
    """Check a path delimiter.

    Any scalar is accepted (callers coerce it with ``str``); ``None`` and
    structured values are rejected.
    """
    if delimiter is None or _is_structured(delimiter):
        return invalid_argument(
            f"Delimiter must be a string, got {type(delimiter).__name__}"
        )
    return None


def check_limit(value: Any, label: str) -> Optional[ResolutionError]:
    """Check a result cap such as ``max_paths`` or ``max_files``.

    Args:
        value: The cap supplied by the caller
        label: Argument name used in the error message

    Returns:
        None if the cap is a real number (booleans and NaN excluded),
        else an error
    """
    if (
        isinstance(value, bool)
        or not isinstance(value, Real)
        or (isinstance(value, float) and math.isnan(value))
    ):
        return invalid_argument(
            f"{label} must be a number, got {type(value).__name__}"
        )
    return None


def check_name(name: Any, label: str = "Name") -> Optional[ResolutionError]:
    """Check a file or folder name.

    Numbers are accepted and coerced by the caller; ``None``, booleans,
    structured values and blank strings are rejected.
    """
    if name is None or isinstance(name, bool) or _is_structured(name):
        return invalid_argument(
            f"{label} must be a non-empty string, got {type(name).__name__}"
        )
    if not str(name).strip():
        return invalid_argument(f"{label} must be a non-empty string")
    return None
