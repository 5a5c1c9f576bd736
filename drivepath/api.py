"""Read-only REST client for the storage API."""

from __future__ import annotations

import logging
import random
import time
from typing import Any, Literal
from urllib.parse import quote

import httpx

from .config import config
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
from .utils import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_PER_PAGE,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
)

logger = logging.getLogger(__name__)

EntryType = Literal["folder", "image", "text", "audio", "video", "pdf"]


class DriveClient:
    """Client for the file-entry endpoints of the storage API."""

    def __init__(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the API client.

        Args:
            api_key: Optional API key (uses config if not provided)
            api_url: Optional API URL (uses config if not provided)
            max_retries: Maximum number of retry attempts (default: 3)
            retry_delay: Initial delay between retries in seconds (default: 1.0)
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.api_key = api_key or config.api_key
        self.api_url = (api_url or config.api_url).rstrip("/")
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.timeout = timeout

        if not self.api_key:
            raise DriveConfigError(
                "API key not configured. "
                "Please set DRIVEPATH_API_KEY environment variable."
            )

        self._client: httpx.Client | None = None

    def __enter__(self) -> DriveClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create the httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the client and release connections."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
        self._client = None

    def _calculate_retry_delay(self, attempt: int) -> float:
        """Exponential backoff with +/- 25% jitter.

        Args:
            attempt: Current attempt number (0-based)

        Returns:
            Delay in seconds
        """
        base_delay = self.retry_delay * (2**attempt)
        jitter = base_delay * 0.25 * (2 * random.random() - 1)
        return base_delay + jitter

    def _translate_http_error(self, e: httpx.HTTPStatusError) -> DriveAPIError:
        """Map an HTTP status error to a drivepath exception."""
        status_code = e.response.status_code

        if status_code == 401:
            return DriveAuthenticationError("Invalid API key or unauthorized access")
        if status_code == 403:
            return DrivePermissionError("Access forbidden - check your permissions")
        if status_code == 404:
            return DriveNotFoundError("Resource not found")
        if status_code == 429:
            return DriveRateLimitError("Rate limit exceeded - please try again later")

        error_msg = f"API request failed with status {status_code}"
        try:
            if e.response.content:
                error_data = e.response.json()
                if isinstance(error_data, dict):
                    msg = (
                        error_data.get("message")
                        or error_data.get("error")
                        or error_data.get("detail")
                    )
                    if msg:
                        error_msg = f"{error_msg}: {msg}"
        except ValueError:
            # body is not JSON, keep the status-based message
            pass
        return DriveAPIError(error_msg)

    @staticmethod
    def _is_retryable(status_code: int) -> bool:
        return status_code == 429 or 500 <= status_code < 600

    def _parse_response(self, response: httpx.Response) -> Any:
        content_type = response.headers.get("Content-Type", "")
        if response.content and "application/json" not in content_type:
            # An HTML page instead of JSON usually means a login redirect
            if "text/html" in content_type:
                raise DriveAuthenticationError(
                    "Invalid API key - server returned HTML instead of JSON"
                )
            raise DriveInvalidResponseError(f"Unexpected response type: {content_type}")

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise DriveInvalidResponseError(
                "Invalid JSON response from server - "
                "check your API key and network connection"
            ) from e

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        """Make an API request with retry logic.

        Network errors, rate limits and 5xx responses are retried up to
        ``max_retries`` times. Other failures raise immediately.

        Args:
            method: HTTP method
            endpoint: API endpoint path
            **kwargs: Additional arguments passed to httpx

        Returns:
            Response JSON data

        Raises:
            DriveAPIError: If the request fails after all retries
        """
        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        client = self._get_client()

        for attempt in range(self.max_retries + 1):
            can_retry = attempt < self.max_retries
            try:
                response = client.request(method, url, **kwargs)
                response.raise_for_status()
                return self._parse_response(response)

            except httpx.HTTPStatusError as e:
                error = self._translate_http_error(e)
                if not (can_retry and self._is_retryable(e.response.status_code)):
                    raise error from e

                retry_after = e.response.headers.get("Retry-After")
                if isinstance(error, DriveRateLimitError) and (
                    retry_after and retry_after.isdigit()
                ):
                    delay = float(retry_after)
                else:
                    delay = self._calculate_retry_delay(attempt)
                logger.debug(
                    f"{method} {url} failed ({error}), retrying in {delay:.1f}s"
                )
                time.sleep(delay)

            except httpx.RequestError as e:
                error = DriveNetworkError(f"Network error: {e}")
                if not can_retry:
                    raise error from e
                delay = self._calculate_retry_delay(attempt)
                logger.debug(f"{method} {url} failed ({e}), retrying in {delay:.1f}s")
                time.sleep(delay)

        raise DriveAPIError("Request failed after all retry attempts")

    # =========================
    # File entries
    # =========================

    def get_file_entries(
        self,
        per_page: int = DEFAULT_PER_PAGE,
        page: int | None = None,
        query: str | None = None,
        entry_type: EntryType | None = None,
        workspace_id: int = 0,
    ) -> Any:
        """List file entries, optionally filtered by name and type.

        Args:
            per_page: How many entries to return per page
            page: Page number to retrieve (1-based, default: None for page 1)
            query: Search query to filter entry names
            entry_type: File type to filter on (folder, image, text, ...)
            workspace_id: Only return entries in specified workspace (default: 0)

        Returns:
            Paginated response with ``data``, ``current_page`` and ``last_page``
        """
        params: dict[str, Any] = {"perPage": per_page, "workspaceId": workspace_id}

        if page is not None:
            params["page"] = page
        if query:
            params["query"] = query
        if entry_type:
            params["type"] = entry_type

        return self._request("GET", "/drive/file-entries", params=params)

    def get_file_entry(self, entry_id: str, workspace_id: int = 0) -> Any:
        """Get a single file entry by ID.

        Args:
            entry_id: ID of the file entry to retrieve
            workspace_id: Workspace ID (default: 0 for personal)

        Returns:
            Response with a ``fileEntry`` object

        Raises:
            DriveNotFoundError: If the entry does not exist
        """
        params: dict[str, Any] = {"workspaceId": workspace_id}
        path = f"/file-entries/{quote(str(entry_id), safe='')}"
        return self._request("GET", path, params=params)
