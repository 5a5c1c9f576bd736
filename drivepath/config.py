"""Configuration management for drivepath.

Values are read from environment variables first, then from the dotenv
style ``KEY=VALUE`` file at ``~/.config/drivepath/config``.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, set_key

from .utils import (
    DEFAULT_API_URL,
    DEFAULT_DELIMITER,
    DEFAULT_MAX_RESULTS,
    DEFAULT_ROOT_NAME,
)

logger = logging.getLogger(__name__)

API_KEY_VAR = "DRIVEPATH_API_KEY"
API_URL_VAR = "DRIVEPATH_API_URL"
DELIMITER_VAR = "DRIVEPATH_DELIMITER"
MAX_RESULTS_VAR = "DRIVEPATH_MAX_RESULTS"
ROOT_NAME_VAR = "DRIVEPATH_ROOT_NAME"


class Config:
    """Layered configuration (environment, then config file)."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize configuration.

        Args:
            config_dir: Directory holding the ``config`` file
                (default: ~/.config/drivepath)
        """
        self.config_dir = config_dir or Path.home() / ".config" / "drivepath"
        self.config_file = self.config_dir / "config"

    def _read_file(self) -> dict[str, Optional[str]]:
        if not self.config_file.is_file():
            return {}
        return dict(dotenv_values(self.config_file, encoding="utf-8"))

    def _get(self, key: str) -> Optional[str]:
        value = os.environ.get(key)
        if value:
            return value
        return self._read_file().get(key)

    @property
    def api_key(self) -> Optional[str]:
        return self._get(API_KEY_VAR)

    @property
    def api_url(self) -> str:
        return self._get(API_URL_VAR) or DEFAULT_API_URL

    @property
    def default_delimiter(self) -> str:
        # an explicit empty string is not a usable delimiter
        return self._get(DELIMITER_VAR) or DEFAULT_DELIMITER

    @property
    def max_results(self) -> int:
        raw = self._get(MAX_RESULTS_VAR)
        if raw is None:
            return DEFAULT_MAX_RESULTS
        try:
            return int(raw)
        except ValueError:
            logger.warning(
                f"Ignoring invalid {MAX_RESULTS_VAR}={raw!r}, "
                f"using {DEFAULT_MAX_RESULTS}"
            )
            return DEFAULT_MAX_RESULTS

    @property
    def root_name(self) -> str:
        return self._get(ROOT_NAME_VAR) or DEFAULT_ROOT_NAME

    def is_configured(self) -> bool:
        """Check if an API key is available."""
        return bool(self.api_key)

    def get_config_path(self) -> Path:
        """Get the path of the config file."""
        return self.config_file

    def save_api_key(self, api_key: str) -> None:
        """Store the API key in the config file, keeping other entries.

        Args:
            api_key: API key to store
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.touch(exist_ok=True)
        set_key(self.config_file, API_KEY_VAR, api_key, quote_mode="never")
        self.config_file.chmod(0o600)


config = Config()
