"""Configuration management for production and test environments.

This module provides centralized configuration for log and output locations,
plus the base URL used to build article links, keeping production and test
runs apart.
"""

import os
from pathlib import Path
from typing import Literal

from ..utils.log import get_logger

log = get_logger(__name__)

# Environment mode type
EnvironmentMode = Literal["production", "test"]

DEFAULT_BASE_URL = "http://localhost/index.php"

# Default paths for production environment
_DEFAULT_PRODUCTION_PATHS = {
    "log_dir": Path("logs"),
    "output_dir": Path("data/rfc1807"),
}

# Test paths (completely separate from production)
_DEFAULT_TEST_PATHS = {
    "log_dir": Path("test_data/logs"),
    "output_dir": Path("test_data/rfc1807"),
}


class EnvironmentConfig:
    """Manages environment-specific paths and settings.

    Paths are separated by mode so test runs never write into production
    output directories.
    """

    def __init__(self, mode: EnvironmentMode = "production") -> None:
        """Initialize configuration with specified mode.

        Args:
            mode: Environment mode ('production' or 'test')
        """
        self._mode: EnvironmentMode = mode
        self._paths: dict[str, Path] = {}
        self._load_paths()
        log.debug("environment_config_initialized", mode=mode, paths=str(self._paths))

    def _load_paths(self) -> None:
        """Load paths based on current mode."""
        if self._mode == "test":
            self._paths = _DEFAULT_TEST_PATHS.copy()
        else:
            self._paths = _DEFAULT_PRODUCTION_PATHS.copy()

    @property
    def mode(self) -> EnvironmentMode:
        """Get current environment mode."""
        return self._mode

    @property
    def log_dir(self) -> Path:
        """Get session log directory."""
        return self._paths["log_dir"]

    @property
    def output_dir(self) -> Path:
        """Get directory for converted RFC 1807 documents."""
        return self._paths["output_dir"]

    @property
    def base_url(self) -> str:
        """Base URL of the journal site, read from OAI_BASE_URL."""
        return os.getenv("OAI_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    def set_mode(self, mode: EnvironmentMode) -> None:
        """Change environment mode and reload paths.

        Args:
            mode: New environment mode ('production' or 'test')
        """
        if mode != self._mode:
            old_mode = self._mode
            self._mode = mode
            self._load_paths()
            log.info(
                "environment_mode_changed",
                old_mode=old_mode,
                new_mode=mode,
                new_paths=str(self._paths),
            )

    def ensure_directories(self) -> None:
        """Create all necessary directories if they don't exist."""
        for path in self._paths.values():
            path.mkdir(parents=True, exist_ok=True)
            log.debug("directory_ensured", path=str(path))

    def get_summary(self) -> dict[str, str]:
        """Get summary of current configuration."""
        return {
            "mode": self._mode,
            "base_url": self.base_url,
            **{k: str(v) for k, v in self._paths.items()},
        }


# Global configuration instance (lazily initialized)
_config: EnvironmentConfig | None = None


def get_config() -> EnvironmentConfig:
    """Get the global configuration instance.

    Lazily initializes the config on first access if not already initialized.
    """
    global _config
    if _config is None:
        _config = EnvironmentConfig(mode="production")
    return _config


def set_test_mode() -> None:
    """Switch to test mode globally.

    Called by the CLI when the --test flag is used, or in test fixtures.
    """
    global _config
    if _config is None:
        _config = EnvironmentConfig(mode="test")
        log.info("initialized_in_test_mode", paths=_config.get_summary())
    else:
        _config.set_mode("test")
        log.info("switched_to_test_mode", paths=_config.get_summary())


def set_production_mode() -> None:
    """Switch to production mode globally."""
    global _config
    if _config is None:
        _config = EnvironmentConfig(mode="production")
        log.info("initialized_in_production_mode", paths=_config.get_summary())
    else:
        _config.set_mode("production")
        log.info("switched_to_production_mode", paths=_config.get_summary())


def is_test_mode() -> bool:
    """Check if currently in test mode."""
    return get_config().mode == "test"
