"""
Tool configuration: logging and data-check preferences stored as JSON.
"""

import json
from pathlib import Path
from typing import Optional, Dict, Any

from engine.error_handler import (
    ConfigError,
    enable_file_logging,
    logger,
    set_console_level,
)

# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_FILE = CONFIG_DIR / "settings.json"


class ToolConfig:
    """Manages tool configuration/settings."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path: Path = Path(path) if path is not None else CONFIG_FILE
        self.log_level: str = "WARNING"
        self.log_dir: Optional[str] = None  # None disables file logging
        self.strict_integrity: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for saving."""
        return {
            "log_level": self.log_level,
            "log_dir": self.log_dir,
            "strict_integrity": self.strict_integrity,
        }

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Load config from dictionary."""
        self.log_level = str(data.get("log_level", "WARNING")).upper()
        self.log_dir = data.get("log_dir")
        strict = data.get("strict_integrity", False)
        if not isinstance(strict, bool):
            logger.warning(f"Ignoring non-boolean strict_integrity value: {strict!r}")
            strict = False
        self.strict_integrity = strict

    def save(self) -> bool:
        """Save config to file."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Error saving config to {self.path}: {e}")
            return False

    def load(self, strict: bool = False) -> bool:
        """
        Load config from file.

        Returns False if the file is missing or unreadable; the current
        values are kept. With strict=True an unreadable file raises
        ConfigError instead.
        """
        if not self.path.exists():
            return False

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")
        except (OSError, ValueError) as e:
            if strict:
                raise ConfigError(
                    f"Could not load config {self.path}: {e}",
                    user_message="Settings file is unreadable.",
                ) from e
            logger.error(f"Error loading config from {self.path}: {e}")
            return False

        self.from_dict(data)
        return True

    def apply_logging(self) -> None:
        """Push the logging settings into the project logger."""
        set_console_level(self.log_level)
        if self.log_dir:
            try:
                log_file = enable_file_logging(self.log_dir)
            except (OSError, TypeError) as e:
                raise ConfigError(
                    f"Cannot log to {self.log_dir!r}: {e}",
                    user_message="Log directory is unusable.",
                ) from e
            logger.debug(f"File logging enabled: {log_file}")


# Global config instance
_config = ToolConfig()


def get_config() -> ToolConfig:
    """Get the global configuration instance."""
    return _config
