"""Configuration for the launcher.

All configuration is loaded from environment variables.
"""

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import platformdirs

logger = logging.getLogger(__name__)

APP_NAME = "glauncher"
OUTPUT_LOG_NAME = "launched.log"


def default_config_dir() -> Path:
    """Platform config location, e.g. ~/.config/glauncher on Linux."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def default_output_log() -> Path:
    """Where detached programs write their stdout/stderr."""
    return Path(platformdirs.user_log_dir(APP_NAME)) / OUTPUT_LOG_NAME


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number, using {default}")
        return default
    if not math.isfinite(value):
        logger.warning(f"Ignoring {name}={raw!r}: must be finite, using {default}")
        return default
    if value < 0:
        logger.warning(f"Ignoring {name}={raw!r}: must not be negative, using {default}")
        return default
    return value


@dataclass
class LauncherConfig:
    """Launcher configuration loaded from environment."""

    # Program entries
    config_dir: Optional[Path] = None

    # Launching
    shell: str = "sh"
    settle_delay: float = 0.0
    output_log: Optional[Path] = None

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.config_dir is None:
            self.config_dir = default_config_dir()

    @classmethod
    def from_env(cls) -> "LauncherConfig":
        """Load configuration from environment variables."""
        config_dir = os.environ.get("GLAUNCHER_CONFIG_DIR")
        output_log = os.environ.get("GLAUNCHER_OUTPUT_LOG")
        if output_log is None:
            log_path = default_output_log()
        elif output_log.strip() == "":
            log_path = None
        else:
            log_path = Path(output_log).expanduser()

        return cls(
            config_dir=Path(config_dir).expanduser() if config_dir else default_config_dir(),
            shell=os.environ.get("GLAUNCHER_SHELL", "sh") or "sh",
            settle_delay=_float_env("GLAUNCHER_SETTLE_DELAY", 0.0),
            output_log=log_path,
            log_level=os.environ.get("GLAUNCHER_LOG_LEVEL", "WARNING").upper(),
        )
