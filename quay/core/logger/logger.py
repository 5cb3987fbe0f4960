"""
Logging Management Module

Handles centralized logging configuration with dynamic reconfiguration support.
Publishing sessions start with console-only logging and switch to dual
console+file logging once the telemetry configuration names a log directory.

Key Features:
    - Singleton-like Behavior: Prevents duplicate handler registration
    - Dynamic Reconfiguration: Switches from console-only to file-based logging
    - Rotating File Handler: Automatic log rotation with size limits
    - Timestamp-based Files: One log file per publishing session
"""

import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Final, Optional

from ..paths import LOGGER_NAME


class Logger:
    """
    Manages centralized logging configuration with singleton-like behavior.

    The engine modules all log through ``logging.getLogger(LOGGER_NAME)``;
    this class only decides where those records go. Configured names are
    tracked at class level so repeated construction does not stack handlers,
    while passing a ``log_dir`` always triggers a reconfiguration.

    Class Attributes:
        _configured_names: Logger names that already carry handlers
        _active_log_file: Current log file path, if file logging is active

    Example:
        >>> logger = Logger.setup(name=LOGGER_NAME, log_dir=Path("./logs"))
        >>> logger.info("Publishing static resources")
        >>> Logger.get_log_file()
        PosixPath('logs/quay_20260101_120000.log')
    """

    _configured_names: Final[Dict[str, bool]] = {}
    _active_log_file: Optional[Path] = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        log_dir: Optional[Path] = None,
        log_to_file: bool = True,
        level: int = logging.INFO,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 5,
    ):
        """
        Initializes the Logger with specified configuration.

        Args:
            name: Logger identifier (default: LOGGER_NAME constant)
            log_dir: Directory for log file storage (None = console-only)
            log_to_file: Enable file logging if log_dir provided (default: True)
            level: Logging level as integer constant (default: logging.INFO)
            max_bytes: Maximum log file size before rotation in bytes (default: 5MB)
            backup_count: Number of rotated backup files to retain (default: 5)
        """
        self.name = name
        self.log_dir = log_dir
        self.log_to_file = log_to_file and (log_dir is not None)
        self.level = level
        self.max_bytes = max_bytes
        self.backup_count = backup_count

        self.logger = logging.getLogger(name)

        if name not in Logger._configured_names or log_dir is not None:
            self._setup_logger()
            Logger._configured_names[name] = True
        else:
            self.logger.setLevel(level)

    def _setup_logger(self) -> None:
        """
        Configures log handlers: console always, rotating file only with a log_dir.

        Existing handlers are closed and removed first so reconfiguration never
        duplicates output.
        """
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )

        self.logger.setLevel(self.level)
        self.logger.propagate = False

        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

        console_h = logging.StreamHandler(sys.stdout)
        console_h.setFormatter(formatter)
        self.logger.addHandler(console_h)

        if self.log_to_file and self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            filename = self.log_dir / f"{self.name}_{timestamp}.log"

            file_h = RotatingFileHandler(
                filename, maxBytes=self.max_bytes, backupCount=self.backup_count, encoding="utf-8"
            )
            file_h.setFormatter(formatter)
            self.logger.addHandler(file_h)

            Logger._active_log_file = filename

    def get_logger(self) -> logging.Logger:
        """Returns the underlying configured logging.Logger instance."""
        return self.logger

    @classmethod
    def get_log_file(cls) -> Optional[Path]:
        """Returns the active log file path, or None without file logging."""
        return cls._active_log_file

    @classmethod
    def setup(
        cls, name: str, log_dir: Optional[Path] = None, level: str = "INFO", **kwargs
    ) -> logging.Logger:
        """
        Main entry point for configuring the logger from telemetry settings.

        Args:
            name: Logger identifier (typically LOGGER_NAME constant)
            log_dir: Directory for log file storage (None = console-only mode)
            level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            **kwargs: Additional arguments passed to Logger constructor

        Returns:
            Configured logging.Logger instance

        Environment Variables:
            QUAY_DEBUG: If set to "1", forces DEBUG regardless of level
        """
        if os.getenv("QUAY_DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        return cls(name=name, log_dir=log_dir, level=numeric_level, **kwargs).get_logger()


# Initial bootstrap instance (console-only), reconfigured by Logger.setup()
logger: Final[logging.Logger] = Logger().get_logger()
