#!/usr/bin/env python3

"""Logger setup for command-line use of the API utilities."""

import logging
import sys
from datetime import datetime
from pathlib import Path


class LoggerSetup:
    """Manages root logging configuration for the CLI.

    Library code only obtains module loggers; handlers are installed here,
    once, by the entry point.
    """

    _initialized = False
    _log_file_path: Path | None = None
    _handlers: list[logging.Handler] = []

    @classmethod
    def initialize(cls, log_dir: Path | None, verbose: bool = False) -> None:
        """
        Initialize the logging system with console and optional file handlers.

        Args:
            log_dir: Directory to store log files, or None for console only
            verbose: If True, set console to DEBUG level; otherwise INFO
        """
        if cls._initialized:
            return

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.handlers.clear()

        # Console handler - level depends on verbose flag
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)
        cls._handlers.append(console_handler)

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            cls._log_file_path = log_dir / f"rbx_api_utils_{timestamp}.log"

            # File handler - always DEBUG level
            file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            root_logger.addHandler(file_handler)
            cls._handlers.append(file_handler)

        cls._initialized = True

        logger = logging.getLogger(__name__)
        if cls._log_file_path is not None:
            logger.debug(f"Logging initialized. Log file: {cls._log_file_path}")
        logger.debug(f"Verbose mode: {verbose}")

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        """Get the current log file path."""
        return cls._log_file_path

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if logging has been initialized."""
        return cls._initialized

    @classmethod
    def reset(cls) -> None:
        """Remove the handlers installed by initialize so it can run again."""
        root_logger = logging.getLogger()
        for handler in cls._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._initialized = False
        cls._log_file_path = None
