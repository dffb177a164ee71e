#!/usr/bin/env python3

"""Logging configuration for code generators embedding the engine.

Handlers are attached to the ``signature_expander`` package logger rather
than the root logger, so the host build keeps control of its own logging.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import Config

PACKAGE_LOGGER = "signature_expander"

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggerSetup:
    """Installs console and file handlers on the package logger once."""

    _initialized = False
    _log_file_path: Path | None = None
    _handlers: list[logging.Handler] = []

    @classmethod
    def initialize(cls, log_dir: Path | None = None, verbose: bool = False) -> None:
        """
        Attach handlers to the package logger.

        Args:
            log_dir: Directory for a timestamped DEBUG log file; console only if None
            verbose: Show DEBUG records (classification and dispatch traces) on the console
        """
        if cls._initialized:
            return

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        cls._install(package_logger, console_handler)

        if log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            cls._log_file_path = log_dir / f"signature_expander_{timestamp}.log"

            file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
            cls._install(package_logger, file_handler)

        cls._initialized = True

        logger = logging.getLogger(__name__)
        logger.info(f"Logging initialized. Log file: {cls._log_file_path or 'none'}")
        logger.debug(f"Verbose mode: {verbose}")

    @classmethod
    def initialize_from_config(cls, config: "Config") -> None:
        """Initialize logging from the configured log directory and verbosity."""
        cls.initialize(config.log_dir, verbose=config.verbose)

    @classmethod
    def shutdown(cls) -> None:
        """Remove and close the installed handlers; a later ``initialize`` starts fresh."""
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in cls._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        cls._initialized = False
        cls._log_file_path = None

    @classmethod
    def get_log_file_path(cls) -> Path | None:
        """Get the current log file path."""
        return cls._log_file_path

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._initialized

    @classmethod
    def _install(cls, package_logger: logging.Logger, handler: logging.Handler) -> None:
        package_logger.addHandler(handler)
        cls._handlers.append(handler)
