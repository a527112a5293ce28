#!/usr/bin/env python3

"""Logger setup for the ScriptForward generator."""

import logging
import sys
from datetime import datetime
from pathlib import Path


class LoggerSetup:
    """Configures console (and optionally file) logging once per process."""

    _initialized = False
    _log_file_path: Path | None = None
    _handlers: list[logging.Handler] = []

    @classmethod
    def initialize(
        cls,
        log_dir: Path | None = None,
        verbose: bool = False,
        file_logging: bool = False,
    ) -> None:
        """
        Initialize the logging system.

        Args:
            log_dir: Directory for the timestamped log file (used with file_logging)
            verbose: If True, set console to DEBUG level; otherwise INFO
            file_logging: If True, also write a DEBUG log file into log_dir
        """
        if cls._initialized:
            return

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        root_logger.handlers.clear()

        # Generated code goes to files, so the console only carries diagnostics
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root_logger.addHandler(console_handler)
        cls._handlers.append(console_handler)

        if file_logging and log_dir is not None:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            cls._log_file_path = log_dir / f"script_forward_{timestamp}.log"

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
        """Get the current log file path, if file logging is enabled."""
        return cls._log_file_path

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if logging has been initialized."""
        return cls._initialized

    @classmethod
    def reset(cls) -> None:
        """Forget the previous configuration so initialize() can run again."""
        root_logger = logging.getLogger()
        for handler in cls._handlers:
            root_logger.removeHandler(handler)
            handler.close()
        cls._handlers.clear()
        cls._initialized = False
        cls._log_file_path = None
