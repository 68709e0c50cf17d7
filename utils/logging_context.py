"""
Per-scene log files for batch imports.
"""

import logging
import pathlib

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FileLoggingContext:
    """Context manager that copies all logging to a scene-specific log file.

    Everything logged through the root logger inside the context also lands in the file.
    """

    def __init__(self, log_file_path: pathlib.Path, suppress_stdout: bool = False, level: int = logging.DEBUG):
        """
        Args:
            log_file_path: Path to the scene-specific log file
            suppress_stdout: If True, prevents logs from also going to the existing handlers
            level: Minimum level written to the file
        """
        self.log_file_path = log_file_path
        self.suppress_stdout = suppress_stdout
        self.level = level
        self.file_handler = None
        self.original_handlers = []

    def __enter__(self):
        """Set up the file handler on the root logger."""
        self.file_handler = logging.FileHandler(self.log_file_path)
        self.file_handler.setLevel(self.level)
        self.file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        root_logger = logging.getLogger()

        if self.suppress_stdout:
            # Save original handlers and remove them temporarily.
            self.original_handlers = root_logger.handlers[:]
            for handler in self.original_handlers:
                root_logger.removeHandler(handler)

        root_logger.addHandler(self.file_handler)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Remove the file handler and restore the original handlers."""
        root_logger = logging.getLogger()

        if self.file_handler in root_logger.handlers:
            root_logger.removeHandler(self.file_handler)

        if self.suppress_stdout and self.original_handlers:
            for handler in self.original_handlers:
                if handler not in root_logger.handlers:
                    root_logger.addHandler(handler)

        if self.file_handler:
            self.file_handler.close()
