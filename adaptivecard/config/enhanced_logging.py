"""
Enhanced Logging Utility Module
Provides colored console logging with file/line tracking, truncation of
long messages, and an optional plain-text log file.
"""

import datetime
import logging
import os
import sys
from pathlib import Path

# ======== Color Configuration ========
COLORS = {
    # Log levels
    "DEBUG": "\033[38;5;39m",  # Blue
    "INFO": "\033[38;5;34m",  # Green
    "WARNING": "\033[38;5;214m",  # Orange
    "ERROR": "\033[38;5;196m",  # Red
    "CRITICAL": "\033[48;5;196;38;5;231m",  # White on Red
    # Components
    "TIMESTAMP": "\033[38;5;246m",  # Dark Gray
    "FILE": "\033[1;38;5;63m",  # Bold Blue
    "LINE": "\033[38;5;69m",  # Light Blue
    "MSG_CONTENT": "\033[38;5;255m",  # White
    "RESET": "\033[0m",
}

# Maximum log message length before truncation
MAX_MSG_LENGTH = 3000

CONSOLE_FORMAT = (
    "%(color_timestamp)s%(asctime)s%(color_reset)s "
    "%(color_file)s%(name)s:%(lineno)d%(color_reset)s "
    "%(color_level)s[%(levelname).1s]%(color_reset)s "
    "%(color_msg_content)s%(message)s%(color_reset)s"
)

FILE_FORMAT = "%(asctime)s %(name)s:%(lineno)d [%(levelname).1s] %(message)s"

_root_logger_initialized = False


def get_log_file():
    """
    Return the log file path when LOG_PATH is set, otherwise None.

    Files are grouped per day: <LOG_PATH>/<YYYY-MM-DD>/adaptivecard_<HH-MM-SS>.log
    """
    log_path = os.getenv("LOG_PATH")
    if not log_path:
        return None

    now = datetime.datetime.now()
    daily_log_dir = Path(log_path) / now.strftime("%Y-%m-%d")
    try:
        daily_log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(
            f"Warning: Cannot create log directory ({e}). Using console logging only.",
            file=sys.stderr,
        )
        return None
    return daily_log_dir / f"adaptivecard_{now.strftime('%H-%M-%S')}.log"


class ColoredFormatter(logging.Formatter):
    """Formatter that injects color attributes and truncates long messages."""

    def __init__(self, fmt=None, datefmt=None, use_colors=True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and self._should_use_colors()

    def _should_use_colors(self):
        """Check if the terminal supports colors"""
        stream = getattr(sys, "stdout", None)
        return bool(stream is not None and hasattr(stream, "isatty") and stream.isatty())

    def format(self, record):
        for color_name, color_code in COLORS.items():
            setattr(record, f"color_{color_name.lower()}", color_code)
        record.color_level = COLORS.get(record.levelname, COLORS["INFO"])

        if isinstance(record.msg, str) and len(record.msg) > MAX_MSG_LENGTH:
            record.msg = record.msg[: MAX_MSG_LENGTH - 3] + "..."

        result = super().format(record)

        # Strip color codes if colors are disabled
        if not self.use_colors:
            for color_code in COLORS.values():
                result = result.replace(color_code, "")

        return result


def setup_logger(level=None):
    """
    Set up enhanced logging with colored console output.
    This function configures the root logger once and returns it. It is
    meant for entry points (scripts, examples); the library itself only
    logs through named loggers and never calls it on import.

    Args:
        level: Logging level or level name (defaults to LOG_LEVEL env var or INFO)

    Returns:
        logging.Logger: The root logger instance
    """
    global _root_logger_initialized

    if _root_logger_initialized:
        return logging.getLogger()

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file = get_log_file()
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(
                logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
            root_logger.addHandler(file_handler)
        except OSError:
            print(
                "Warning: Cannot create file handler. Using console logging only.",
                file=sys.stderr,
            )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        ColoredFormatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(console_handler)

    _root_logger_initialized = True

    root_logger.debug("Enhanced logger initialized")
    return root_logger

