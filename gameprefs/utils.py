"""Utility functions and constants for gameprefs."""

import os
import logging
import traceback
from dataclasses import dataclass
from typing import Optional

# Install directory of the client; the config file and worlds folder live here
DEFAULT_BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# Setup logging
def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  console: bool = True) -> logging.Logger:
    """Setup logging configuration for gameprefs."""
    logger = logging.getLogger("gameprefs")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "gameprefs") -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def log_exception(e: Exception, context: str = "", logger: Optional[logging.Logger] = None):
    """Log an exception with full traceback."""
    logger = logger or get_logger()
    logger.error(f"EXCEPTION in {context}: {type(e).__name__}: {str(e)}")
    logger.debug(f"Traceback:\n{traceback.format_exc()}")


def clamp(val, lo, hi):
    """Clamp a value between low and high bounds. Either bound may be None."""
    if lo is not None and val < lo:
        return lo
    if hi is not None and val > hi:
        return hi
    return val


def make_directory(path: str) -> str:
    """Create a directory, replacing a plain file that sits at the same path."""
    if os.path.isfile(path):
        os.remove(path)
    os.makedirs(path, exist_ok=True)
    return path


@dataclass
class Dirs:
    """Folders the client expects next to its config file."""
    base: str
    worlds: str
    screenshots: str
    video: str
    replay: str
    mods: str
    speedrun: str
    bank: str

    @staticmethod
    def under(base: str) -> "Dirs":
        screenshots = os.path.join(base, "screenshots")
        return Dirs(
            base=base,
            worlds=os.path.join(base, "worlds"),
            screenshots=screenshots,
            video=os.path.join(screenshots, "rapid-screenshots"),
            replay=os.path.join(base, "replay"),
            mods=os.path.join(base, "mods"),
            speedrun=os.path.join(base, "speedrun"),
            bank=os.path.join(base, "bank"),
        )


def init_dirs(base: str = DEFAULT_BASE_DIR) -> Dirs:
    """Make sure every folder under ``base`` exists before any file I/O."""
    dirs = Dirs.under(base)
    logger = get_logger("gameprefs.utils")
    make_directory(dirs.base)
    for path in (dirs.worlds, dirs.screenshots, dirs.video, dirs.replay,
                 dirs.mods, dirs.speedrun, dirs.bank):
        try:
            make_directory(path)
        except OSError as e:
            logger.warning(f"Could not create directory {path}: {e}")
    return dirs
