# utils/logger.py
import logging

from capacity_extender.utils.config import settings

LOG_LEVEL = settings.log_level.upper()
LOG_FILE = settings.log_file

# Ensure logs directory exists
LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

# Create formatter
formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(filename)s:%(lineno)d | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

# File handler
file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
file_handler.setLevel(LOG_LEVEL)
file_handler.setFormatter(formatter)

# Console handler (warnings only, the CLI prints its own summary)
console_handler = logging.StreamHandler()
console_handler.setLevel("WARNING")
console_handler.setFormatter(formatter)


def get_logger(name: str = "capacity_extender") -> logging.Logger:
    """Return a configured logger instance."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    # Avoid duplicate handlers if called multiple times
    if not logger.handlers:
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

    return logger
