import logging
import sys
from .config import app_config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def get_logger(name: str = "topscorers") -> logging.Logger:
    """Return the package logger, attaching a stdout handler on first use"""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    level = getattr(logging, app_config.log_level.upper(), logging.INFO)
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
