from __future__ import annotations
import sys

from loguru import logger

from .config import config

# Console sink for humans, rotating JSON file sink for later analysis
logger.remove()
logger.configure(extra={"component": "app"})
logger.add(
    sys.stdout,
    level=config.log_level,
    enqueue=True,
    backtrace=False,
    diagnose=False,
    colorize=True,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | {message}",
)
logger.add(
    config.log_file,
    rotation="10 MB",
    retention="7 days",
    compression="zip",
    level=config.log_level,
    enqueue=True,
    serialize=True,
)


def get_logger(name: str = "app"):
    """Return a logger bound to a component name, e.g. ``analytics/balance``."""
    return logger.bind(component=name)
