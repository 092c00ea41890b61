import logging
from logging import Logger

from .config import get_settings


def configure_logging(level: str | int | None = None) -> Logger:
    """تهيئة مسجل موحد للأداة، مع إمكانية تعديل المستوى (مثل وضع --verbose)."""
    settings = get_settings()

    logger = logging.getLogger(settings.app_name)
    if level is not None:
        logger.setLevel(level)
    if logger.handlers:
        return logger

    if level is None:
        logger.setLevel(settings.log_level.upper())

    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(levelname)s] %(asctime)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger
