import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"


def _build_logger(name: str = "videotube") -> logging.Logger:
    """只初始化一次 handler，避免重复输出"""
    _logger = logging.getLogger(name)
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(settings.LOG_LEVEL.upper())
    _logger.propagate = False
    return _logger


logger = _build_logger()
