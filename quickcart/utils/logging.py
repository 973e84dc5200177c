# quickcart/utils/logging.py
import logging
import sys

from quickcart.utils.settings import LOG_LEVEL, LOG_FORMAT

_ROOT = "quickcart"
_configured = False


def _configure():
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger(_ROOT)
    root.addHandler(handler)
    root.setLevel(LOG_LEVEL.upper())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    _configure()
    return logging.getLogger(name)
