import logging
import sys

import env

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level=None):
    """Attach a console handler to the root logger. Call once at startup."""
    level = level or env.LOG_LEVEL
    level_value = getattr(logging, str(level).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT))

    root = logging.getLogger()
    root.setLevel(level_value)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)


def get_logger(name):
    return logging.getLogger(name)
