import logging
import os
import sys

_DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=None, format_string=_DEFAULT_FORMAT):
    """Configure the ``odekit`` logger to write to stdout.

    The level defaults to the ``ODEKIT_LOG_LEVEL`` environment variable and
    falls back to ``INFO``.
    """
    if level is None:
        level = os.environ.get("ODEKIT_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stdout
    )

setup_logging()

logger = logging.getLogger("odekit")
