"""
Logging setup for the Storefront backend.

Modules log through ``logging.getLogger(__name__)``; this module only
installs the process-wide handler once at startup.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Safe to call more than once; only the first call installs a handler.
    Later calls just adjust the level.
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper())

    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True
