"""
Logging setup.

Module loggers are created with ``logging.getLogger(__name__)``; this
module only installs the root handler once at startup.
"""

import logging

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger at *level*."""
    logging.basicConfig(level=level.upper(), format=_FORMAT)
    logging.getLogger(__name__).debug("Logging configured at %s", level.upper())
