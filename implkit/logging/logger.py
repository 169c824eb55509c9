# implkit/logging/logger.py
"""
Logging setup for implkit.

implkit is a library: it never installs handlers on import. Its modules
log registry mutations and resolutions at DEBUG under the ``implkit.*``
namespace, each message prefixed with a tag from implkit.logging.tags.

To see registry wiring while debugging an application:
    configure_logging(logging.DEBUG)
or, to keep the host's own handlers and only raise implkit's level:
    logging.getLogger("implkit").setLevel(logging.DEBUG)
"""

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
):
    """
    Install a stream handler on the root logger and set its level.

    Meant for scripts and tests that wire a Registry without their own
    logging setup. A handler is only added when the root logger has none,
    so calling this again only changes the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Logger for an implkit module; pass ``__name__``.

    Registry log lines look like:
        [REGISTRY] [default] Associated Storage -> Memory
    """
    return logging.getLogger(name)
