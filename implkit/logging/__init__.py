# implkit/logging/__init__.py
"""
Logging helpers for implkit.

All modules use:
    from implkit.logging.logger import get_logger
    logger = get_logger(__name__)
"""

from .logger import DEFAULT_FORMAT, configure_logging, get_logger

__all__ = ["DEFAULT_FORMAT", "configure_logging", "get_logger"]
