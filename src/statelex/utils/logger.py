"""Logging helpers for statelex.

Every logger the package creates lives under the "statelex" namespace. The
package logger carries a single NullHandler so that warnings about failed
reads are not printed through logging's last-resort handler when the
embedding application has not configured logging. Records still propagate,
so any handler the application installs sees them.

Example:
    >>> from statelex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("state transition")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "statelex"


def _package_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the statelex namespace.

    Names outside the namespace (e.g. "mymodule" or "statelexer") are
    prefixed with "statelex.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'statelex.mymodule'
    """
    root = _package_logger()
    if name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
