"""
Logging utilities for the Invoice Builder UI.

Every module logger hangs off the "invoice_builder" package logger, which
owns the only handler. Module loggers are created with logger(__file__)
and named after the module, e.g. "invoice_builder.caches".
"""

import logging
import os
from pathlib import Path

ROOT_LOGGER = "invoice_builder"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the module logger for name.

    Args:
        name: Module name, or a __file__ path whose stem becomes the name.

    Returns:
        A child of the package logger; records propagate to its handler.
    """
    _configure_root()
    if "/" in name or "\\" in name:
        name = Path(name).stem
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
