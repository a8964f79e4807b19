"""
Process-wide logging setup.

A single idempotent call installs one stream handler on the root logger with a
uniform format; the level comes from ``settings.LOG_LEVEL``.
"""
from __future__ import annotations

import logging

from lectern.core.config import settings

DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_INITIALIZED = False


def setup_logging(force: bool = False) -> None:
    global _INITIALIZED
    if _INITIALIZED and not force:
        return

    root = logging.getLogger()
    if force:
        for h in list(root.handlers):
            root.removeHandler(h)
    if not root.handlers:
        root.addHandler(logging.StreamHandler())
    for h in root.handlers:
        h.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    _INITIALIZED = True


__all__ = ["setup_logging"]
