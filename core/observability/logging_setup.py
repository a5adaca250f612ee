"""
Quantum Bookstore Logging Setup

Every module logs through ``logging.getLogger(__name__)``. This module
wires the root handler once, prefixing each line with the store name.
"""
from __future__ import annotations
from typing import Optional
import logging
import sys

from patterns.domain_config import BookstoreConfig


class _PrefixFilter(logging.Filter):
    """Inject the store name as ``%(prefix)s`` on every record."""

    def __init__(self, prefix: str):
        super().__init__()
        self.prefix = prefix

    def filter(self, record: logging.LogRecord) -> bool:
        record.prefix = self.prefix
        return True


def setup_logging(
    config: Optional[BookstoreConfig] = None,
    stream=None,
) -> logging.Handler:
    """Configure the root logger from config. Returns the installed handler.

    Calling it again replaces the handler installed by the previous call.
    """
    config = config or BookstoreConfig.default()
    root = logging.getLogger()

    for existing in list(root.handlers):
        if getattr(existing, "_bookstore_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.addFilter(_PrefixFilter(config.store_name))
    handler.setFormatter(logging.Formatter(config.logging.format))
    handler._bookstore_handler = True

    root.addHandler(handler)
    root.setLevel(config.logging.level)
    return handler
