"""Console logging for the command-line tool."""

from __future__ import annotations

import logging
import sys


class PrefixFormatter(logging.Formatter):
    """Prefix every line of a message with ``[product] ``."""

    def __init__(self, prefix: str = "") -> None:
        super().__init__(fmt="%(message)s")
        self.prefix = prefix

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if not self.prefix:
            return message
        return self.prefix + message.replace("\n", "\n" + self.prefix)


def setup_logging(product: str | None = None, verbose: bool = False) -> logging.Logger:
    """Configure the ``cxxtool`` logger to write to stdout.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("cxxtool")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(PrefixFormatter(f"[{product.lower()}] " if product else ""))
    logger.addHandler(handler)
    return logger
