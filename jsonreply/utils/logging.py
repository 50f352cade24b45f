"""Logging setup shared by the CLI and the demo server."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def configure_root(level: int = logging.INFO) -> None:
    """(Re)configure the root logger, replacing any handlers already installed."""

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


__all__ = ["LOG_FORMAT", "configure_root"]
