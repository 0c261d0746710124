"""Logging setup for the spireconf command line."""

from __future__ import annotations

import logging
import sys
from typing import Final

LOG_FORMAT: Final[str] = "%(levelname)-7s %(name)s: %(message)s"
GRPC_LOGGER: Final[str] = "grpc"


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Route log records to stderr, leaving stdout to the JSON state output.

    ``verbose`` lowers the threshold to DEBUG and lets gRPC's channel logging
    through; otherwise the ``grpc`` logger is held at WARNING.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=force,
    )
    logging.getLogger(GRPC_LOGGER).setLevel(logging.NOTSET if verbose else logging.WARNING)
