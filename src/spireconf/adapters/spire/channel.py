"""Channel construction for the registry connection."""

from __future__ import annotations

from logging import getLogger

import grpc

log = getLogger(__name__)


def open_channel(endpoint: str) -> grpc.Channel:
    """Open an insecure channel to ``endpoint``.

    Unix-domain socket targets (``unix:/path/to/api.sock``) are the usual way to
    reach a co-located SPIRE server, which authenticates callers by socket
    permissions rather than TLS.
    """

    log.debug("Opening registry channel to %s", endpoint)
    return grpc.insecure_channel(endpoint)
