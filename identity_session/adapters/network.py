"""
Network Adapters - Reachability checks.
"""

import logging
import socket
import time
from typing import Optional

from identity_session.ports.network_port import NetworkPort

logger = logging.getLogger(__name__)


class SocketNetworkAdapter(NetworkPort):
    """
    TCP probe against the identity provider's login host.

    The probe is a blocking connect: a cache miss stalls the calling event
    loop for up to timeout seconds when the host is unreachable. The answer
    is remembered for cache_seconds, so at most one probe runs per window.
    """

    def __init__(
        self,
        host: str = "login.microsoftonline.com",
        port: int = 443,
        timeout: float = 0.3,
        cache_seconds: float = 5.0,
    ):
        """
        Initialize socket probe.

        Args:
            host: Host to connect to
            port: TCP port
            timeout: Connect timeout in seconds
            cache_seconds: How long a probe result is reused
        """
        self._host = host
        self._port = port
        self._timeout = timeout
        self._cache_seconds = cache_seconds
        self._last_checked: Optional[float] = None
        self._last_result = False

    def is_network_available(self) -> bool:
        now = time.monotonic()
        if self._last_checked is not None and now - self._last_checked < self._cache_seconds:
            return self._last_result

        try:
            with socket.create_connection((self._host, self._port), timeout=self._timeout):
                available = True
        except OSError as e:
            logger.debug("Network probe to %s:%s failed: %s", self._host, self._port, e)
            available = False

        self._last_checked = now
        self._last_result = available
        return available


class StaticNetworkAdapter(NetworkPort):
    """Fixed reachability answer (testing only)."""

    def __init__(self, available: bool = True):
        self.available = available
        self.checks = 0

    def is_network_available(self) -> bool:
        self.checks += 1
        return self.available
