"""
Network Port - Reachability check.

Implementations:
- SocketNetworkAdapter: TCP probe against a well-known host
- StaticNetworkAdapter: Fixed answer (testing only)
"""

from abc import ABC, abstractmethod


class NetworkPort(ABC):
    """Port: Tell whether the network is reachable."""

    @abstractmethod
    def is_network_available(self) -> bool:
        """
        Check reachability. Synchronous, no side effects on session state.

        Returns:
            True if the identity provider can plausibly be reached
        """
        pass
