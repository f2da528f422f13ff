"""
Ports - Interfaces for the identity provider, network, storage and profile data.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from identity_session.ports.provider_port import (
    ProviderPort,
    AcquireResult,
    AcquireStatus,
    DEFAULT_SCOPES,
)
from identity_session.ports.network_port import NetworkPort
from identity_session.ports.store_port import KeyValueStorePort
from identity_session.ports.profile_source_port import ProfileSourcePort
from identity_session.ports.image_port import ImageResolverPort

__all__ = [
    # Identity provider
    "ProviderPort",
    "AcquireResult",
    "AcquireStatus",
    "DEFAULT_SCOPES",
    "NetworkPort",
    # Profile data
    "KeyValueStorePort",
    "ProfileSourcePort",
    "ImageResolverPort",
]
