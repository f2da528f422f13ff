"""
Adapters - Implementations of ports.

Identity provider:
- MsalProviderAdapter: Microsoft identity platform via MSAL
- StaticProviderAdapter: Scripted provider (testing)

Network:
- SocketNetworkAdapter: TCP probe of the login host
- StaticNetworkAdapter: Fixed answer (testing)

Profile cache:
- JsonFileStoreAdapter: Local JSON files
- RedisStoreAdapter: Redis-backed records
- MemoryStoreAdapter: In-memory records (testing)

Profile data:
- GraphProfileSourceAdapter: Microsoft Graph over httpx
- Base64ImageResolver: Photo decoding
"""

# Identity provider
from identity_session.adapters.msal_provider import MsalProviderAdapter
from identity_session.adapters.static_provider import StaticProviderAdapter

# Network
from identity_session.adapters.network import SocketNetworkAdapter, StaticNetworkAdapter

# Profile cache
from identity_session.adapters.json_file_store import JsonFileStoreAdapter
from identity_session.adapters.redis_store import RedisStoreAdapter
from identity_session.adapters.memory_store import MemoryStoreAdapter

# Profile data
from identity_session.adapters.graph_profile_source import GraphProfileSourceAdapter
from identity_session.adapters.image_resolver import Base64ImageResolver

__all__ = [
    # Identity provider
    "MsalProviderAdapter",
    "StaticProviderAdapter",
    # Network
    "SocketNetworkAdapter",
    "StaticNetworkAdapter",
    # Profile cache
    "JsonFileStoreAdapter",
    "RedisStoreAdapter",
    "MemoryStoreAdapter",
    # Profile data
    "GraphProfileSourceAdapter",
    "Base64ImageResolver",
]
