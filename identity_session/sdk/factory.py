"""
Factory - Wire the default adapters from an IdentityConfig.

Build one SessionManager at process start and hand it to every consumer.
"""

from typing import Optional

from identity_session.adapters.graph_profile_source import GraphProfileSourceAdapter
from identity_session.adapters.image_resolver import Base64ImageResolver
from identity_session.adapters.json_file_store import JsonFileStoreAdapter
from identity_session.adapters.msal_provider import MsalProviderAdapter
from identity_session.adapters.network import SocketNetworkAdapter
from identity_session.config import AuthorityConfig, IdentityConfig
from identity_session.ports.network_port import NetworkPort
from identity_session.ports.store_port import KeyValueStorePort
from identity_session.sdk.profile_service import ProfileService
from identity_session.sdk.session_manager import SessionManager


async def build_session_manager(
    config: IdentityConfig,
    network: Optional[NetworkPort] = None,
) -> SessionManager:
    """
    Create and configure a SessionManager backed by MSAL.

    Args:
        config: Identity configuration
        network: Reachability check (TCP probe if None)

    Returns:
        Configured session manager
    """
    def provider_factory(authority: AuthorityConfig, integrated_auth: bool):
        return MsalProviderAdapter(config.client_id, authority, integrated_auth)

    manager = SessionManager(
        provider_factory=provider_factory,
        network=network or SocketNetworkAdapter(),
        scopes=config.scopes,
    )
    await manager.configure(config.authority, config.integrated_auth)
    return manager


def build_profile_service(
    config: IdentityConfig,
    sessions: SessionManager,
    store: Optional[KeyValueStorePort] = None,
) -> ProfileService:
    """
    Create a ProfileService backed by Microsoft Graph.

    Args:
        config: Identity configuration
        sessions: Shared session manager
        store: Profile cache (JSON files under config.cache_path if None)

    Returns:
        Profile service subscribed to the session manager
    """
    return ProfileService(
        sessions=sessions,
        source=GraphProfileSourceAdapter(base_url=config.graph_url),
        store=store or JsonFileStoreAdapter(config.cache_path),
        images=Base64ImageResolver(),
    )
