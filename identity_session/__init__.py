"""
Identity Session - Token lifecycle and user profile for desktop clients.

Hexagonal architecture: the session manager and profile service only talk
to ports; MSAL, Microsoft Graph and local storage live in adapters.

Usage:
    from identity_session import IdentityConfig
    from identity_session.sdk import build_session_manager, build_profile_service

    config = IdentityConfig.from_env()
    sessions = await build_session_manager(config)
    profiles = build_profile_service(config, sessions)

    # Sign in
    outcome = await sessions.login()

    # Show who is signed in
    profile = await profiles.get_profile()
"""

__version__ = "0.1.0"

from identity_session.config import AuthorityConfig, AuthorityMode, IdentityConfig
from identity_session.domain.session import Session, SessionState, LoginOutcome
from identity_session.domain.profile import UserProfile, ProfileImage
from identity_session.sdk.session_manager import SessionManager, SessionObserver
from identity_session.sdk.profile_service import ProfileService

__all__ = [
    "AuthorityConfig",
    "AuthorityMode",
    "IdentityConfig",
    "Session",
    "SessionState",
    "LoginOutcome",
    "UserProfile",
    "ProfileImage",
    "SessionManager",
    "SessionObserver",
    "ProfileService",
]
