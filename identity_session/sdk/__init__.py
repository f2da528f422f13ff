"""
SDK - Session lifecycle and profile orchestration.
"""

from identity_session.sdk.session_manager import SessionManager, SessionObserver
from identity_session.sdk.profile_service import ProfileService, USER_CACHE_KEY
from identity_session.sdk.factory import build_session_manager, build_profile_service

__all__ = [
    "SessionManager",
    "SessionObserver",
    "ProfileService",
    "USER_CACHE_KEY",
    "build_session_manager",
    "build_profile_service",
]
