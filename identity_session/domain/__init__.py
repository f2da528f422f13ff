"""
Domain Models - Pure entities.

No infrastructure dependencies. Domain logic only.
"""

from identity_session.domain.session import Session, SessionState, LoginOutcome, TokenStore
from identity_session.domain.account import AccountRef
from identity_session.domain.profile import UserRecord, UserProfile, ProfileImage, DEFAULT_IMAGE_ASSET

__all__ = [
    "Session",
    "SessionState",
    "LoginOutcome",
    "TokenStore",
    "AccountRef",
    "UserRecord",
    "UserProfile",
    "ProfileImage",
    "DEFAULT_IMAGE_ASSET",
]
