"""
Session Domain Model - The current authentication result.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from datetime import datetime, timedelta, timezone
from enum import Enum

import jwt


class SessionState(Enum):
    """Session lifecycle states."""
    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"
    REFRESHING = "refreshing"  # only held inside a refresh call


class LoginOutcome(Enum):
    """Result of an interactive login attempt."""
    SUCCESS = "success"
    NO_NETWORK = "no_network"
    CANCELLED_BY_USER = "cancelled_by_user"
    UNKNOWN_ERROR = "unknown_error"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Session:
    """
    Session entity - in-memory record of the current authentication state.

    Domain rules:
    - Replaced wholesale on every refresh, never mutated
    - Expiry is decided by a local clock comparison only
    - Never persisted
    """
    access_token: str
    expires_at: datetime
    account_id: str
    username: str = ""
    integrated_auth: bool = False

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if the access token has expired."""
        return (now or utcnow()) >= self.expires_at

    @classmethod
    def from_msal_result(
        cls,
        result: Dict[str, Any],
        integrated_auth: bool = False,
        account: Optional[Dict[str, Any]] = None,
    ) -> "Session":
        """
        Build a Session from an MSAL token response.

        Args:
            result: Token response dict containing 'access_token'
            integrated_auth: Whether the session came from integrated auth
            account: Optional MSAL account dict the token was acquired for

        Returns:
            New session instance
        """
        access_token = result["access_token"]
        claims = result.get("id_token_claims") or {}
        account = account or {}

        account_id = (
            account.get("home_account_id")
            or claims.get("oid")
            or claims.get("sub")
            or ""
        )
        username = (
            account.get("username")
            or claims.get("preferred_username")
            or claims.get("name")
            or ""
        )

        return cls(
            access_token=access_token,
            expires_at=_expiry_from_result(result, access_token),
            account_id=account_id,
            username=username,
            integrated_auth=integrated_auth,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to dict.

        The access token is left out; this is for diagnostics only.
        """
        return {
            "account_id": self.account_id,
            "username": self.username,
            "expires_at": self.expires_at.isoformat(),
            "integrated_auth": self.integrated_auth,
            "is_expired": self.is_expired(),
        }


def _expiry_from_result(result: Dict[str, Any], access_token: str) -> datetime:
    expires_in = result.get("expires_in")
    if expires_in is not None:
        return utcnow() + timedelta(seconds=int(expires_in))

    # Fall back to the token's own exp claim (no signature check, we are
    # the bearer, not the audience).
    try:
        payload = jwt.decode(access_token, options={"verify_signature": False})
        return datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError):
        return utcnow()


class TokenStore:
    """
    Holds the current Session in process memory.

    At most one Session exists at a time. No persistence.
    """

    def __init__(self):
        self._session: Optional[Session] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    def replace(self, session: Session):
        """Replace the current session wholesale."""
        self._session = session

    def clear(self) -> bool:
        """
        Drop the current session.

        Returns:
            True if a session was present
        """
        had_session = self._session is not None
        self._session = None
        return had_session

    def __bool__(self) -> bool:
        return self._session is not None
