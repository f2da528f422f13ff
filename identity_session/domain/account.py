"""
Account Domain Model - Opaque identity provider account handle.
"""

from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass(frozen=True)
class AccountRef:
    """
    Account handle returned by account enumeration.

    Only used to target acquisition or removal within a single operation.
    Never cached by the session manager.
    """
    home_account_id: str
    username: str = ""
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def from_msal(cls, account: Dict[str, Any]) -> "AccountRef":
        """Wrap an MSAL account dict."""
        return cls(
            home_account_id=account.get("home_account_id", ""),
            username=account.get("username", ""),
            raw=account,
        )
