"""
Provider Port - Interface to the identity provider.

Implementations:
- MsalProviderAdapter: Microsoft identity platform via MSAL
- StaticProviderAdapter: Scripted in-memory provider (testing only)

Token acquisition never raises for provider-side failures. The outcome is
returned as an AcquireResult so the session manager only has to look at
two cases: cancellation and UI-required.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from identity_session.domain.account import AccountRef
from identity_session.domain.session import Session


DEFAULT_SCOPES = ["User.Read"]


class AcquireStatus(Enum):
    """Outcome of a token acquisition flow."""
    SUCCESS = "success"
    CANCELLED = "cancelled"      # interactive prompt dismissed by the user
    UI_REQUIRED = "ui_required"  # silent flow needs user interaction
    ERROR = "error"


@dataclass(frozen=True)
class AcquireResult:
    """Result of a token acquisition flow."""
    status: AcquireStatus
    session: Optional[Session] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == AcquireStatus.SUCCESS and self.session is not None

    @classmethod
    def success(cls, session: Session) -> "AcquireResult":
        return cls(status=AcquireStatus.SUCCESS, session=session)

    @classmethod
    def cancelled(cls, error: Optional[str] = None) -> "AcquireResult":
        return cls(status=AcquireStatus.CANCELLED, error=error)

    @classmethod
    def ui_required(cls, error: Optional[str] = None) -> "AcquireResult":
        return cls(status=AcquireStatus.UI_REQUIRED, error=error)

    @classmethod
    def failed(cls, error: Optional[str] = None) -> "AcquireResult":
        return cls(status=AcquireStatus.ERROR, error=error)


class ProviderPort(ABC):
    """Port: Acquire and forget tokens with the identity provider."""

    @abstractmethod
    async def enumerate_accounts(self) -> List[AccountRef]:
        """
        List accounts known to the provider's token cache.

        Returns:
            Accounts, possibly empty

        Raises:
            ProviderError: If the cache cannot be read
        """
        pass

    @abstractmethod
    async def acquire_interactive(
        self,
        scopes: List[str],
        account: Optional[AccountRef] = None,
    ) -> AcquireResult:
        """
        Acquire a token with a user-facing prompt.

        Args:
            scopes: Requested scopes
            account: Account to pre-select, if any

        Returns:
            SUCCESS, CANCELLED or ERROR result
        """
        pass

    @abstractmethod
    async def acquire_silent(self, scopes: List[str], account: AccountRef) -> AcquireResult:
        """
        Acquire a token for a known account without prompting.

        Returns:
            SUCCESS, UI_REQUIRED or ERROR result
        """
        pass

    @abstractmethod
    async def acquire_integrated(self, scopes: List[str]) -> AcquireResult:
        """
        Acquire a token from the operating system's signed-in credential.

        Returns:
            SUCCESS, UI_REQUIRED or ERROR result
        """
        pass

    @abstractmethod
    async def forget_account(self, account: AccountRef) -> None:
        """
        Remove an account and its tokens from the provider cache.

        Raises:
            ProviderError: If removal fails
        """
        pass
