"""
Static Provider Adapter - Scripted identity provider (testing only).
"""

from collections import Counter
from datetime import timedelta
from typing import List, Optional

from identity_session.domain.account import AccountRef
from identity_session.domain.session import Session, utcnow
from identity_session.errors import ProviderError
from identity_session.ports.provider_port import ProviderPort, AcquireResult


class StaticProviderAdapter(ProviderPort):
    """
    In-memory provider that answers with preset results.

    WARNING: Only for testing and demos. No real authentication happens.

    Every call is counted in `calls` so tests can assert which flows ran.
    """

    def __init__(
        self,
        accounts: Optional[List[AccountRef]] = None,
        interactive: Optional[AcquireResult] = None,
        silent: Optional[AcquireResult] = None,
        integrated: Optional[AcquireResult] = None,
        forget_error: Optional[Exception] = None,
    ):
        """
        Initialize static provider.

        Args:
            accounts: Accounts returned by enumeration
            interactive: Result of interactive acquisition
            silent: Result of silent acquisition
            integrated: Result of integrated acquisition
            forget_error: Raised (wrapped in ProviderError) by forget_account
        """
        self.accounts: List[AccountRef] = list(accounts or [])
        self.interactive = interactive or AcquireResult.cancelled()
        self.silent = silent or AcquireResult.ui_required()
        self.integrated = integrated or AcquireResult.ui_required()
        self.forget_error = forget_error

        self.calls: Counter = Counter()
        self.forgotten: List[AccountRef] = []
        self.last_account: Optional[AccountRef] = None

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    async def enumerate_accounts(self) -> List[AccountRef]:
        self.calls["enumerate_accounts"] += 1
        return list(self.accounts)

    async def acquire_interactive(
        self,
        scopes: List[str],
        account: Optional[AccountRef] = None,
    ) -> AcquireResult:
        self.calls["acquire_interactive"] += 1
        self.last_account = account
        return self.interactive

    async def acquire_silent(self, scopes: List[str], account: AccountRef) -> AcquireResult:
        self.calls["acquire_silent"] += 1
        self.last_account = account
        return self.silent

    async def acquire_integrated(self, scopes: List[str]) -> AcquireResult:
        self.calls["acquire_integrated"] += 1
        return self.integrated

    async def forget_account(self, account: AccountRef) -> None:
        self.calls["forget_account"] += 1
        if self.forget_error is not None:
            raise ProviderError(str(self.forget_error))
        self.forgotten.append(account)
        if account in self.accounts:
            self.accounts.remove(account)


def make_session(
    token: str = "access-token",
    username: str = "alice@contoso.com",
    ttl: int = 3600,
    integrated_auth: bool = False,
) -> Session:
    """
    Build a session expiring ttl seconds from now (testing only).

    A negative ttl gives an already expired session.
    """
    return Session(
        access_token=token,
        expires_at=utcnow() + timedelta(seconds=ttl),
        account_id=f"uid.{username}",
        username=username,
        integrated_auth=integrated_auth,
    )
