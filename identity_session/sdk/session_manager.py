"""
Session Manager - Token lifecycle for a single signed-in account.

Owns the in-memory TokenStore and drives it through interactive login,
silent refresh, expiry detection and logout. Dependents learn about
transitions through registered SessionObserver instances.
"""

import asyncio
import inspect
import logging
from typing import Callable, List, Optional

from identity_session.config import AuthorityConfig
from identity_session.domain.session import Session, SessionState, LoginOutcome, TokenStore
from identity_session.errors import NotConfiguredError
from identity_session.ports.network_port import NetworkPort
from identity_session.ports.provider_port import ProviderPort, AcquireStatus, DEFAULT_SCOPES

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[AuthorityConfig, bool], ProviderPort]


class SessionObserver:
    """
    Receives session transitions. Override the hooks you care about.

    Hooks may be plain methods or coroutines; both run in place, before
    the transition returns to its caller.
    """

    def on_logged_in(self):
        pass

    def on_logged_out(self):
        pass


class SessionManager:
    """
    Session state machine: LOGGED_OUT <-> LOGGED_IN.

    REFRESHING is held only while a silent refresh is in flight.
    Every read-modify-write of the session is serialized by one lock,
    and observers are notified after the lock is released so they may
    call back into the manager.

    Example:
        manager = SessionManager(
            provider_factory=lambda authority, integrated: MsalProviderAdapter(
                client_id, authority, integrated),
            network=SocketNetworkAdapter(),
        )
        await manager.configure(AuthorityConfig.multi_org(), integrated_auth=True)

        if await manager.login() == LoginOutcome.SUCCESS:
            token = await manager.get_access_token()
    """

    def __init__(
        self,
        provider_factory: ProviderFactory,
        network: NetworkPort,
        scopes: Optional[List[str]] = None,
    ):
        """
        Initialize session manager.

        Args:
            provider_factory: Builds a provider for (authority, integrated_auth)
            network: Reachability check gating every provider call
            scopes: Scopes requested on every acquisition (default User.Read)
        """
        self._provider_factory = provider_factory
        self._network = network
        self._scopes = list(scopes or DEFAULT_SCOPES)

        self._provider: Optional[ProviderPort] = None
        self._authority: Optional[AuthorityConfig] = None
        self._integrated_auth = False

        self._tokens = TokenStore()
        self._observers: List[SessionObserver] = []
        self._lock = asyncio.Lock()
        self._refreshing = False

    # Configuration

    async def configure(self, authority: AuthorityConfig, integrated_auth: bool = False):
        """
        Bind the manager to an authority.

        Calling again replaces the provider and logs out any current session.

        Args:
            authority: Authority strategy
            integrated_auth: Use integrated auth instead of the cached
                account for silent refresh
        """
        if integrated_auth and not authority.supports_integrated_auth:
            logger.warning(
                "Integrated auth is not available for %s authority, disabling it",
                authority.mode.value,
            )
            integrated_auth = False

        provider = self._provider_factory(authority, integrated_auth)

        async with self._lock:
            self._provider = provider
            self._authority = authority
            self._integrated_auth = integrated_auth
            had_session = self._tokens.clear()

        logger.info(
            "Configured authority %s (integrated auth %s)",
            authority.authority_url,
            "on" if integrated_auth else "off",
        )
        if had_session:
            await self._notify("on_logged_out")

    @property
    def authority(self) -> Optional[AuthorityConfig]:
        return self._authority

    @property
    def integrated_auth(self) -> bool:
        return self._integrated_auth

    # Observers

    def subscribe(self, observer: SessionObserver):
        """Register an observer for LoggedIn/LoggedOut."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: SessionObserver):
        """Remove a registered observer."""
        if observer in self._observers:
            self._observers.remove(observer)

    # State

    @property
    def state(self) -> SessionState:
        if self._refreshing:
            return SessionState.REFRESHING
        return SessionState.LOGGED_IN if self._tokens else SessionState.LOGGED_OUT

    @property
    def current_session(self) -> Optional[Session]:
        return self._tokens.session

    def is_logged_in(self) -> bool:
        """True if a session is present. No I/O."""
        return bool(self._tokens)

    def get_account_display_name(self) -> str:
        """Username of the current session, "" when logged out. No I/O."""
        session = self._tokens.session
        return session.username if session else ""

    # Transitions

    async def login(self) -> LoginOutcome:
        """
        Interactive login.

        Returns:
            SUCCESS, NO_NETWORK, CANCELLED_BY_USER or UNKNOWN_ERROR
        """
        provider = self._require_provider("login")

        # An interactive prompt would hang without connectivity
        if not self._network.is_network_available():
            logger.info("Login skipped: network unavailable")
            return LoginOutcome.NO_NETWORK

        async with self._lock:
            try:
                accounts = await provider.enumerate_accounts()
                account = accounts[0] if accounts else None
                result = await provider.acquire_interactive(self._scopes, account)
            except Exception:
                logger.exception("Interactive login failed")
                return LoginOutcome.UNKNOWN_ERROR

            if result.status == AcquireStatus.CANCELLED:
                logger.info("Login cancelled by user")
                return LoginOutcome.CANCELLED_BY_USER
            if not result.ok:
                logger.warning("Interactive login failed: %s", result.error or result.status.value)
                return LoginOutcome.UNKNOWN_ERROR

            self._tokens.replace(result.session)

        logger.info("Logged in as %s", result.session.username or result.session.account_id)
        await self._notify("on_logged_in")
        return LoginOutcome.SUCCESS

    async def logout(self):
        """
        Log out. Best effort at the provider, unconditional locally.

        Always clears the session and emits LoggedOut.
        """
        async with self._lock:
            provider = self._provider
            if provider is not None:
                try:
                    accounts = await provider.enumerate_accounts()
                    if accounts:
                        await provider.forget_account(accounts[0])
                except Exception as e:
                    logger.warning("Could not remove account from provider cache: %s", e)

            self._tokens.clear()

        logger.info("Logged out")
        await self._notify("on_logged_out")

    async def get_access_token(self) -> str:
        """
        Return a valid access token, refreshing silently when expired.

        Returns:
            Access token, or "" if the session could not be kept alive
            (in which case the manager is now logged out and LoggedOut
            has been emitted).
        """
        provider = self._require_provider("get_access_token")

        async with self._lock:
            session = self._tokens.session
            if session is not None and not session.is_expired():
                return session.access_token

            if await self._silent_login(provider):
                return self._tokens.session.access_token

            # Unrefreshable: indistinguishable from logout for every caller
            self._tokens.clear()

        logger.info("No session could be refreshed, logging out")
        await self._notify("on_logged_out")
        return ""

    async def silent_login(self) -> bool:
        """
        Acquire a token without prompting.

        Does not emit LoggedIn; a silent refresh is not a new login.

        Returns:
            True if a new session was stored
        """
        provider = self._require_provider("silent_login")
        async with self._lock:
            return await self._silent_login(provider)

    async def _silent_login(self, provider: ProviderPort) -> bool:
        if not self._network.is_network_available():
            logger.debug("Silent login skipped: network unavailable")
            return False

        self._refreshing = True
        try:
            if self._integrated_auth:
                result = await provider.acquire_integrated(self._scopes)
            else:
                accounts = await provider.enumerate_accounts()
                if not accounts:
                    logger.debug("Silent login skipped: no cached account")
                    return False
                result = await provider.acquire_silent(self._scopes, accounts[0])
        except Exception:
            logger.warning("Silent login failed", exc_info=True)
            return False
        finally:
            self._refreshing = False

        if result.status == AcquireStatus.UI_REQUIRED:
            logger.info("Silent login needs user interaction")
            return False
        if not result.ok:
            logger.warning("Silent login failed: %s", result.error or result.status.value)
            return False

        self._tokens.replace(result.session)
        logger.debug("Session refreshed silently")
        return True

    # Internals

    def _require_provider(self, operation: str) -> ProviderPort:
        if self._provider is None:
            raise NotConfiguredError(operation)
        return self._provider

    async def _notify(self, hook: str):
        for observer in list(self._observers):
            try:
                outcome = getattr(observer, hook)()
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception:
                logger.exception("Session observer %r failed in %s", observer, hook)
