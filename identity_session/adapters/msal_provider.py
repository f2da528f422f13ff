"""
MSAL Provider Adapter - Implements ProviderPort with the Microsoft identity platform.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import msal

from identity_session.config import AuthorityConfig
from identity_session.domain.account import AccountRef
from identity_session.domain.session import Session
from identity_session.errors import ProviderError
from identity_session.ports.provider_port import ProviderPort, AcquireResult

logger = logging.getLogger(__name__)

# MSAL error codes, see
# https://learn.microsoft.com/entra/identity-platform/reference-error-codes
CANCEL_ERRORS = {"access_denied", "authentication_canceled", "user_cancelled"}
UI_REQUIRED_ERRORS = {"interaction_required", "login_required", "consent_required", "invalid_grant"}


class MsalProviderAdapter(ProviderPort):
    """
    Public client application backed by MSAL.

    MSAL is blocking, so every call runs in a worker thread.
    Integrated auth goes through the Windows broker (WAM), which signs in
    with the account the user is logged on to the machine with.
    """

    def __init__(
        self,
        client_id: str,
        authority: AuthorityConfig,
        integrated_auth: bool = False,
        app=None,
        token_cache: Optional[msal.TokenCache] = None,
    ):
        """
        Initialize MSAL adapter.

        Args:
            client_id: Application (client) ID
            authority: Authority strategy
            integrated_auth: Enable the broker for integrated auth
            app: Prebuilt msal.PublicClientApplication (built lazily if None)
            token_cache: MSAL token cache (in-memory if None)
        """
        self._client_id = client_id
        self._authority = authority
        self._integrated_auth = integrated_auth
        self._app = app
        self._token_cache = token_cache

    def _get_app(self):
        """Lazy build the MSAL application."""
        if self._app is None:
            kwargs: Dict[str, Any] = {}
            if self._integrated_auth:
                kwargs["enable_broker_on_windows"] = True
            self._app = msal.PublicClientApplication(
                self._client_id,
                authority=self._authority.authority_url,
                token_cache=self._token_cache,
                **kwargs,
            )
        return self._app

    async def enumerate_accounts(self) -> List[AccountRef]:
        """List accounts in the MSAL token cache."""
        app = self._get_app()
        try:
            accounts = await asyncio.to_thread(app.get_accounts)
        except Exception as e:
            raise ProviderError(f"Failed to read accounts: {e}") from e
        return [AccountRef.from_msal(account) for account in accounts or []]

    async def acquire_interactive(
        self,
        scopes: List[str],
        account: Optional[AccountRef] = None,
    ) -> AcquireResult:
        """Acquire a token through the system browser (or broker)."""
        app = self._get_app()
        kwargs: Dict[str, Any] = {}
        if account is not None and account.username:
            kwargs["login_hint"] = account.username
        else:
            kwargs["prompt"] = msal.Prompt.SELECT_ACCOUNT
        if self._integrated_auth:
            kwargs["parent_window_handle"] = msal.PublicClientApplication.CONSOLE_WINDOW_HANDLE

        try:
            result = await asyncio.to_thread(app.acquire_token_interactive, scopes, **kwargs)
        except Exception as e:
            logger.debug("Interactive acquisition raised", exc_info=True)
            return AcquireResult.failed(str(e))
        return self._to_result(result, account)

    async def acquire_silent(self, scopes: List[str], account: AccountRef) -> AcquireResult:
        """Acquire a token from the cache or with the refresh token."""
        app = self._get_app()
        try:
            result = await asyncio.to_thread(
                app.acquire_token_silent_with_error, scopes, account.raw
            )
        except Exception as e:
            logger.debug("Silent acquisition raised", exc_info=True)
            return AcquireResult.failed(str(e))
        return self._to_result(result, account)

    async def acquire_integrated(self, scopes: List[str]) -> AcquireResult:
        """Acquire a token for the operating system account without prompting."""
        if not self._integrated_auth:
            return AcquireResult.failed("integrated auth is not enabled")

        app = self._get_app()
        try:
            result = await asyncio.to_thread(
                app.acquire_token_interactive,
                scopes,
                prompt=msal.Prompt.NONE,
                parent_window_handle=msal.PublicClientApplication.CONSOLE_WINDOW_HANDLE,
            )
        except Exception as e:
            logger.debug("Integrated acquisition raised", exc_info=True)
            return AcquireResult.failed(str(e))
        return self._to_result(result, None)

    async def forget_account(self, account: AccountRef) -> None:
        """Remove the account and its tokens from the MSAL cache."""
        app = self._get_app()
        try:
            await asyncio.to_thread(app.remove_account, account.raw)
        except Exception as e:
            raise ProviderError(f"Failed to remove account: {e}") from e

    def _to_result(
        self,
        result: Optional[Dict[str, Any]],
        account: Optional[AccountRef],
    ) -> AcquireResult:
        # acquire_token_silent_with_error returns None when nothing is cached
        if not result:
            return AcquireResult.ui_required("no cached token")

        if "access_token" in result:
            session = Session.from_msal_result(
                result,
                integrated_auth=self._integrated_auth,
                account=account.raw if account else None,
            )
            return AcquireResult.success(session)

        error = result.get("error", "")
        description = result.get("error_description") or error
        if error in CANCEL_ERRORS:
            return AcquireResult.cancelled(description)
        if error in UI_REQUIRED_ERRORS:
            return AcquireResult.ui_required(description)
        return AcquireResult.failed(description)
