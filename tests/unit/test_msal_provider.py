"""
Unit tests for MSAL Provider Adapter (MSAL application replaced by a fake).
"""

import pytest
from identity_session.adapters.msal_provider import MsalProviderAdapter
from identity_session.config import AuthorityConfig
from identity_session.domain.account import AccountRef
from identity_session.errors import ProviderError
from identity_session.ports.provider_port import AcquireStatus


ACCOUNT = {"home_account_id": "uid.tid", "username": "alice@contoso.com", "environment": "login.microsoftonline.com"}
TOKEN_RESPONSE = {
    "access_token": "msal-token",
    "expires_in": 3600,
    "id_token_claims": {"oid": "uid", "preferred_username": "alice@contoso.com"},
}


class FakeMsalApp:
    """Stands in for msal.PublicClientApplication."""

    def __init__(self, accounts=None, interactive=None, silent=None, raise_on=None):
        self.accounts = accounts if accounts is not None else [ACCOUNT]
        self.interactive = interactive
        self.silent = silent
        self.raise_on = raise_on or set()
        self.calls = []
        self.removed = []

    def _maybe_raise(self, name):
        if name in self.raise_on:
            raise RuntimeError(f"{name} exploded")

    def get_accounts(self, username=None):
        self._maybe_raise("get_accounts")
        return self.accounts

    def acquire_token_interactive(self, scopes, **kwargs):
        self._maybe_raise("acquire_token_interactive")
        self.calls.append(("interactive", scopes, kwargs))
        return self.interactive

    def acquire_token_silent_with_error(self, scopes, account):
        self._maybe_raise("acquire_token_silent_with_error")
        self.calls.append(("silent", scopes, account))
        return self.silent

    def remove_account(self, account):
        self._maybe_raise("remove_account")
        self.removed.append(account)


def adapter_for(app, integrated_auth=False):
    return MsalProviderAdapter(
        "client-id",
        AuthorityConfig.multi_org(),
        integrated_auth=integrated_auth,
        app=app,
    )


async def test_enumerate_accounts():
    """Test MSAL accounts are wrapped in AccountRef."""
    accounts = await adapter_for(FakeMsalApp()).enumerate_accounts()

    assert accounts == [AccountRef(home_account_id="uid.tid", username="alice@contoso.com")]
    assert accounts[0].raw is ACCOUNT


async def test_enumerate_accounts_failure():
    """Test cache read failures raise ProviderError."""
    adapter = adapter_for(FakeMsalApp(raise_on={"get_accounts"}))

    with pytest.raises(ProviderError):
        await adapter.enumerate_accounts()


async def test_interactive_success_with_account():
    """Test interactive acquisition hints the cached account."""
    app = FakeMsalApp(interactive=TOKEN_RESPONSE)
    adapter = adapter_for(app)
    account = AccountRef.from_msal(ACCOUNT)

    result = await adapter.acquire_interactive(["User.Read"], account)

    assert result.ok
    assert result.session.access_token == "msal-token"
    assert result.session.account_id == "uid.tid"
    assert app.calls[0][2]["login_hint"] == "alice@contoso.com"


async def test_interactive_without_account_prompts_selection():
    """Test no account means an account picker."""
    app = FakeMsalApp(interactive=TOKEN_RESPONSE)

    await adapter_for(app).acquire_interactive(["User.Read"])

    assert app.calls[0][2]["prompt"] == "select_account"
    assert "login_hint" not in app.calls[0][2]


@pytest.mark.parametrize("error", ["access_denied", "authentication_canceled"])
async def test_interactive_cancelled(error):
    """Test cancellation errors map to CANCELLED."""
    app = FakeMsalApp(interactive={"error": error, "error_description": "User cancelled"})

    result = await adapter_for(app).acquire_interactive(["User.Read"])

    assert result.status == AcquireStatus.CANCELLED


async def test_interactive_other_error():
    """Test other errors map to ERROR."""
    app = FakeMsalApp(interactive={"error": "invalid_client", "error_description": "AADSTS7000218"})

    result = await adapter_for(app).acquire_interactive(["User.Read"])

    assert result.status == AcquireStatus.ERROR
    assert result.error == "AADSTS7000218"


async def test_interactive_exception_is_error_result():
    """Test exceptions from MSAL come back as ERROR results."""
    app = FakeMsalApp(raise_on={"acquire_token_interactive"})

    result = await adapter_for(app).acquire_interactive(["User.Read"])

    assert result.status == AcquireStatus.ERROR
    assert "exploded" in result.error


async def test_silent_success():
    """Test silent acquisition with the raw MSAL account."""
    app = FakeMsalApp(silent=TOKEN_RESPONSE)

    result = await adapter_for(app).acquire_silent(["User.Read"], AccountRef.from_msal(ACCOUNT))

    assert result.ok
    assert result.session.username == "alice@contoso.com"
    assert app.calls == [("silent", ["User.Read"], ACCOUNT)]


async def test_silent_nothing_cached_is_ui_required():
    """Test None from MSAL means UI required."""
    app = FakeMsalApp(silent=None)

    result = await adapter_for(app).acquire_silent(["User.Read"], AccountRef.from_msal(ACCOUNT))

    assert result.status == AcquireStatus.UI_REQUIRED


@pytest.mark.parametrize("error", ["interaction_required", "invalid_grant"])
async def test_silent_ui_required(error):
    """Test interaction errors map to UI_REQUIRED."""
    app = FakeMsalApp(silent={"error": error})

    result = await adapter_for(app).acquire_silent(["User.Read"], AccountRef.from_msal(ACCOUNT))

    assert result.status == AcquireStatus.UI_REQUIRED


async def test_integrated_disabled():
    """Test integrated acquisition needs integrated auth enabled."""
    app = FakeMsalApp(interactive=TOKEN_RESPONSE)

    result = await adapter_for(app).acquire_integrated(["User.Read"])

    assert result.status == AcquireStatus.ERROR
    assert app.calls == []


async def test_integrated_success():
    """Test integrated acquisition never prompts."""
    app = FakeMsalApp(interactive=TOKEN_RESPONSE)

    result = await adapter_for(app, integrated_auth=True).acquire_integrated(["User.Read"])

    assert result.ok
    assert result.session.integrated_auth is True
    assert app.calls[0][2]["prompt"] == "none"


async def test_forget_account():
    """Test account removal passes the raw MSAL account."""
    app = FakeMsalApp()

    await adapter_for(app).forget_account(AccountRef.from_msal(ACCOUNT))

    assert app.removed == [ACCOUNT]


async def test_forget_account_failure():
    """Test removal failure raises ProviderError."""
    app = FakeMsalApp(raise_on={"remove_account"})

    with pytest.raises(ProviderError):
        await adapter_for(app).forget_account(AccountRef.from_msal(ACCOUNT))
