"""
Unit tests for Session domain model and TokenStore.
"""

import pytest
import jwt
from datetime import datetime, timedelta, timezone
from identity_session.domain.session import Session, TokenStore, utcnow
from identity_session.adapters.static_provider import make_session


def test_session_not_expired():
    """Test a session with future expiry is valid."""
    session = make_session(ttl=3600)

    assert not session.is_expired()


def test_session_expired():
    """Test a session with past expiry is expired."""
    session = make_session(ttl=-1)

    assert session.is_expired()


def test_session_expiry_boundary():
    """Test expiry is reached exactly at expires_at."""
    session = make_session(ttl=60)

    assert session.is_expired(now=session.expires_at)
    assert not session.is_expired(now=session.expires_at - timedelta(seconds=1))


def test_from_msal_result_uses_expires_in():
    """Test expiry computed from expires_in."""
    before = utcnow()
    session = Session.from_msal_result(
        {
            "access_token": "abc",
            "expires_in": 3599,
            "id_token_claims": {"oid": "oid-1", "preferred_username": "alice@contoso.com"},
        }
    )

    assert session.access_token == "abc"
    assert session.account_id == "oid-1"
    assert session.username == "alice@contoso.com"
    assert session.integrated_auth is False
    assert before + timedelta(seconds=3598) <= session.expires_at
    assert session.expires_at <= utcnow() + timedelta(seconds=3599)


def test_from_msal_result_prefers_account():
    """Test the MSAL account dict wins over id token claims."""
    session = Session.from_msal_result(
        {"access_token": "abc", "expires_in": 60, "id_token_claims": {"oid": "x", "preferred_username": "x"}},
        integrated_auth=True,
        account={"home_account_id": "uid.tid", "username": "bob@contoso.com"},
    )

    assert session.account_id == "uid.tid"
    assert session.username == "bob@contoso.com"
    assert session.integrated_auth is True


def test_from_msal_result_reads_exp_claim():
    """Test expiry falls back to the token's exp claim."""
    exp = datetime(2040, 1, 1, tzinfo=timezone.utc)
    token = jwt.encode({"exp": int(exp.timestamp())}, "secret", algorithm="HS256")

    session = Session.from_msal_result({"access_token": token})

    assert session.expires_at == exp


def test_from_msal_result_opaque_token_is_expired():
    """Test an opaque token without expires_in is treated as expired."""
    session = Session.from_msal_result({"access_token": "opaque"})

    assert session.is_expired()


def test_session_to_dict_hides_token():
    """Test serialization never includes the access token."""
    session = make_session(token="secret-token")

    data = session.to_dict()
    assert "access_token" not in data
    assert "secret-token" not in str(data)
    assert data["username"] == "alice@contoso.com"
    assert data["is_expired"] is False


def test_token_store_replace_and_clear():
    """Test TokenStore holds at most one session."""
    store = TokenStore()
    assert not store
    assert store.clear() is False

    first = make_session(token="one")
    second = make_session(token="two")
    store.replace(first)
    store.replace(second)

    assert store.session is second
    assert store.clear() is True
    assert store.session is None
