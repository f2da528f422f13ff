"""
Configuration - Authority selection and environment loading.

Reads IDENTITY_* environment variables:

    IDENTITY_CLIENT_ID         Application (client) ID, required
    IDENTITY_AUTHORITY_MODE    consumer_and_org | multi_org | single_org
    IDENTITY_TENANT            Tenant ID or domain (single_org only)
    IDENTITY_INTEGRATED_AUTH   Use integrated auth for silent refresh
    IDENTITY_CACHE_PATH        Folder for the cached profile
    IDENTITY_GRAPH_URL         Microsoft Graph base URL
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from identity_session.errors import ConfigurationError


AUTHORITY_HOST = "https://login.microsoftonline.com"
GRAPH_URL = "https://graph.microsoft.com/v1.0"


class AuthorityMode(Enum):
    """Which accounts may sign in."""
    CONSUMER_AND_ORG = "consumer_and_org"  # work/school and personal accounts
    MULTI_ORG = "multi_org"                # any work/school tenant
    SINGLE_ORG = "single_org"              # one tenant


@dataclass(frozen=True)
class AuthorityConfig:
    """
    Authority strategy - one value per configuration.

    Build with consumer_and_org(), multi_org() or single_org(tenant).
    """
    mode: AuthorityMode
    tenant: Optional[str] = None

    def __post_init__(self):
        if self.mode == AuthorityMode.SINGLE_ORG and not self.tenant:
            raise ConfigurationError("single_org authority requires a tenant")
        if self.mode != AuthorityMode.SINGLE_ORG and self.tenant:
            raise ConfigurationError(f"{self.mode.value} authority does not take a tenant")

    @classmethod
    def consumer_and_org(cls) -> "AuthorityConfig":
        return cls(AuthorityMode.CONSUMER_AND_ORG)

    @classmethod
    def multi_org(cls) -> "AuthorityConfig":
        return cls(AuthorityMode.MULTI_ORG)

    @classmethod
    def single_org(cls, tenant: str) -> "AuthorityConfig":
        return cls(AuthorityMode.SINGLE_ORG, tenant)

    @property
    def supports_integrated_auth(self) -> bool:
        """Personal accounts cannot use integrated auth."""
        return self.mode != AuthorityMode.CONSUMER_AND_ORG

    @property
    def authority_url(self) -> str:
        segment = {
            AuthorityMode.CONSUMER_AND_ORG: "common",
            AuthorityMode.MULTI_ORG: "organizations",
        }.get(self.mode, self.tenant)
        return f"{AUTHORITY_HOST}/{segment}"


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _parse_bool(key: str, value: Optional[str]) -> bool:
    if value is None:
        return False
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got {value!r}")


@dataclass
class IdentityConfig:
    """
    Application identity settings.

    Validated once at startup by from_env().
    """
    client_id: str
    authority: AuthorityConfig = field(default_factory=AuthorityConfig.consumer_and_org)
    integrated_auth: bool = False
    scopes: List[str] = field(default_factory=lambda: ["User.Read", "People.Read"])
    cache_path: str = os.path.join(os.path.expanduser("~"), ".identity_session")
    graph_url: str = GRAPH_URL

    @classmethod
    def from_env(
        cls,
        prefix: str = "IDENTITY_",
        environ: Optional[Dict[str, str]] = None,
    ) -> "IdentityConfig":
        """
        Load configuration from environment variables.

        Args:
            prefix: Variable name prefix (default IDENTITY_)
            environ: Mapping to read instead of os.environ

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: On missing or invalid values
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: Optional[str] = None) -> Optional[str]:
            return env.get(f"{prefix}{name}", default)

        client_id = get("CLIENT_ID")
        if not client_id:
            raise ConfigurationError(f"{prefix}CLIENT_ID is required")

        raw_mode = (get("AUTHORITY_MODE") or AuthorityMode.CONSUMER_AND_ORG.value).strip().lower()
        try:
            mode = AuthorityMode(raw_mode)
        except ValueError:
            choices = ", ".join(m.value for m in AuthorityMode)
            raise ConfigurationError(f"{prefix}AUTHORITY_MODE must be one of {choices}, got {raw_mode!r}")

        authority = AuthorityConfig(mode, get("TENANT") if mode == AuthorityMode.SINGLE_ORG else None)
        integrated = _parse_bool(f"{prefix}INTEGRATED_AUTH", get("INTEGRATED_AUTH"))

        config = cls(client_id=client_id, authority=authority, integrated_auth=integrated)
        if get("CACHE_PATH"):
            config.cache_path = get("CACHE_PATH")
        if get("GRAPH_URL"):
            config.graph_url = get("GRAPH_URL").rstrip("/")
        return config
