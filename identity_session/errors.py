"""
Errors raised across the identity session package.

Provider acquisition failures are *not* exceptions: they come back as
AcquireResult values from the provider port. These classes cover
programming errors, configuration problems, and transport failures raised
by adapters.
"""

from typing import Optional


class IdentitySessionError(Exception):
    """Base class for identity session errors."""


class ConfigurationError(IdentitySessionError):
    """Invalid authority or environment configuration."""


class NotConfiguredError(IdentitySessionError):
    """SessionManager used before configure() was called."""

    def __init__(self, operation: str):
        super().__init__(f"SessionManager.configure() must be called before {operation}()")
        self.operation = operation


class ProviderError(IdentitySessionError):
    """Identity provider failure outside of token acquisition (accounts, removal)."""


class ProfileSourceError(IdentitySessionError):
    """Remote profile data source could not be reached or returned garbage."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StoreError(IdentitySessionError):
    """Key/value store read or write failed."""
