"""
Directory Auth - Bearer session tokens for users of an external directory.

Hexagonal architecture: the token lifecycle (login, authorize, logout)
depends only on ports; adapters plug in the directory, the JWT codec and
the revocation store.

Usage:
    from directory_auth import SessionClient, Credential
    from directory_auth.adapters import (
        HTTPDirectoryAdapter, JWTTokenCodec, MemoryRevocationStore,
    )

    client = SessionClient(
        directory=HTTPDirectoryAdapter("http://clients-service"),
        codec=JWTTokenCodec(secret="your-secret", lifetime_minutes=60),
        revocations=MemoryRevocationStore(),
    )

    # Login
    outcome = client.login(Credential("admin@x.cl", "password"))

    # Protected request
    result = client.authorize(outcome.token)

    # Logout
    client.logout(result.claims)
"""

__version__ = "0.1.0"

from directory_auth.sdk.client import SessionClient
from directory_auth.config import AuthSettings
from directory_auth.domain.credential import Credential, DirectoryRecord
from directory_auth.domain.token import TokenClaims, TokenState
from directory_auth.domain.outcome import AuthOutcome, TokenVerification
from directory_auth.domain.errors import ConfigurationError, LoginFailure, TokenFailure

__all__ = [
    "SessionClient",
    "AuthSettings",
    "Credential",
    "DirectoryRecord",
    "TokenClaims",
    "TokenState",
    "AuthOutcome",
    "TokenVerification",
    "ConfigurationError",
    "LoginFailure",
    "TokenFailure",
]
