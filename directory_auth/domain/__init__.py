"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from directory_auth.domain.credential import Credential, DirectoryRecord
from directory_auth.domain.token import TokenClaims, TokenState
from directory_auth.domain.errors import LoginFailure, TokenFailure, ConfigurationError
from directory_auth.domain.outcome import AuthOutcome, DirectoryLookup, TokenVerification

__all__ = [
    "Credential",
    "DirectoryRecord",
    "TokenClaims",
    "TokenState",
    "LoginFailure",
    "TokenFailure",
    "ConfigurationError",
    "AuthOutcome",
    "DirectoryLookup",
    "TokenVerification",
]
