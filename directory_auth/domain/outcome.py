"""
Outcome Models - Typed results for login, directory lookups and token checks.

Each result holds exactly one of (value, failure).
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from directory_auth.domain.credential import DirectoryRecord
from directory_auth.domain.errors import LoginFailure, TokenFailure, LOGIN_MESSAGES
from directory_auth.domain.token import TokenClaims


def _exactly_one(value: Any, failure: Any, name: str) -> None:
    if (value is None) == (failure is None):
        raise ValueError(f"{name} must hold either a value or a failure")


@dataclass(frozen=True)
class DirectoryLookup:
    """Result of checking a credential against the directory."""
    record: Optional[DirectoryRecord] = None
    failure: Optional[LoginFailure] = None

    def __post_init__(self):
        _exactly_one(self.record, self.failure, "DirectoryLookup")

    @property
    def ok(self) -> bool:
        return self.record is not None

    @classmethod
    def found(cls, record: DirectoryRecord) -> "DirectoryLookup":
        return cls(record=record)

    @classmethod
    def fail(cls, failure: LoginFailure) -> "DirectoryLookup":
        return cls(failure=failure)


@dataclass(frozen=True)
class TokenVerification:
    """Result of verifying or authorizing a bearer token."""
    claims: Optional[TokenClaims] = None
    failure: Optional[TokenFailure] = None

    def __post_init__(self):
        _exactly_one(self.claims, self.failure, "TokenVerification")

    @property
    def ok(self) -> bool:
        return self.claims is not None

    @classmethod
    def valid(cls, claims: TokenClaims) -> "TokenVerification":
        return cls(claims=claims)

    @classmethod
    def fail(cls, failure: TokenFailure) -> "TokenVerification":
        return cls(failure=failure)


@dataclass(frozen=True)
class AuthOutcome:
    """
    Result of a login attempt.

    Success carries the signed token string; failure carries the internal
    reason plus a generic message safe to show to the caller.
    """
    token: Optional[str] = None
    failure: Optional[LoginFailure] = None

    def __post_init__(self):
        _exactly_one(self.token, self.failure, "AuthOutcome")

    @property
    def succeeded(self) -> bool:
        return self.token is not None

    @property
    def reason(self) -> Optional[str]:
        """Generic, caller-facing failure message."""
        if self.failure is None:
            return None
        return LOGIN_MESSAGES[self.failure]

    @classmethod
    def success(cls, token: str) -> "AuthOutcome":
        return cls(token=token)

    @classmethod
    def fail(cls, failure: LoginFailure) -> "AuthOutcome":
        return cls(failure=failure)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (the internal failure value is not exposed)."""
        return {
            "succeeded": self.succeeded,
            "token": self.token,
            "error": self.reason,
        }
