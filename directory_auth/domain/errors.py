"""
Failure taxonomy - Expected failures returned as values, never raised.
"""

from enum import Enum


class LoginFailure(Enum):
    """Why a credential check against the directory did not succeed."""
    CREDENTIAL_REJECTED = "credential_rejected"      # Directory answered non-2xx
    ACCOUNT_INACTIVE = "account_inactive"            # Inactive record or unreadable body
    DIRECTORY_UNREACHABLE = "directory_unreachable"  # Network error or timeout


class TokenFailure(Enum):
    """Why a bearer token was not accepted."""
    INVALID_SIGNATURE = "invalid_signature"
    EXPIRED = "expired"
    MALFORMED = "malformed"
    REVOKED = "revoked"


# Generic, caller-facing messages. They must not reveal which check failed.
USER_NOT_FOUND = "User not found."
USER_INACTIVE = "User inactive or not found."
INVALID_TOKEN = "Invalid token."
REVOKED_TOKEN = "Token blocked or session closed."

LOGIN_MESSAGES = {
    LoginFailure.CREDENTIAL_REJECTED: USER_NOT_FOUND,
    LoginFailure.DIRECTORY_UNREACHABLE: USER_NOT_FOUND,
    LoginFailure.ACCOUNT_INACTIVE: USER_INACTIVE,
}


class ConfigurationError(ValueError):
    """Fatal setup problem (missing secret, missing directory URL, bad value)."""
