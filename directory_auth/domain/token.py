"""
Token Domain Model - Claims carried by a signed session token.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from datetime import datetime, timezone
from enum import Enum


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenState(Enum):
    """Token lifecycle states. EXPIRED and REVOKED are terminal."""
    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


@dataclass(frozen=True)
class TokenClaims:
    """
    Claims embedded in a session token.

    Domain rules:
    - token_id is unique per issuance (never reused, even for the same subject)
    - expires_at > issued_at for every issued token
    - Timestamps are timezone-aware UTC, whole seconds
    """
    subject: str
    role: str
    token_id: Optional[str] = None
    expires_at: Optional[datetime] = None
    issued_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if the token has expired (no grace period)."""
        if self.expires_at is None:
            return False
        now = now or utc_now()
        return now >= self.expires_at

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "subject": self.subject,
            "role": self.role,
            "token_id": self.token_id,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "issued_at": self.issued_at.isoformat() if self.issued_at else None,
        }

    @classmethod
    def from_payload(
        cls,
        payload: Dict[str, Any],
        default_role: Optional[str] = "0",
    ) -> "TokenClaims":
        """
        Build claims from a decoded JWT payload.

        Args:
            payload: Decoded payload (sub, role, jti, exp, iat)
            default_role: Role used when the claim is absent; None rejects

        Raises:
            ValueError: If a claim is missing or has the wrong type
        """
        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject:
            raise ValueError("sub claim missing")

        role = payload.get("role", default_role)
        if role is None:
            raise ValueError("role claim missing")

        token_id = payload.get("jti")
        if token_id is not None and not isinstance(token_id, str):
            raise ValueError("jti claim must be a string")

        return cls(
            subject=subject,
            role=str(role),
            token_id=token_id or None,
            expires_at=_from_timestamp(payload.get("exp")),
            issued_at=_from_timestamp(payload.get("iat")),
        )


def _from_timestamp(value: Any) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("timestamp claim must be numeric")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"timestamp out of range: {value}") from e
