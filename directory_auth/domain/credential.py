"""
Credential Domain Models - Login input and the directory's answer.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Union
from uuid import UUID


@dataclass(frozen=True)
class Credential:
    """
    Credential entity - an identifier/password pair submitted at login.

    Domain rules:
    - identifier is an email when it contains "@", a username otherwise
    - secret is never returned in repr() or to_dict() (security)
    - Never persisted
    """
    identifier: str
    secret: str = field(repr=False)

    @property
    def uses_email(self) -> bool:
        """True if the identifier should be looked up as an email."""
        return "@" in self.identifier

    def to_payload(self) -> Dict[str, str]:
        """
        Build the outbound directory payload.

        WARNING: Contains the password. Never log this.
        """
        key = "email" if self.uses_email else "username"
        return {key: self.identifier, "password": self.secret}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (never includes the secret)."""
        return {
            "identifier": self.identifier,
            "uses_email": self.uses_email,
        }


@dataclass(frozen=True)
class DirectoryRecord:
    """
    DirectoryRecord entity - a user as reported by the external directory.

    Owned by the directory; read-only here.
    """
    user_id: UUID
    role: Union[int, str]
    is_active: bool
    email: Optional[str] = None
    username: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "id": str(self.user_id),
            "email": self.email,
            "username": self.username,
            "role": self.role,
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Optional["DirectoryRecord"]:
        """
        Parse a directory response body.

        The directory serializes camelCase ("isActive"); "active" and
        "is_active" are accepted too.

        Returns:
            DirectoryRecord, or None if the body is missing or unparseable
        """
        if not isinstance(data, dict):
            return None

        active = _first_present(data, ("isActive", "is_active", "active"))
        if not isinstance(active, bool):
            return None

        role = data.get("role")
        if isinstance(role, bool) or not isinstance(role, (int, str)):
            return None

        try:
            user_id = UUID(str(data["id"]))
        except (KeyError, ValueError):
            return None

        return cls(
            user_id=user_id,
            role=role,
            is_active=active,
            email=data.get("email"),
            username=data.get("username"),
        )


def _first_present(data: Dict[str, Any], keys) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None
