"""
Token Codec Port - Interface for minting and verifying session tokens.

Implementations:
- JWTTokenCodec: HS256-signed JWT tokens
"""

from abc import ABC, abstractmethod
from directory_auth.domain.outcome import TokenVerification


class TokenCodecPort(ABC):
    """Port: Issue and verify signed session tokens."""

    @abstractmethod
    def issue(self, subject: str, role: str) -> str:
        """
        Mint a signed token for a subject.

        Args:
            subject: Stable identity of the user
            role: Role claim to embed

        Returns:
            Compact signed token string with a fresh unique token id
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenVerification:
        """
        Verify a token's signature and expiry.

        Args:
            token: Token string as presented by the caller

        Returns:
            TokenVerification with claims, or with INVALID_SIGNATURE,
            EXPIRED or MALFORMED. Never raises for bad input.
        """
        pass
