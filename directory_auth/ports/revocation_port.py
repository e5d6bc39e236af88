"""
Revocation Store Port - Interface for the token block list.

Implementations:
- MemoryRevocationStore: In-process, thread-safe, self-cleaning map
"""

from abc import ABC, abstractmethod
from datetime import datetime


class RevocationStorePort(ABC):
    """Port: Track token ids that must be rejected before they expire."""

    @abstractmethod
    def block(self, token_id: str, expires_at: datetime) -> None:
        """
        Block a token id until its natural expiry.

        Idempotent: blocking again overwrites the stored expiry.

        Args:
            token_id: Unique token id (jti)
            expires_at: When the token expires on its own
        """
        pass

    @abstractmethod
    def is_blocked(self, token_id: str) -> bool:
        """
        Check whether a token id is blocked.

        Args:
            token_id: Unique token id (jti)

        Returns:
            True if blocked and the block has not yet expired
        """
        pass

    @abstractmethod
    def purge_expired(self) -> int:
        """
        Remove entries whose expiry has passed.

        Returns:
            Number of entries removed
        """
        pass
