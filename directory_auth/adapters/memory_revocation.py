"""
Memory Revocation Store - In-process token block list.
"""

import threading
from typing import Callable, Dict
from datetime import datetime
from directory_auth.ports.revocation_port import RevocationStorePort
from directory_auth.domain.token import utc_now


class MemoryRevocationStore(RevocationStorePort):
    """
    In-memory, thread-safe block list keyed by token id.

    Expired entries are purged lazily on every is_blocked() call with a
    full scan, so no background sweeper is needed.

    Entries are lost on restart and are not shared between processes.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        """Initialize in-memory storage."""
        self._entries: Dict[str, datetime] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def block(self, token_id: str, expires_at: datetime) -> None:
        """Block a token id until expires_at (latest write wins)."""
        now = self._clock()

        with self._lock:
            if expires_at <= now:
                # Already expired: nothing left to block
                self._entries.pop(token_id, None)
                return
            self._entries[token_id] = expires_at

    def is_blocked(self, token_id: str) -> bool:
        """Check a token id, purging expired entries first."""
        now = self._clock()

        with self._lock:
            self._purge(now)
            expires_at = self._entries.get(token_id)
            return expires_at is not None and now < expires_at

    def purge_expired(self) -> int:
        """Remove expired entries."""
        now = self._clock()

        with self._lock:
            return self._purge(now)

    def _purge(self, now: datetime) -> int:
        # Caller holds the lock
        expired_ids = [
            token_id for token_id, expires_at in self._entries.items()
            if expires_at <= now
        ]

        for token_id in expired_ids:
            del self._entries[token_id]

        return len(expired_ids)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
