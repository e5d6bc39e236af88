"""
Directory Port - Interface for checking credentials against the external directory.

Implementations:
- HTTPDirectoryAdapter: Calls the directory's credential endpoint over HTTP
"""

from abc import ABC, abstractmethod
from directory_auth.domain.credential import Credential
from directory_auth.domain.outcome import DirectoryLookup


class DirectoryPort(ABC):
    """Port: Resolve a credential to a directory record."""

    @abstractmethod
    def verify(self, credential: Credential) -> DirectoryLookup:
        """
        Check a credential with the directory.

        The directory is the sole judge of whether the password is correct.

        Args:
            credential: Identifier (email or username) and password

        Returns:
            DirectoryLookup with the active record, or with
            CREDENTIAL_REJECTED, ACCOUNT_INACTIVE or DIRECTORY_UNREACHABLE.
            Never raises for network problems.
        """
        pass
