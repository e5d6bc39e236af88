"""
Ports - Interfaces for token handling, revocation, and the credential directory.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from directory_auth.ports.token_port import TokenCodecPort
from directory_auth.ports.revocation_port import RevocationStorePort
from directory_auth.ports.directory_port import DirectoryPort

__all__ = [
    "TokenCodecPort",
    "RevocationStorePort",
    "DirectoryPort",
]
