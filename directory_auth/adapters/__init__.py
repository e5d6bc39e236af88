"""
Adapters - Implementations of ports.

Tokens:
- JWTTokenCodec: HS256 JWT issuing and verification

Revocation:
- MemoryRevocationStore: In-process block list (single instance only)

Directory:
- HTTPDirectoryAdapter: External client directory over HTTP

Request helpers:
- extract_bearer_token: Authorization header parsing
"""

from directory_auth.adapters.jwt_codec import JWTTokenCodec
from directory_auth.adapters.memory_revocation import MemoryRevocationStore
from directory_auth.adapters.http_directory import HTTPDirectoryAdapter
from directory_auth.adapters.bearer_header import extract_bearer_token

__all__ = [
    "JWTTokenCodec",
    "MemoryRevocationStore",
    "HTTPDirectoryAdapter",
    "extract_bearer_token",
]
