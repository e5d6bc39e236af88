"""
Bearer Header Adapter - Pull the bearer token out of request headers.

Expected header:
- Authorization: Bearer <token>
"""

from typing import Mapping, Optional

AUTHORIZATION_HEADER = "Authorization"
BEARER_SCHEME = "bearer"


def extract_bearer_token(headers: Mapping[str, str]) -> Optional[str]:
    """
    Extract a bearer token from request headers.

    Header name and scheme are matched case-insensitively.

    Args:
        headers: Request headers (any mapping; case-insensitive mappings work too)

    Returns:
        Token string, or None if absent or not a bearer credential
    """
    value = headers.get(AUTHORIZATION_HEADER)
    if value is None:
        for name, header_value in headers.items():
            if name.lower() == AUTHORIZATION_HEADER.lower():
                value = header_value
                break

    if not value:
        return None

    parts = value.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None

    token = parts[1].strip()
    return token or None
