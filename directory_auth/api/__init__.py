"""
FastAPI surface - optional outer adapter over SessionClient.

Requires the "api" extra: pip install directory-auth[api]
"""

from directory_auth.api.app import create_app, build_client

__all__ = ["create_app", "build_client"]
