from directory_auth.sdk.client import SessionClient

__all__ = ["SessionClient"]
