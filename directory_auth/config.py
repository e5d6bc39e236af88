"""
Settings - Immutable process configuration, loaded once at startup.

Environment variables (real environment wins over a .env file):
- JWT_SECRET: signing secret (required)
- CLIENTS_SERVICE_URL: directory base URL (required)
- JWT_EXPIRATION_MINUTES: token lifetime, default 60
- DIRECTORY_TIMEOUT_SECONDS: directory call timeout, default 5
- DIRECTORY_CREDENTIALS_PATH: credential endpoint, default /clients/credentials
- JWT_DEFAULT_ROLE: role for tokens without one, default "0"; empty = reject
- LOG_LEVEL / LOG_JSON: logging output
"""

import math
import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from directory_auth.domain.errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AuthSettings:
    """Configuration consumed by the codec, directory adapter and API."""
    jwt_secret: str
    directory_url: str
    token_lifetime_minutes: int = 60
    directory_timeout: float = 5.0
    credentials_path: str = "/clients/credentials"
    default_role: Optional[str] = "0"
    log_level: str = "INFO"
    log_json: bool = True

    def __post_init__(self):
        if not self.jwt_secret:
            raise ConfigurationError("JWT_SECRET environment variable is not set")
        if not self.directory_url:
            raise ConfigurationError("CLIENTS_SERVICE_URL environment variable is not set")
        if self.token_lifetime_minutes <= 0:
            raise ConfigurationError("JWT_EXPIRATION_MINUTES must be positive")
        if not (math.isfinite(self.directory_timeout) and self.directory_timeout > 0):
            raise ConfigurationError("DIRECTORY_TIMEOUT_SECONDS must be a positive finite number")

    def __repr__(self) -> str:
        return (
            f"AuthSettings(directory_url={self.directory_url!r}, "
            f"token_lifetime_minutes={self.token_lifetime_minutes}, "
            f"directory_timeout={self.directory_timeout})"
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        env_file: Optional[str] = ".env",
    ) -> "AuthSettings":
        """
        Load settings from the environment.

        Args:
            environ: Mapping to read instead of os.environ
            env_file: Optional dotenv file merged underneath; None skips it

        Raises:
            ConfigurationError: If a required value is missing or invalid
        """
        merged: Dict[str, str] = {}
        if env_file:
            merged.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
        merged.update(os.environ if environ is None else environ)

        default_role = merged.get("JWT_DEFAULT_ROLE", "0")

        return cls(
            jwt_secret=merged.get("JWT_SECRET", ""),
            directory_url=merged.get("CLIENTS_SERVICE_URL", ""),
            token_lifetime_minutes=_parse(int, merged, "JWT_EXPIRATION_MINUTES", 60),
            directory_timeout=_parse(float, merged, "DIRECTORY_TIMEOUT_SECONDS", 5.0),
            credentials_path=merged.get("DIRECTORY_CREDENTIALS_PATH", "/clients/credentials"),
            default_role=default_role or None,
            log_level=merged.get("LOG_LEVEL", "INFO"),
            log_json=merged.get("LOG_JSON", "true").lower() in _TRUE_VALUES,
        )


def _parse(kind, values: Mapping[str, str], name: str, default):
    raw = values.get(name)
    if raw is None or raw == "":
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
