"""
JWT Token Codec - Implements TokenCodecPort with HS256-signed JWTs.
"""

import jwt
import uuid
from datetime import datetime
from typing import Callable, Optional
from directory_auth.ports.token_port import TokenCodecPort
from directory_auth.domain.errors import ConfigurationError, TokenFailure
from directory_auth.domain.outcome import TokenVerification
from directory_auth.domain.token import TokenClaims, utc_now
from directory_auth.logging import get_logger

log = get_logger(__name__)


class JWTTokenCodec(TokenCodecPort):
    """
    JWT-based token codec.

    Uses PyJWT for signing and signature checks. Expiry is checked here
    against the injected clock with zero leeway, so a token is rejected
    at exactly its `exp` second.

    Stateless: safe to share across threads.
    """

    def __init__(
        self,
        secret: str,
        lifetime_minutes: int = 60,
        algorithm: str = "HS256",
        default_role: Optional[str] = "0",
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize JWT codec.

        Args:
            secret: Symmetric signing secret
            lifetime_minutes: Token lifetime (must be positive)
            algorithm: HMAC algorithm (default HS256)
            default_role: Role assumed when a token has no role claim;
                None rejects such tokens as malformed
            clock: Returns the current UTC time

        Raises:
            ConfigurationError: If the secret is empty or lifetime not positive
        """
        if not secret:
            raise ConfigurationError("JWT signing secret must not be empty")
        if lifetime_minutes <= 0:
            raise ConfigurationError("Token lifetime must be a positive number of minutes")

        self._secret = secret
        self._lifetime_seconds = lifetime_minutes * 60
        self._algorithm = algorithm
        self._default_role = default_role
        self._clock = clock

    def issue(self, subject: str, role: str) -> str:
        """
        Create a signed JWT.

        Args:
            subject: User identity (sub claim)
            role: Role claim

        Returns:
            JWT token string
        """
        issued_at = int(self._clock().timestamp())
        payload = {
            "sub": subject,
            "role": role,
            "jti": str(uuid.uuid4()),
            "iat": issued_at,
            "exp": issued_at + self._lifetime_seconds,
        }

        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenVerification:
        """
        Verify a JWT's signature, required claims and expiry.

        Args:
            token: JWT token string

        Returns:
            TokenVerification with claims, or the failure reason
        """
        if not isinstance(token, str) or not token:
            return self._reject(TokenFailure.MALFORMED)

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["exp", "sub"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidSignatureError:
            return self._reject(TokenFailure.INVALID_SIGNATURE)
        except jwt.InvalidTokenError:
            return self._reject(TokenFailure.MALFORMED)

        try:
            claims = TokenClaims.from_payload(payload, default_role=self._default_role)
        except ValueError:
            return self._reject(TokenFailure.MALFORMED)

        if claims.is_expired(self._clock()):
            return self._reject(TokenFailure.EXPIRED)

        return TokenVerification.valid(claims)

    def _reject(self, failure: TokenFailure) -> TokenVerification:
        log.debug("token_rejected", failure=failure.value)
        return TokenVerification.fail(failure)
