"""
Session Client - High-level SDK for the login / authorize / logout flows.

Composes the directory, the token codec and the revocation store.
"""

from typing import Optional
from directory_auth.ports.directory_port import DirectoryPort
from directory_auth.ports.revocation_port import RevocationStorePort
from directory_auth.ports.token_port import TokenCodecPort
from directory_auth.domain.credential import Credential
from directory_auth.domain.errors import TokenFailure
from directory_auth.domain.outcome import AuthOutcome, TokenVerification
from directory_auth.domain.token import TokenClaims, TokenState
from directory_auth.logging import get_logger

log = get_logger(__name__)


class SessionClient:
    """
    High-level session client.

    Example:
        from directory_auth import SessionClient, Credential
        from directory_auth.adapters import (
            HTTPDirectoryAdapter, JWTTokenCodec, MemoryRevocationStore,
        )

        client = SessionClient(
            directory=HTTPDirectoryAdapter("http://clients:8080"),
            codec=JWTTokenCodec(secret="secret"),
            revocations=MemoryRevocationStore(),
        )

        outcome = client.login(Credential("admin@x.cl", "pw"))
        result = client.authorize(outcome.token)
        client.logout(result.claims)
    """

    def __init__(
        self,
        directory: DirectoryPort,
        codec: TokenCodecPort,
        revocations: RevocationStorePort,
    ):
        """
        Initialize session client with adapters.

        Args:
            directory: Credential directory adapter
            codec: Token codec adapter
            revocations: Revocation store adapter
        """
        self._directory = directory
        self._codec = codec
        self._revocations = revocations

    def login(self, credential: Credential) -> AuthOutcome:
        """
        Log in with an identifier and password.

        Failures carry a generic message that does not reveal whether the
        account exists; the precise reason is only logged.

        Args:
            credential: Identifier (email or username) and password

        Returns:
            AuthOutcome with the signed token, or the failure
        """
        lookup = self._directory.verify(credential)

        if not lookup.ok:
            log.info("login_failed", failure=lookup.failure.value)
            return AuthOutcome.fail(lookup.failure)

        record = lookup.record
        token = self._codec.issue(str(record.user_id), str(record.role))
        log.info("login_succeeded", subject=str(record.user_id))
        return AuthOutcome.success(token)

    def verify(self, token: str) -> TokenVerification:
        """Check signature and expiry only; the revocation list is not consulted."""
        return self._codec.verify(token)

    def authorize(self, token: str) -> TokenVerification:
        """
        Validate a bearer token for a protected request.

        Args:
            token: Token string

        Returns:
            TokenVerification with claims, or INVALID_SIGNATURE, EXPIRED,
            MALFORMED (also for tokens without a token id) or REVOKED
        """
        result = self._codec.verify(token)
        if not result.ok:
            return result

        claims = result.claims
        if claims.token_id is None:
            return TokenVerification.fail(TokenFailure.MALFORMED)

        if self._revocations.is_blocked(claims.token_id):
            log.info("token_revoked", token_id=claims.token_id)
            return TokenVerification.fail(TokenFailure.REVOKED)

        return result

    def logout(self, claims: TokenClaims) -> bool:
        """
        Revoke the token the claims came from.

        Best effort: without a token id or expiry nothing is blocked (the
        token still expires on its own) and logout is still reported as done.

        Args:
            claims: Claims of an already-verified token

        Returns:
            True
        """
        if claims.token_id is None or claims.expires_at is None:
            log.warning("logout_skipped", subject=claims.subject)
            return True

        self._revocations.block(claims.token_id, claims.expires_at)
        return True

    def state(self, token: str) -> Optional[TokenState]:
        """
        Lifecycle state of a token.

        Returns:
            ACTIVE, EXPIRED or REVOKED; None if the token is not one of ours
            (bad signature or malformed)
        """
        result = self.authorize(token)
        if result.ok:
            return TokenState.ACTIVE
        if result.failure is TokenFailure.EXPIRED:
            return TokenState.EXPIRED
        if result.failure is TokenFailure.REVOKED:
            return TokenState.REVOKED
        return None

    def close(self) -> None:
        """Close the directory adapter if it holds connections."""
        close = getattr(self._directory, "close", None)
        if close is not None:
            close()
