"""
HTTP Directory Adapter - Checks credentials against the external client directory.

The directory owns passwords and account status. This adapter only forwards
the credential and interprets the answer.
"""

import math
from typing import Optional
import httpx
from directory_auth.ports.directory_port import DirectoryPort
from directory_auth.domain.credential import Credential, DirectoryRecord
from directory_auth.domain.errors import ConfigurationError, LoginFailure
from directory_auth.domain.outcome import DirectoryLookup
from directory_auth.logging import get_logger

log = get_logger(__name__)


class HTTPDirectoryAdapter(DirectoryPort):
    """
    HTTP-based directory client.

    Sends POST {directory_url}{credentials_path} with either
    {"email": ..., "password": ...} or {"username": ..., "password": ...}.

    Response handling:
    - non-2xx: CREDENTIAL_REJECTED
    - 2xx with inactive or unreadable record: ACCOUNT_INACTIVE
    - 2xx with active record: success
    - timeout / connection error: DIRECTORY_UNREACHABLE
    """

    def __init__(
        self,
        directory_url: str,
        credentials_path: str = "/clients/credentials",
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize directory adapter.

        Args:
            directory_url: Directory base URL
            credentials_path: Credential check endpoint path
            timeout: Per-request timeout in seconds
            client: Preconfigured httpx client (tests inject a mock transport)

        Raises:
            ConfigurationError: If the timeout is not a positive finite number
        """
        if not (math.isfinite(timeout) and timeout > 0):
            raise ConfigurationError("Directory timeout must be a positive finite number of seconds")

        self._directory_url = directory_url.rstrip("/")
        self._credentials_path = "/" + credentials_path.lstrip("/")
        self._client = client or httpx.Client(base_url=self._directory_url, timeout=timeout)

    def verify(self, credential: Credential) -> DirectoryLookup:
        """Check a credential with the directory."""
        try:
            response = self._client.post(
                self._credentials_path,
                json=credential.to_payload(),
            )
        except httpx.HTTPError as e:
            log.warning(
                "directory_unreachable",
                error_type=type(e).__name__,
                directory_url=self._directory_url,
            )
            return DirectoryLookup.fail(LoginFailure.DIRECTORY_UNREACHABLE)

        if not response.is_success:
            log.info("directory_rejected", status_code=response.status_code)
            return DirectoryLookup.fail(LoginFailure.CREDENTIAL_REJECTED)

        try:
            body = response.json()
        except ValueError:
            body = None

        record = DirectoryRecord.from_dict(body)
        if record is None or not record.is_active:
            return DirectoryLookup.fail(LoginFailure.ACCOUNT_INACTIVE)

        return DirectoryLookup.found(record)

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._client.close()

    def __enter__(self) -> "HTTPDirectoryAdapter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
