"""Numbers resource client."""

import os
from typing import Self

import httpx

from sinch_sdk._internal.credentials import BasicKeyAuth, CredentialProvider
from sinch_sdk._internal.resource import DEFAULT_TIMEOUT_MS, ResourceClient
from sinch_sdk.exceptions import ErrorCode
from sinch_sdk.numbers.models import (
    ActivateNumberRequest,
    ActiveNumberResponse,
    AvailableNumbersRequest,
    AvailableNumbersResponse,
    ReleaseNumberRequest,
    UpdateNumberRequest,
)

NUMBERS_BASE_URL = "https://numbers.api.sinch.com/v1/projects"


class NumbersClient(ResourceClient):
    """Client for the Numbers API, authenticated with an access key.

    Requests are scoped to a project: ``<base_url>/<project_id>/...``.
    """

    DEFAULT_BASE_URL = NUMBERS_BASE_URL

    def __init__(
        self,
        *,
        key_id: str | None = None,
        key_secret: str | None = None,
        project_id: str | None = None,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the Numbers client.

        Args:
            key_id: Access key ID.
            key_secret: Access key secret.
            project_id: Project the numbers belong to.
            base_url: API base URL.
            http_client: Shared transport. A new one is created when omitted.
            timeout_ms: Timeout for a created transport, in milliseconds.
            debug: Enable debug logging to stderr.
        """
        super().__init__(
            base_url=base_url, http_client=http_client, timeout_ms=timeout_ms, debug=debug
        )
        self._key_id = key_id or ""
        self._key_secret = key_secret or ""
        self._project_id = project_id or ""

    @classmethod
    def from_env(cls, *, http_client: httpx.Client | None = None) -> "NumbersClient":
        """Create a Numbers client from environment variables.

        Environment variables:
            SINCH_KEY_ID: The access key ID.
            SINCH_KEY_SECRET: The access key secret.
            SINCH_PROJECT_ID: The project ID.
            SINCH_NUMBERS_BASE_URL: Custom base URL.
            SINCH_TIMEOUT_MS: Request timeout in milliseconds.
            SINCH_DEBUG: Set to "1" to enable debug logging.
        """
        return cls(
            key_id=os.environ.get("SINCH_KEY_ID"),
            key_secret=os.environ.get("SINCH_KEY_SECRET"),
            project_id=os.environ.get("SINCH_PROJECT_ID"),
            base_url=os.environ.get("SINCH_NUMBERS_BASE_URL"),
            http_client=http_client,
            **cls._env_options(),
        )

    @property
    def key_id(self) -> str:
        with self._lock:
            return self._key_id

    @property
    def project_id(self) -> str:
        with self._lock:
            return self._project_id

    def with_key_id(self, key_id: str) -> Self:
        with self._lock:
            self._key_id = key_id
        return self

    def with_key_secret(self, key_secret: str) -> Self:
        with self._lock:
            self._key_secret = key_secret
        return self

    def with_project_id(self, project_id: str) -> Self:
        with self._lock:
            self._project_id = project_id
        return self

    def _missing_credentials(self) -> list[ErrorCode]:
        errors: list[ErrorCode] = []
        if not self._key_id:
            errors.append(ErrorCode.KEY_ID_REQUIRED)
        if not self._key_secret:
            errors.append(ErrorCode.KEY_SECRET_REQUIRED)
        if not self._project_id:
            errors.append(ErrorCode.PROJECT_ID_REQUIRED)
        return errors

    def _scope(self) -> str:
        return self._project_id

    def _credentials(self) -> CredentialProvider:
        return BasicKeyAuth(self._key_id, self._key_secret)

    # =========================================================================
    # Operations
    # =========================================================================

    def search_available(self, request: AvailableNumbersRequest) -> AvailableNumbersResponse:
        """Search numbers that can be rented."""
        return self.do(request, AvailableNumbersResponse())

    def activate(self, request: ActivateNumberRequest) -> ActiveNumberResponse:
        """Rent an available number."""
        return self.do(request, ActiveNumberResponse())

    def update(self, request: UpdateNumberRequest) -> ActiveNumberResponse:
        return self.do(request, ActiveNumberResponse())

    def release(self, request: ReleaseNumberRequest) -> ActiveNumberResponse:
        """Release a rented number. The response describes the released number."""
        return self.do(request, ActiveNumberResponse())
