"""SMS resource client."""

import os
from enum import Enum
from types import MappingProxyType
from typing import Self

import httpx

from sinch_sdk._internal.credentials import BearerTokenAuth, CredentialProvider
from sinch_sdk._internal.resource import DEFAULT_TIMEOUT_MS, ResourceClient
from sinch_sdk.exceptions import ErrorCode
from sinch_sdk.sms.models import (
    BatchListRequest,
    BatchListResponse,
    BatchSendRequest,
    BatchSendResponse,
)


class Region(str, Enum):
    """Regions hosting the SMS API."""

    US = "us"
    EU = "eu"
    AU = "au"
    BR = "br"
    CA = "ca"


US_BASE_URL = "https://us.sms.api.sinch.com/xms/v1"
EU_BASE_URL = "https://eu.sms.api.sinch.com/xms/v1"
AU_BASE_URL = "https://au.sms.api.sinch.com/xms/v1"
BR_BASE_URL = "https://br.sms.api.sinch.com/xms/v1"
CA_BASE_URL = "https://ca.sms.api.sinch.com/xms/v1"

SMS_BASE_URLS: MappingProxyType[Region, str] = MappingProxyType({
    Region.US: US_BASE_URL,
    Region.EU: EU_BASE_URL,
    Region.AU: AU_BASE_URL,
    Region.BR: BR_BASE_URL,
    Region.CA: CA_BASE_URL,
})


class SMSClient(ResourceClient):
    """Client for the SMS batches API, authenticated with a bearer token.

    Requests are scoped to a service plan: ``<base_url>/<plan_id>/batches``.

        sms = SMSClient().eu().with_auth_token("token").with_plan_id("plan")
        request = BatchSendRequest().to("+12025550101").from_number("+12025550102")
        batch = sms.send_batch(request.with_message_body("hi"))
    """

    DEFAULT_BASE_URL = US_BASE_URL

    def __init__(
        self,
        *,
        auth_token: str | None = None,
        plan_id: str | None = None,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the SMS client.

        Args:
            auth_token: API token for bearer authentication.
            plan_id: Service plan ID the batches belong to.
            base_url: API base URL. Defaults to the US region.
            http_client: Shared transport. A new one is created when omitted.
            timeout_ms: Timeout for a created transport, in milliseconds.
            debug: Enable debug logging to stderr.
        """
        super().__init__(
            base_url=base_url, http_client=http_client, timeout_ms=timeout_ms, debug=debug
        )
        self._auth_token = auth_token or ""
        self._plan_id = plan_id or ""

    @classmethod
    def from_env(cls, *, http_client: httpx.Client | None = None) -> "SMSClient":
        """Create an SMS client from environment variables.

        Environment variables:
            SINCH_AUTH_TOKEN: The API token.
            SINCH_PLAN_ID: The service plan ID.
            SINCH_SMS_REGION: One of us, eu, au, br, ca.
            SINCH_SMS_BASE_URL: Custom base URL (takes precedence over region).
            SINCH_TIMEOUT_MS: Request timeout in milliseconds.
            SINCH_DEBUG: Set to "1" to enable debug logging.

        Missing credentials are not an error here; they are reported by
        `validate()` when a request is dispatched.

        Raises:
            ValueError: SINCH_SMS_REGION or SINCH_TIMEOUT_MS is malformed.
        """
        base_url = os.environ.get("SINCH_SMS_BASE_URL")
        region = os.environ.get("SINCH_SMS_REGION")
        if base_url is None and region:
            base_url = SMS_BASE_URLS[Region(region.lower())]

        return cls(
            auth_token=os.environ.get("SINCH_AUTH_TOKEN"),
            plan_id=os.environ.get("SINCH_PLAN_ID"),
            base_url=base_url,
            http_client=http_client,
            **cls._env_options(),
        )

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def auth_token(self) -> str:
        with self._lock:
            return self._auth_token

    @property
    def plan_id(self) -> str:
        with self._lock:
            return self._plan_id

    def with_auth_token(self, auth_token: str) -> Self:
        with self._lock:
            self._auth_token = auth_token
        return self

    def with_plan_id(self, plan_id: str) -> Self:
        with self._lock:
            self._plan_id = plan_id
        return self

    def with_region(self, region: Region) -> Self:
        """Point the client at a region's base URL. Nothing else changes."""
        return self.with_base_url(SMS_BASE_URLS[Region(region)])

    def us(self) -> Self:
        return self.with_region(Region.US)

    def eu(self) -> Self:
        return self.with_region(Region.EU)

    def au(self) -> Self:
        return self.with_region(Region.AU)

    def br(self) -> Self:
        return self.with_region(Region.BR)

    def ca(self) -> Self:
        return self.with_region(Region.CA)

    def _missing_credentials(self) -> list[ErrorCode]:
        errors: list[ErrorCode] = []
        if not self._auth_token:
            errors.append(ErrorCode.AUTH_TOKEN_REQUIRED)
        if not self._plan_id:
            errors.append(ErrorCode.PLAN_ID_REQUIRED)
        return errors

    def _scope(self) -> str:
        return self._plan_id

    def _credentials(self) -> CredentialProvider:
        return BearerTokenAuth(self._auth_token)

    # =========================================================================
    # Operations
    # =========================================================================

    def send_batch(self, request: BatchSendRequest) -> BatchSendResponse:
        """Send a batch and return the batch the API created."""
        return self.do(request, BatchSendResponse())

    def list_batches(self, request: BatchListRequest | None = None) -> BatchListResponse:
        """Fetch one page of batches. Defaults to the first page."""
        if request is None:
            request = BatchListRequest()
        return self.do(request, BatchListResponse())
