"""User-facing client bundling every Sinch resource family.

Example usage:
    from sinch_sdk import SinchClient
    from sinch_sdk.sms import BatchSendRequest

    with SinchClient(auth_token="token", plan_id="plan") as client:
        batch = client.sms.send_batch(
            BatchSendRequest()
            .to("+12025550101")
            .from_number("+12025550102")
            .with_message_body("hi")
        )
        print(batch.id)
"""

import os
from typing import Self

import httpx

from sinch_sdk._internal.http import create_http_client
from sinch_sdk._internal.resource import DEFAULT_TIMEOUT_MS
from sinch_sdk.numbers import NumbersClient
from sinch_sdk.sms import SMSClient


class SinchClient:
    """Resource clients sharing one pooled HTTP transport.

    Attributes:
        sms: Client for the SMS batches API.
        numbers: Client for the Numbers API.
    """

    def __init__(
        self,
        *,
        auth_token: str | None = None,
        plan_id: str | None = None,
        key_id: str | None = None,
        key_secret: str | None = None,
        project_id: str | None = None,
        sms_base_url: str | None = None,
        numbers_base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            auth_token: SMS API token.
            plan_id: SMS service plan ID.
            key_id: Numbers access key ID.
            key_secret: Numbers access key secret.
            project_id: Numbers project ID.
            sms_base_url: Custom SMS base URL. Defaults to the US region.
            numbers_base_url: Custom Numbers base URL.
            http_client: Transport to share. Created (and owned) when omitted.
            timeout_ms: Timeout for a created transport, in milliseconds.
            debug: Enable debug logging to stderr.
        """
        self._owns_http_client = http_client is None
        self._http_client = (
            create_http_client(timeout=timeout_ms / 1000) if http_client is None else http_client
        )
        self.sms = SMSClient(
            auth_token=auth_token,
            plan_id=plan_id,
            base_url=sms_base_url,
            http_client=self._http_client,
            debug=debug,
        )
        self.numbers = NumbersClient(
            key_id=key_id,
            key_secret=key_secret,
            project_id=project_id,
            base_url=numbers_base_url,
            http_client=self._http_client,
            debug=debug,
        )

    @classmethod
    def from_env(cls) -> "SinchClient":
        """Create a client whose resource clients are configured from the environment.

        See `SMSClient.from_env()` and `NumbersClient.from_env()` for the
        variables read.

        Raises:
            ValueError: SINCH_TIMEOUT_MS or SINCH_SMS_REGION is malformed.
        """
        timeout_ms = int(os.environ.get("SINCH_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))
        client = cls(timeout_ms=timeout_ms)
        client.sms = SMSClient.from_env(http_client=client._http_client)
        client.numbers = NumbersClient.from_env(http_client=client._http_client)
        return client

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    def close(self) -> None:
        """Close the shared transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
