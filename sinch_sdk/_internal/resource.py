"""Base class for Sinch resource clients (SMS, Numbers)."""

import os
import threading
from abc import ABC, abstractmethod
from typing import Any, Self, TypeVar

import httpx

from sinch_sdk._internal.credentials import CredentialProvider
from sinch_sdk._internal.dispatch import ApiRequest, ApiResponse, dispatch
from sinch_sdk._internal.http import create_http_client
from sinch_sdk.exceptions import ErrorCode, SinchConfigError, raise_for_errors

DEFAULT_TIMEOUT_MS = 30_000

ResponseT = TypeVar("ResponseT", bound=ApiResponse)


class ResourceClient(ABC):
    """Configuration and dispatch shared by every resource family.

    Setters are chainable and never validate; `validate()` is called by the
    dispatch engine before any request is sent. All configuration reads and
    writes hold the client's lock, so one instance can be configured and used
    from several threads.
    """

    DEFAULT_BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the resource client.

        Args:
            base_url: API base URL. Defaults to the family's default URL.
            http_client: Shared transport. A new one is created when omitted.
            timeout_ms: Timeout for a created transport, in milliseconds.
            debug: Enable debug logging to stderr.
        """
        self._lock = threading.Lock()
        self._base_url = self.DEFAULT_BASE_URL if base_url is None else base_url
        self._owns_http_client = http_client is None
        self._http_client: httpx.Client | None = (
            create_http_client(timeout=timeout_ms / 1000) if http_client is None else http_client
        )
        self._debug = debug

    @staticmethod
    def _env_options() -> dict[str, Any]:
        """Read the transport options shared by every family's `from_env()`."""
        return {
            "timeout_ms": int(os.environ.get("SINCH_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            "debug": os.environ.get("SINCH_DEBUG", "") == "1",
        }

    # =========================================================================
    # Configuration
    # =========================================================================

    @property
    def base_url(self) -> str:
        with self._lock:
            return self._base_url

    @property
    def http_client(self) -> httpx.Client | None:
        with self._lock:
            return self._http_client

    def with_base_url(self, base_url: str) -> Self:
        """Set a custom base URL."""
        with self._lock:
            self._base_url = base_url
        return self

    def with_http_client(self, http_client: httpx.Client | None) -> Self:
        """Replace the transport. The caller keeps ownership of ``http_client``."""
        with self._lock:
            previous = self._http_client
            if self._owns_http_client and previous is not None and previous is not http_client:
                previous.close()
            self._http_client = http_client
            self._owns_http_client = False
        return self

    def with_debug(self, debug: bool = True) -> Self:
        with self._lock:
            self._debug = debug
        return self

    # =========================================================================
    # Family-specific hooks
    # =========================================================================

    @abstractmethod
    def _missing_credentials(self) -> list[ErrorCode]:
        """Codes for unset credential/scope fields. Called with the lock held."""

    @abstractmethod
    def _scope(self) -> str:
        """Path segment appended to the base URL. Called with the lock held."""

    @abstractmethod
    def _credentials(self) -> CredentialProvider:
        """Credential provider for the current configuration. Called with the lock held."""

    # =========================================================================
    # Dispatch contract
    # =========================================================================

    def validate(self) -> None:
        """Check that every required setting is present.

        Raises:
            SinchConfigError: Listing every missing setting.
        """
        with self._lock:
            errors = self._missing_credentials()
            if not self._base_url:
                errors.append(ErrorCode.BASE_URL_REQUIRED)
            if self._http_client is None:
                errors.append(ErrorCode.HTTP_CLIENT_REQUIRED)
        raise_for_errors(errors, error_cls=SinchConfigError)

    def url(self) -> str:
        """Base URL joined with the client's scope segment. Performs no I/O."""
        with self._lock:
            return f"{self._base_url.rstrip('/')}/{self._scope()}"

    def authenticate(self, request: httpx.Request) -> httpx.Request:
        """Attach this client's credentials to ``request``."""
        with self._lock:
            credentials = self._credentials()
        return credentials.apply(request)

    def do(self, request: ApiRequest, response: ResponseT) -> ResponseT:
        """Dispatch ``request`` and decode the reply into ``response``.

        Returns:
            ``response``, now populated.

        Raises:
            SinchValidationError: Client or request is not ready; nothing is sent.
            UnexpectedStatusCodeError: The API answered with another status.
            httpx.HTTPError: Transport failure.
        """
        with self._lock:
            debug = self._debug
        dispatch(self, request, response, debug=debug)
        return response

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the transport if this client created it."""
        with self._lock:
            if self._owns_http_client and self._http_client is not None:
                self._http_client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
