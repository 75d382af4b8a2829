"""Capabilities the dispatch engine relies on.

Requests, responses and resource clients are never inspected beyond these
methods, so any object providing them can be dispatched.
"""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Validatable(Protocol):
    def validate(self) -> None:
        """Raise ``SinchValidationError`` when the object is not ready to send."""
        ...


@runtime_checkable
class ApiRequest(Validatable, Protocol):
    """One API operation: where to send it, what to send, what to expect back."""

    def expected_status_code(self) -> int: ...

    def method(self) -> str: ...

    def path(self) -> str: ...

    def query_string(self) -> str:
        """Encoded query including the leading ``?``, or an empty string."""
        ...

    def body(self) -> bytes:
        """Serialized payload, empty when the operation sends none."""
        ...


@runtime_checkable
class ApiResponse(Protocol):
    def from_json(self, data: bytes) -> None:
        """Populate the receiver from a raw response payload."""
        ...


@runtime_checkable
class ApiClient(Validatable, Protocol):
    """A resource client: base URL, credentials and the shared transport."""

    @property
    def http_client(self) -> httpx.Client | None: ...

    def url(self) -> str: ...

    def authenticate(self, request: httpx.Request) -> httpx.Request: ...
