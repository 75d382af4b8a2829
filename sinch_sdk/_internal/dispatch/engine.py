"""Dispatch engine shared by every Sinch resource client."""

import sys

from sinch_sdk._internal.dispatch.protocols import ApiClient, ApiRequest, ApiResponse, Validatable
from sinch_sdk._internal.http import JSON_CONTENT_TYPE
from sinch_sdk._internal.redaction import redact_headers
from sinch_sdk.exceptions import (
    ErrorCode,
    SinchConfigError,
    SinchValidationError,
    UnexpectedStatusCodeError,
    raise_for_errors,
)


def _log_debug(debug: bool, message: str) -> None:
    """Log a debug message to stderr if debug mode is enabled."""
    if debug:
        print(f"[sinch-sdk] {message}", file=sys.stderr)


def validate_all(*validatables: Validatable) -> None:
    """Validate every object and report all failures together.

    A single failure is re-raised as is, so a client's `SinchConfigError`
    reaches the caller unchanged.

    Raises:
        SinchValidationError: The failing object's own error, or one error
            holding the codes of every failing object, in argument order.
    """
    errors: list[SinchValidationError] = []
    for validatable in validatables:
        try:
            validatable.validate()
        except SinchValidationError as e:
            errors.append(e)
    if len(errors) == 1:
        raise errors[0]
    raise_for_errors(errors)


def dispatch(
    client: ApiClient,
    request: ApiRequest,
    response: ApiResponse,
    *,
    debug: bool = False,
) -> None:
    """Send ``request`` through ``client`` and decode the reply into ``response``.

    The steps run in a fixed order so that every failure can be told apart:
    validation, serialization, URL build, authentication, send, status check,
    read, decode. Only validation failures are aggregated; every other error
    is raised exactly as the underlying step produced it.

    Args:
        client: Resource client providing credentials, base URL and transport.
        request: The operation to perform.
        response: Empty receiver, populated on success.
        debug: Write request/response diagnostics to stderr.

    Raises:
        SinchValidationError: The client and/or request failed validation.
            No network call is made.
        UnexpectedStatusCodeError: The API answered with a status other than
            ``request.expected_status_code()``.
        httpx.HTTPError: Transport failure (connection, TLS, timeout, ...).
    """
    validate_all(client, request)

    query_string = request.query_string()
    body = request.body()

    url = client.url() + request.path() + query_string
    # The transport may be swapped out concurrently after validation.
    http_client = client.http_client
    if http_client is None:
        raise SinchConfigError([ErrorCode.HTTP_CLIENT_REQUIRED])

    http_request = http_client.build_request(request.method(), url, content=body or None)
    http_request = client.authenticate(http_request)
    if body:
        http_request.headers["Content-Type"] = JSON_CONTENT_TYPE

    _log_debug(
        debug,
        f"{http_request.method} {http_request.url} headers={redact_headers(http_request.headers)}",
    )
    http_response = http_client.send(http_request, stream=True)
    try:
        expected = request.expected_status_code()
        _log_debug(debug, f"Received status {http_response.status_code} (expected {expected})")
        if http_response.status_code != expected:
            raise UnexpectedStatusCodeError(expected, http_response.status_code)
        content = http_response.read()
    finally:
        http_response.close()

    response.from_json(content)
