"""Public exceptions for the Sinch SDK."""

from collections.abc import Iterable, Iterator
from enum import Enum


class ErrorCode(str, Enum):
    """Sentinel for a single violated configuration or input constraint.

    The value is the human-readable message. Compare codes by identity
    (``code is ErrorCode.PLAN_ID_REQUIRED``) or membership
    (``ErrorCode.PLAN_ID_REQUIRED in exc``).
    """

    # Client configuration
    AUTH_TOKEN_REQUIRED = "an auth token is required"
    PLAN_ID_REQUIRED = "a plan ID is required"
    KEY_ID_REQUIRED = "a key ID is required"
    KEY_SECRET_REQUIRED = "a key secret is required"
    PROJECT_ID_REQUIRED = "project ID is required"
    BASE_URL_REQUIRED = "a base URL is required"
    HTTP_CLIENT_REQUIRED = "an HTTP client is required"

    # SMS batches
    INVALID_TO_NUMBER = "at least one to_number is required and no more than 1000 are allowed"
    INVALID_FROM_NUMBER = "a from_number is required"
    INVALID_TYPE_OF_NUMBER = "type_of_number must be an int in the range 0-6"
    INVALID_NPI = "npi must be an int in the range 0-18"
    INVALID_BODY = "body must be between 1 and 2000 characters long"
    INVALID_CALLBACK_URL = (
        "callback_url must start with http and be between 0 and 2048 characters long"
    )
    INVALID_CLIENT_REFERENCE = "client_reference must be between 0 and 255 characters long"
    INVALID_SEND_AT = "send_at must be in ISO-8601 format"
    INVALID_EXPIRE_AT = "expire_at must be in ISO-8601 format"
    INVALID_MAX_MESSAGE_PARTS = "max_number_of_message_parts must be greater than 0"
    INVALID_PAGE = "page must be greater than or equal to 0"
    INVALID_PAGE_SIZE = "page_size must be between 1 and 100"
    INVALID_START_DATE = "start_date must be in ISO-8601 format"
    INVALID_END_DATE = "end_date must be in ISO-8601 format"

    # Numbers
    REGION_CODE_REQUIRED = "region code is required"
    TYPE_REQUIRED = "type is required"
    PHONE_NUMBER_REQUIRED = "phone number is required"
    MISSING_CONFIGURATION = "either smsConfiguration or voiceConfiguration or both must be set"
    SERVICE_PLAN_ID_REQUIRED = "service plan ID is required"
    APP_ID_REQUIRED = "app ID is required"
    INVALID_SIZE = "size must be greater than 0"

    def __str__(self) -> str:
        return self.value


class SinchError(Exception):
    """Base exception for all Sinch SDK errors."""


class SinchValidationError(SinchError):
    """One or more constraints were violated before any request was sent.

    Holds every violated constraint at once, in the order they were found,
    so callers can fix all of them in a single pass.
    """

    def __init__(self, errors: Iterable[ErrorCode]) -> None:
        self.errors: tuple[ErrorCode, ...] = tuple(errors)
        super().__init__("; ".join(code.value for code in self.errors))

    def __contains__(self, code: object) -> bool:
        return code in self.errors

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ErrorCode]:
        return iter(self.errors)


class SinchConfigError(SinchValidationError):
    """Client configuration error (missing credentials, base URL, HTTP client)."""


class SinchAPIError(SinchError):
    """Error from the Sinch API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnexpectedStatusCodeError(SinchAPIError):
    """The API answered with a status other than the one the request expects."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"unexpected status code: expected {expected}, got {actual}",
            status_code=actual,
        )
        self.expected = expected
        self.actual = actual


def combine_errors(
    errors: Iterable[ErrorCode | SinchValidationError],
    *,
    error_cls: type[SinchValidationError] = SinchValidationError,
) -> SinchValidationError | None:
    """Collapse codes (and nested aggregated errors) into one exception.

    Returns None when there is nothing to report.
    """
    codes: list[ErrorCode] = []
    for error in errors:
        if isinstance(error, SinchValidationError):
            codes.extend(error.errors)
        else:
            codes.append(error)
    if not codes:
        return None
    return error_cls(codes)


def raise_for_errors(
    errors: Iterable[ErrorCode | SinchValidationError],
    *,
    error_cls: type[SinchValidationError] = SinchValidationError,
) -> None:
    """Raise the aggregated error for ``errors``, if any."""
    combined = combine_errors(errors, error_cls=error_cls)
    if combined is not None:
        raise combined
