"""Sinch SDK for Python.

Typed clients for the Sinch SMS and Numbers REST APIs.

Public API:
    SinchClient - Bundles the resource clients over one HTTP transport
    sms - SMS batches (send, list)
    numbers - Phone numbers (search, activate, update, release)
    exceptions - Error taxonomy

Internal (not for direct use):
    _internal.dispatch - Request dispatch engine
"""

from sinch_sdk._version import __version__
from sinch_sdk.client import SinchClient
from sinch_sdk.exceptions import (
    ErrorCode,
    SinchAPIError,
    SinchConfigError,
    SinchError,
    SinchValidationError,
    UnexpectedStatusCodeError,
)
from sinch_sdk.numbers import NumbersClient
from sinch_sdk.sms import SMSClient

__all__ = [
    "__version__",
    "SinchClient",
    "SMSClient",
    "NumbersClient",
    "ErrorCode",
    "SinchError",
    "SinchAPIError",
    "SinchConfigError",
    "SinchValidationError",
    "UnexpectedStatusCodeError",
]
