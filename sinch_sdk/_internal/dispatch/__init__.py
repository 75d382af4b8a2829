"""Dispatch engine: validate, build, authenticate, send, check, decode.

Resource clients call into this package; application code normally uses the
resource clients instead.
"""

from sinch_sdk._internal.dispatch.engine import dispatch, validate_all
from sinch_sdk._internal.dispatch.protocols import (
    ApiClient,
    ApiRequest,
    ApiResponse,
    Validatable,
)

__all__ = [
    "dispatch",
    "validate_all",
    "ApiClient",
    "ApiRequest",
    "ApiResponse",
    "Validatable",
]
