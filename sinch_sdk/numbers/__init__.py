"""Numbers API: search, activate, update and release phone numbers."""

from sinch_sdk.numbers.client import NUMBERS_BASE_URL, NumbersClient
from sinch_sdk.numbers.models import (
    ActivateNumberRequest,
    ActiveNumber,
    ActiveNumberResponse,
    AvailableNumber,
    AvailableNumbersRequest,
    AvailableNumbersResponse,
    Capability,
    Money,
    NumberType,
    ReleaseNumberRequest,
    SearchPattern,
    SMSConfiguration,
    UpdateNumberRequest,
    VoiceConfiguration,
)

__all__ = [
    "NumbersClient",
    "NUMBERS_BASE_URL",
    "ActivateNumberRequest",
    "ActiveNumber",
    "ActiveNumberResponse",
    "AvailableNumber",
    "AvailableNumbersRequest",
    "AvailableNumbersResponse",
    "Capability",
    "Money",
    "NumberType",
    "ReleaseNumberRequest",
    "SearchPattern",
    "SMSConfiguration",
    "UpdateNumberRequest",
    "VoiceConfiguration",
]
