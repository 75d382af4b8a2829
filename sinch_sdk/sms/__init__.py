"""SMS batches API."""

from sinch_sdk.sms.client import (
    AU_BASE_URL,
    BR_BASE_URL,
    CA_BASE_URL,
    EU_BASE_URL,
    SMS_BASE_URLS,
    US_BASE_URL,
    Region,
    SMSClient,
)
from sinch_sdk.sms.models import (
    Batch,
    BatchListRequest,
    BatchListResponse,
    BatchSendRequest,
    BatchSendResponse,
    DeliveryReport,
    MessageType,
)

__all__ = [
    "SMSClient",
    "Region",
    "SMS_BASE_URLS",
    "US_BASE_URL",
    "EU_BASE_URL",
    "AU_BASE_URL",
    "BR_BASE_URL",
    "CA_BASE_URL",
    "Batch",
    "BatchListRequest",
    "BatchListResponse",
    "BatchSendRequest",
    "BatchSendResponse",
    "DeliveryReport",
    "MessageType",
]
