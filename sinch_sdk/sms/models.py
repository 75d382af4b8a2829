"""Pydantic models for the SMS batches API.

Ref: https://developers.sinch.com/docs/sms/api-reference/sms/tag/Batches/
"""

from enum import Enum
from typing import Self

import httpx
from pydantic import Field

from sinch_sdk._internal.models import ResponseModel, SinchModel, is_timestamp
from sinch_sdk.exceptions import ErrorCode, raise_for_errors

# =============================================================================
# Constants
# =============================================================================

BATCHES_PATH = "/batches"

MAX_RECIPIENTS = 1000
MAX_BODY_LENGTH = 2000
MAX_CALLBACK_URL_LENGTH = 2048
MAX_CLIENT_REFERENCE_LENGTH = 255
TYPE_OF_NUMBER_RANGE = range(0, 7)
NPI_RANGE = range(0, 19)
PAGE_SIZE_RANGE = range(1, 101)

# =============================================================================
# Enums
# =============================================================================


class DeliveryReport(str, Enum):
    """Kind of delivery report requested for a batch."""

    NONE = "none"
    SUMMARY = "summary"
    FULL = "full"
    PER_RECIPIENT = "per_recipient"

    @classmethod
    def _missing_(cls, value: object) -> "DeliveryReport":
        return cls.NONE


class MessageType(str, Enum):
    TEXT = "mt_text"
    BINARY = "mt_binary"

    @classmethod
    def _missing_(cls, value: object) -> "MessageType":
        return cls.TEXT


# =============================================================================
# Batch Models
# =============================================================================


class BatchFields(SinchModel):
    """Fields shared by a send request and the batch the API returns."""

    recipients: list[str] = Field(default_factory=list, alias="to")
    sender: str | None = Field(default=None, alias="from")
    message_body: str = Field(default="", alias="body")
    delivery_report: DeliveryReport = DeliveryReport.NONE
    parameters: dict[str, dict[str, str]] | None = None
    campaign_id: str | None = None
    send_at: str | None = None
    expire_at: str | None = None
    callback_url: str | None = None
    client_reference: str | None = None
    feedback_enabled: bool | None = None
    flash_message: bool | None = None
    truncate_concat: bool | None = None
    max_number_of_message_parts: int | None = None
    from_ton: int | None = None
    from_npi: int | None = None


class Batch(BatchFields):
    """A batch as returned by the API."""

    id: str = ""
    type: MessageType = MessageType.TEXT
    udh: str | None = None
    canceled: bool = False
    created_at: str | None = None
    modified_at: str | None = None


class BatchSendRequest(BatchFields):
    """Send one message to up to 1000 recipients.

    Build with the chainable setters, then dispatch through
    `SMSClient.send_batch()`:

        request = (
            BatchSendRequest()
            .to("+12025550101")
            .from_number("+12025550102")
            .with_message_body("hi")
        )

    Ref: https://developers.sinch.com/docs/sms/api-reference/sms/tag/Batches/#tag/Batches/operation/SendSMS
    """

    def with_message_body(self, body: str) -> Self:
        self.message_body = body
        return self

    def to(self, *numbers: str) -> Self:
        """Add recipients. Repeated calls accumulate."""
        self.recipients.extend(numbers)
        return self

    def from_number(self, number: str) -> Self:
        self.sender = number
        return self

    def with_delivery_report(self, delivery_report: DeliveryReport) -> Self:
        self.delivery_report = delivery_report
        return self

    def with_parameters(self, parameters: dict[str, dict[str, str]]) -> Self:
        """Merge per-recipient message parameters into the request."""
        if self.parameters is None:
            self.parameters = {}
        self.parameters.update(parameters)
        return self

    def with_parameter(self, name: str, values: dict[str, str]) -> Self:
        return self.with_parameters({name: values})

    def with_campaign_id(self, campaign_id: str) -> Self:
        self.campaign_id = campaign_id or None
        return self

    def sending_at(self, send_at: str) -> Self:
        """Delay delivery until ``send_at`` (YYYY-MM-DDThh:mm:ss.SSSZ)."""
        self.send_at = send_at or None
        return self

    def expiring_at(self, expire_at: str) -> Self:
        """Stop delivery attempts at ``expire_at`` (YYYY-MM-DDThh:mm:ss.SSSZ)."""
        self.expire_at = expire_at or None
        return self

    def with_callback_url(self, callback_url: str) -> Self:
        self.callback_url = callback_url or None
        return self

    def with_client_reference(self, client_reference: str) -> Self:
        self.client_reference = client_reference or None
        return self

    def with_feedback_enabled(self) -> Self:
        self.feedback_enabled = True
        return self

    def with_flash_message_enabled(self) -> Self:
        self.flash_message = True
        return self

    def with_truncate_concat_enabled(self) -> Self:
        """Only send the first part of a message that needs several SMS."""
        self.truncate_concat = True
        return self

    def with_max_number_of_message_parts(self, max_parts: int) -> Self:
        self.max_number_of_message_parts = max_parts
        return self

    def with_ton_override(self, type_of_number: int) -> Self:
        """Override automatic type-of-number detection for the sender."""
        self.from_ton = type_of_number
        return self

    def with_npi_override(self, number_plan_indicator: int) -> Self:
        """Override automatic number-plan-indicator detection for the sender."""
        self.from_npi = number_plan_indicator
        return self

    def validate(self) -> None:
        """Check every field against the limits documented by the API.

        Raises:
            SinchValidationError: Listing every violated constraint.
        """
        errors: list[ErrorCode] = []
        if (
            not self.recipients
            or len(self.recipients) > MAX_RECIPIENTS
            or "" in self.recipients
        ):
            errors.append(ErrorCode.INVALID_TO_NUMBER)
        if not self.sender:
            errors.append(ErrorCode.INVALID_FROM_NUMBER)
        if self.from_ton is not None and self.from_ton not in TYPE_OF_NUMBER_RANGE:
            errors.append(ErrorCode.INVALID_TYPE_OF_NUMBER)
        if self.from_npi is not None and self.from_npi not in NPI_RANGE:
            errors.append(ErrorCode.INVALID_NPI)
        if not self.message_body or len(self.message_body) > MAX_BODY_LENGTH:
            errors.append(ErrorCode.INVALID_BODY)
        if self.callback_url and (
            not self.callback_url.startswith("http")
            or len(self.callback_url) > MAX_CALLBACK_URL_LENGTH
        ):
            errors.append(ErrorCode.INVALID_CALLBACK_URL)
        if (
            self.client_reference is not None
            and len(self.client_reference) > MAX_CLIENT_REFERENCE_LENGTH
        ):
            errors.append(ErrorCode.INVALID_CLIENT_REFERENCE)
        if self.send_at and not is_timestamp(self.send_at):
            errors.append(ErrorCode.INVALID_SEND_AT)
        if self.expire_at and not is_timestamp(self.expire_at):
            errors.append(ErrorCode.INVALID_EXPIRE_AT)
        if self.max_number_of_message_parts is not None and self.max_number_of_message_parts < 1:
            errors.append(ErrorCode.INVALID_MAX_MESSAGE_PARTS)
        raise_for_errors(errors)

    def expected_status_code(self) -> int:
        return httpx.codes.CREATED

    def method(self) -> str:
        return "POST"

    def path(self) -> str:
        return BATCHES_PATH

    def query_string(self) -> str:
        return ""

    def body(self) -> bytes:
        return self.to_json_bytes()


class BatchSendResponse(ResponseModel, Batch):
    """The batch created by a send request."""


# =============================================================================
# Listing
# =============================================================================


class BatchListRequest(SinchModel):
    """List one page of previously sent batches.

    Pages are not iterated automatically; request the next page with
    `from_page()`.

    Ref: https://developers.sinch.com/docs/sms/api-reference/sms/tag/Batches/#tag/Batches/operation/ListBatches
    """

    page: int | None = None
    page_size: int | None = None
    from_numbers: list[str] = Field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None
    client_reference: str | None = None

    def from_page(self, page: int) -> Self:
        """Select the page to fetch, starting at 0."""
        self.page = page
        return self

    def with_page_size(self, page_size: int) -> Self:
        self.page_size = page_size
        return self

    def sent_from(self, *numbers: str) -> Self:
        """Only list batches sent from these numbers. Repeated calls accumulate."""
        self.from_numbers.extend(numbers)
        return self

    def with_start_date(self, start_date: str) -> Self:
        self.start_date = start_date or None
        return self

    def with_end_date(self, end_date: str) -> Self:
        self.end_date = end_date or None
        return self

    def with_client_reference(self, client_reference: str) -> Self:
        self.client_reference = client_reference or None
        return self

    def validate(self) -> None:
        errors: list[ErrorCode] = []
        if self.page is not None and self.page < 0:
            errors.append(ErrorCode.INVALID_PAGE)
        if self.page_size is not None and self.page_size not in PAGE_SIZE_RANGE:
            errors.append(ErrorCode.INVALID_PAGE_SIZE)
        if self.start_date and not is_timestamp(self.start_date):
            errors.append(ErrorCode.INVALID_START_DATE)
        if self.end_date and not is_timestamp(self.end_date):
            errors.append(ErrorCode.INVALID_END_DATE)
        raise_for_errors(errors)

    def expected_status_code(self) -> int:
        return httpx.codes.OK

    def method(self) -> str:
        return "GET"

    def path(self) -> str:
        return BATCHES_PATH

    def query_string(self) -> str:
        params: list[tuple[str, str]] = []
        if self.page is not None:
            params.append(("page", str(self.page)))
        if self.page_size is not None:
            params.append(("page_size", str(self.page_size)))
        if self.from_numbers:
            params.append(("from", ",".join(self.from_numbers)))
        if self.start_date is not None:
            params.append(("start_date", self.start_date))
        if self.end_date is not None:
            params.append(("end_date", self.end_date))
        if self.client_reference is not None:
            params.append(("client_reference", self.client_reference))
        if not params:
            return ""
        return f"?{httpx.QueryParams(params)}"

    def body(self) -> bytes:
        return b""


class BatchListResponse(ResponseModel):
    """One page of batches."""

    page: int = 0
    page_size: int = 0
    count: int = 0
    batches: list[Batch] = Field(default_factory=list)
