"""Pydantic models for the Numbers API.

The Numbers API uses camelCase field names on the wire; models keep
snake_case attributes and serialize through generated aliases.

Ref: https://developers.sinch.com/docs/numbers/api-reference/numbers/
"""

from enum import Enum
from typing import Self

import httpx
from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from sinch_sdk._internal.models import ResponseModel, SinchModel
from sinch_sdk.exceptions import ErrorCode, raise_for_errors

# =============================================================================
# Enums
# =============================================================================


class SearchPattern(str, Enum):
    """Where the digits of a number pattern must appear."""

    START = "START"
    CONTAIN = "CONTAIN"
    END = "END"


class NumberType(str, Enum):
    LOCAL = "LOCAL"
    TOLL_FREE = "TOLL_FREE"
    MOBILE = "MOBILE"


class Capability(str, Enum):
    SMS = "SMS"
    VOICE = "VOICE"


# =============================================================================
# Shared Models
# =============================================================================


class NumbersModel(SinchModel):
    model_config = ConfigDict(alias_generator=to_camel)


class Money(NumbersModel):
    amount: str = ""
    currency_code: str = ""


class SMSConfiguration(NumbersModel):
    """SMS settings sent when activating or updating a number."""

    service_plan_id: str = ""
    campaign_id: str | None = None


class VoiceConfiguration(NumbersModel):
    """Voice settings sent when activating or updating a number."""

    app_id: str = ""


class ScheduledProvisioning(NumbersModel):
    service_plan_id: str | None = None
    status: str | None = None
    last_updated_time: str | None = None
    campaign_id: str | None = None
    error_codes: list[str] = Field(default_factory=list)


class ScheduledVoiceProvisioning(NumbersModel):
    app_id: str | None = None
    status: str | None = None
    last_updated_time: str | None = None


class ActiveSMSConfiguration(NumbersModel):
    service_plan_id: str | None = None
    scheduled_provisioning: ScheduledProvisioning | None = None
    campaign_id: str | None = None


class ActiveVoiceConfiguration(NumbersModel):
    app_id: str | None = None
    scheduled_voice_provisioning: ScheduledVoiceProvisioning | None = None
    last_updated_time: str | None = None


def _configuration_errors(
    sms_configuration: SMSConfiguration | None,
    voice_configuration: VoiceConfiguration | None,
) -> list[ErrorCode]:
    """Each configuration that is present needs its identifying field."""
    errors: list[ErrorCode] = []
    if sms_configuration is not None and not sms_configuration.service_plan_id:
        errors.append(ErrorCode.SERVICE_PLAN_ID_REQUIRED)
    if voice_configuration is not None and not voice_configuration.app_id:
        errors.append(ErrorCode.APP_ID_REQUIRED)
    return errors


# =============================================================================
# Search Available Numbers
# =============================================================================


class AvailableNumbersRequest(NumbersModel):
    """Search numbers available for activation in a region.

    Ref: https://developers.sinch.com/docs/numbers/api-reference/numbers/tag/Available-Number/
    """

    pattern: str | None = None
    search_pattern: SearchPattern | None = None
    region_code: str = ""
    type: NumberType | None = None
    capabilities: list[Capability] = Field(default_factory=list)
    size: int | None = None

    def with_pattern(self, pattern: str) -> Self:
        """Digits to search for, e.g. ``"2020"`` or ``"+1206"``."""
        self.pattern = pattern
        return self

    def with_search_pattern(self, search_pattern: SearchPattern) -> Self:
        self.search_pattern = search_pattern
        return self

    def with_region_code(self, region_code: str) -> Self:
        """ISO 3166-1 alpha-2 country code, e.g. ``"US"``."""
        self.region_code = region_code.upper()
        return self

    def with_type(self, number_type: NumberType) -> Self:
        self.type = number_type
        return self

    def with_capability(self, *capabilities: Capability) -> Self:
        self.capabilities.extend(capabilities)
        return self

    def with_size(self, size: int) -> Self:
        self.size = size
        return self

    def validate(self) -> None:
        errors: list[ErrorCode] = []
        if not self.region_code:
            errors.append(ErrorCode.REGION_CODE_REQUIRED)
        if self.type is None:
            errors.append(ErrorCode.TYPE_REQUIRED)
        if self.size is not None and self.size < 1:
            errors.append(ErrorCode.INVALID_SIZE)
        raise_for_errors(errors)

    def expected_status_code(self) -> int:
        return httpx.codes.OK

    def method(self) -> str:
        return "GET"

    def path(self) -> str:
        return "/availableNumbers"

    def query_string(self) -> str:
        params: list[tuple[str, str]] = []
        if self.pattern is not None:
            params.append(("numberPattern.pattern", self.pattern))
        if self.search_pattern is not None:
            params.append(("numberPattern.searchPattern", self.search_pattern.value))
        params.append(("regionCode", self.region_code))
        params.append(("type", self.type.value if self.type is not None else ""))
        params.extend(("capabilities", capability.value) for capability in self.capabilities)
        if self.size is not None:
            params.append(("size", str(self.size)))
        return f"?{httpx.QueryParams(params)}"

    def body(self) -> bytes:
        return b""


class AvailableNumber(NumbersModel):
    phone_number: str = ""
    region_code: str = ""
    type: str = ""
    capability: list[str] = Field(default_factory=list)
    setup_price: Money = Field(default_factory=Money)
    monthly_price: Money = Field(default_factory=Money)
    payment_interval_months: int = 0
    supporting_documentation_required: bool = False


class AvailableNumbersResponse(ResponseModel, NumbersModel):
    available_numbers: list[AvailableNumber] = Field(default_factory=list)


# =============================================================================
# Active Numbers
# =============================================================================


class ActiveNumber(NumbersModel):
    """A number rented by the project."""

    phone_number: str = ""
    project_id: str = ""
    display_name: str = ""
    region_code: str = ""
    type: str = ""
    capability: list[str] = Field(default_factory=list)
    money: Money = Field(default_factory=Money)
    payment_interval_months: int = 0
    next_charge_date: str | None = None
    expire_at: str | None = None
    sms_configuration: ActiveSMSConfiguration | None = None
    voice_configuration: ActiveVoiceConfiguration | None = None
    callback_url: str | None = None


class ActiveNumberResponse(ResponseModel, ActiveNumber):
    """The number returned by activate, update and release."""


class ActivateNumberRequest(NumbersModel):
    """Rent an available number and configure it for SMS and/or voice.

    Ref: https://developers.sinch.com/docs/numbers/api-reference/numbers/tag/Available-Number/#tag/Available-Number/operation/NumberService_RentNumber
    """

    phone_number: str = Field(default="", exclude=True)
    sms_configuration: SMSConfiguration | None = None
    voice_configuration: VoiceConfiguration | None = None

    def with_phone_number(self, phone_number: str) -> Self:
        self.phone_number = phone_number
        return self

    def with_sms_configuration(self, service_plan_id: str, campaign_id: str | None = None) -> Self:
        self.sms_configuration = SMSConfiguration(
            service_plan_id=service_plan_id, campaign_id=campaign_id
        )
        return self

    def with_voice_configuration(self, app_id: str) -> Self:
        self.voice_configuration = VoiceConfiguration(app_id=app_id)
        return self

    def validate(self) -> None:
        errors: list[ErrorCode] = []
        if self.sms_configuration is None and self.voice_configuration is None:
            errors.append(ErrorCode.MISSING_CONFIGURATION)
        if not self.phone_number:
            errors.append(ErrorCode.PHONE_NUMBER_REQUIRED)
        errors.extend(_configuration_errors(self.sms_configuration, self.voice_configuration))
        raise_for_errors(errors)

    def expected_status_code(self) -> int:
        return httpx.codes.OK

    def method(self) -> str:
        return "POST"

    def path(self) -> str:
        return f"/availableNumbers/{self.phone_number}:rent"

    def query_string(self) -> str:
        return ""

    def body(self) -> bytes:
        return self.to_json_bytes()


class UpdateNumberRequest(NumbersModel):
    """Change the display name or configuration of a rented number.

    Ref: https://developers.sinch.com/docs/numbers/api-reference/numbers/tag/Active-Number/#tag/Active-Number/operation/NumberService_UpdateActiveNumber
    """

    phone_number: str = Field(default="", exclude=True)
    display_name: str | None = None
    sms_configuration: SMSConfiguration | None = None
    voice_configuration: VoiceConfiguration | None = None

    def with_phone_number(self, phone_number: str) -> Self:
        self.phone_number = phone_number
        return self

    def with_display_name(self, display_name: str) -> Self:
        self.display_name = display_name
        return self

    def with_sms_configuration(self, service_plan_id: str, campaign_id: str | None = None) -> Self:
        self.sms_configuration = SMSConfiguration(
            service_plan_id=service_plan_id, campaign_id=campaign_id
        )
        return self

    def with_voice_configuration(self, app_id: str) -> Self:
        self.voice_configuration = VoiceConfiguration(app_id=app_id)
        return self

    def validate(self) -> None:
        errors: list[ErrorCode] = []
        if not self.phone_number:
            errors.append(ErrorCode.PHONE_NUMBER_REQUIRED)
        errors.extend(_configuration_errors(self.sms_configuration, self.voice_configuration))
        raise_for_errors(errors)

    def expected_status_code(self) -> int:
        return httpx.codes.OK

    def method(self) -> str:
        return "PATCH"

    def path(self) -> str:
        return f"/activeNumbers/{self.phone_number}"

    def query_string(self) -> str:
        return ""

    def body(self) -> bytes:
        return self.to_json_bytes()


class ReleaseNumberRequest(NumbersModel):
    """Release a rented number back to the pool."""

    phone_number: str = ""

    def with_phone_number(self, phone_number: str) -> Self:
        self.phone_number = phone_number
        return self

    def validate(self) -> None:
        raise_for_errors([ErrorCode.PHONE_NUMBER_REQUIRED] if not self.phone_number else [])

    def expected_status_code(self) -> int:
        return httpx.codes.OK

    def method(self) -> str:
        return "POST"

    def path(self) -> str:
        return f"/activeNumbers/{self.phone_number}:release"

    def query_string(self) -> str:
        return ""

    def body(self) -> bytes:
        return b""
