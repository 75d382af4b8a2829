"""Pydantic base models shared by request and response payloads."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict

# Wire format for timestamps: YYYY-MM-DDThh:mm:ss.SSSZ
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"
_TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def is_timestamp(value: str) -> bool:
    """Check that ``value`` is a valid millisecond-precision UTC timestamp."""
    if not _TIMESTAMP_RE.match(value):
        return False
    try:
        datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        return False
    return True


class SinchModel(BaseModel):
    """Base for every payload model.

    Fields use Python names and serialize to the API's wire names through
    aliases. Unknown fields in API responses are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_json_bytes(self) -> bytes:
        """Serialize with wire names, omitting unset optional fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


class ResponseModel(SinchModel):
    """A response receiver: created empty, populated once from the API reply."""

    def from_json(self, data: bytes) -> None:
        """Populate this instance in place from a JSON payload.

        Raises:
            pydantic.ValidationError: The payload is not valid JSON or does not
                match the model.
        """
        parsed = self.model_validate_json(data)
        for name in type(self).model_fields:
            setattr(self, name, getattr(parsed, name))
