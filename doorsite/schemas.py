from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from doorsite.errors import ValidationError

REQUIRED_FIELDS = ("name", "phone", "message")


def is_blank(value) -> bool:
    """Missing, null, false, empty string, zero or NaN. Empty lists and objects count as filled."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


# --- CONTACT SCHEMAS ---
class ContactSubmission(BaseModel):
    # Any JSON type is accepted; the sanitizer coerces to str.
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    phone: Any = None
    email: Any = None
    message: Any = None

    def require_fields(self):
        for field in REQUIRED_FIELDS:
            if is_blank(getattr(self, field)):
                raise ValidationError(f"missing required field: {field}")
        return self


# --- EMAIL SCHEMAS ---
class OutboundEmail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from")
    to: List[str]
    subject: str
    html: str
    reply_to: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
