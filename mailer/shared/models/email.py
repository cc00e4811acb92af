"""
Mailer API request and response models.

The request models mirror the JSON body accepted by the Mailer backend's
``/send`` endpoint; the response model mirrors what it answers with.
"""

from pydantic import BaseModel, Field, SecretStr, StrictBool, StrictStr, field_serializer, field_validator
from typing import Any, Tuple


class Creds(BaseModel):
    """Mailer account credentials, sent in the request body on every call"""
    email: str = Field(..., description="Address used to authenticate against the mailer")
    pwd: SecretStr = Field(..., description="Password for the mailer account")

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @field_serializer("pwd")
    def reveal_pwd(self, value: SecretStr) -> str:
        # The backend expects the plaintext password; TLS is the only protection.
        return value.get_secret_value()


class EmailRequest(BaseModel):
    """Full request body for a single send"""
    creds: Creds = Field(..., description="Mailer account credentials")
    to_list: Tuple[str, ...] = Field(default_factory=tuple, description="Recipient addresses")
    subject: str = Field("", description="Subject line")
    body: str = Field("", description="Message content, HTML or plain text")
    html: bool = Field(False, description="True when body is HTML")
    from_name: str = Field("", description="Display name of the sender")

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "creds": {"email": "noreply@example.com", "pwd": "secret"},
                "to_list": ["user@example.com"],
                "subject": "Welcome!",
                "body": "<h1>Hello world</h1>",
                "html": True,
                "from_name": "Example Bot"
            }
        }
    }

    def to_payload(self) -> bytes:
        """Encode the request as the JSON document posted to ``/send``"""
        return self.model_dump_json().encode("utf-8")


class EmailResponse(BaseModel):
    """Body returned by the backend after a send attempt"""
    success: StrictBool = Field(False, description="Whether the backend accepted the email")
    message: StrictStr = Field("", description="Advisory text from the backend")

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "success": True,
                "message": "email sent"
            }
        }
    }

    @field_validator("success", "message", mode="before")
    @classmethod
    def null_as_zero_value(cls, v: Any, info) -> Any:
        # JSON null leaves the field at its zero value; other types stay strict
        if v is None:
            return cls.model_fields[info.field_name].default
        return v
