"""Request schema for the question-image relay endpoint."""

from typing import Optional

from pydantic import BaseModel, StrictStr, field_validator


class QuestionImageRequest(BaseModel):
    """
    Inbound body of `POST /api/gemini`.

    Note:
    - Both fields are optional at the schema level; the endpoint reports a
      missing or empty `image_base64` as a 400 itself.
    - A non-string `mime_type` is treated as absent rather than rejected.
    - Unknown fields are ignored.
    """
    image_base64: Optional[StrictStr] = None
    mime_type: Optional[str] = None

    @field_validator("mime_type", mode="before")
    @classmethod
    def drop_non_string_mime_type(cls, value):
        return value if isinstance(value, str) else None
