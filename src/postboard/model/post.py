import json
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, field_validator


class PostPayload(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None

    @field_validator("title", "content", "author", mode="before")
    @classmethod
    def as_text(cls, value: Any) -> Optional[str]:
        # columns are text: booleans and numbers are stringified, objects and arrays stored as JSON
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return str(value)

    @classmethod
    def from_body(cls, body: Any) -> "PostPayload":
        """Build a payload from a decoded request body; anything but a JSON object counts as {}."""
        return cls.model_validate(body if isinstance(body, dict) else {})


class Post(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    created_at: datetime
    id: int
