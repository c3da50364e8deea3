"""Uniform response envelopes for tool calls and resource reads.

Every tool result and every resource read is expressed as either a
``Success`` carrying ordered content blocks or a ``Failure`` carrying a
human-readable message. The protocol layer never sees a raw exception.
"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


JSON_MIME_TYPE = "application/json"


class ContentBlock(BaseModel):
    """One block of response content: a kind plus its payload."""

    type: Literal["text", "resource"] = "text"
    text: str
    uri: Optional[str] = None
    mime_type: Optional[str] = None


class Success(BaseModel):
    kind: Literal["success"] = "success"
    content: List[ContentBlock] = Field(default_factory=list)

    @classmethod
    def text(cls, text: str) -> "Success":
        """Single text block result (tool calls)."""
        return cls(content=[ContentBlock(type="text", text=text)])

    @classmethod
    def resource(cls, uri: str, text: str, mime_type: str = JSON_MIME_TYPE) -> "Success":
        """Single resource block result (resource reads)."""
        return cls(content=[ContentBlock(type="resource", text=text, uri=uri, mime_type=mime_type)])


class Failure(BaseModel):
    kind: Literal["failure"] = "failure"
    message: str


Envelope = Union[Success, Failure]
