import uuid
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    """Return a short random token for files and messages.

    Nine hex characters; collisions are unlikely within one page session
    but not guaranteed.
    """
    return uuid.uuid4().hex[:9]


class MessageRole(str, Enum):
    """Speaker of a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class UploadedFile(BaseModel):
    """A file the user picked in the browser.

    Attributes:
        id: Opaque identifier, unique within the selection.
        name: Display name (original filename).
        size: Size in bytes.
        content_type: Media type as reported by the client.
        content: Raw bytes, kept out of serialized output.
    """

    id: str = Field(default_factory=new_id)
    name: str
    size: int = Field(ge=0)
    content_type: str = ""
    content: bytes = Field(default=b"", repr=False, exclude=True)

    @classmethod
    def from_bytes(cls, name: str, content: bytes, content_type: str | None) -> "UploadedFile":
        """Wrap raw upload bytes with a fresh identifier."""
        return cls(
            name=name,
            size=len(content),
            content_type=content_type or "",
            content=content,
        )


class Message(BaseModel):
    """A single turn in the chat transcript.

    Attributes:
        id: Opaque message identifier.
        content: The message text.
        role: Who produced the turn.
        timestamp: When the turn was appended.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    content: str
    role: MessageRole
    timestamp: datetime = Field(default_factory=datetime.now)


class QueryResult(BaseModel):
    """The live answer of the question form, with the request that produced it."""

    question: str
    file_names: list[str] = Field(default_factory=list)
    answer: str


class Notice(BaseModel):
    """A transient user-facing notification."""

    title: str
    description: str = ""
    variant: Literal["positive", "negative"] = "positive"


Notifier = Callable[[Notice], None]


class AnswerRequest(BaseModel):
    """JSON body of the answer call."""

    pdf_text: str
    question: str


class AnswerResponse(BaseModel):
    """JSON body returned by the answer call."""

    answer: str | None = None


class AskResponse(BaseModel):
    """Response of the POST /ask endpoint.

    Attributes:
        question: The question as submitted.
        answer: Answer text, verbatim from the answer service.
        files: Names of the files the question was asked about.
    """

    question: str
    answer: str
    files: list[str]
