"""Pydantic models for page state and wire payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - UploadedFile: A PDF picked by the user, held in memory for the page session
    - Message: Individual turn in the chat transcript
    - QueryResult: The live answer of the question form
    - Notice: Transient notification shown to the user (delivered to a Notifier)
    - AnswerRequest / AnswerResponse: Answer service wire shapes
    - AskResponse: Body of the POST /ask endpoint
"""

from src.models.schemas import (
    AnswerRequest,
    AnswerResponse,
    AskResponse,
    Message,
    MessageRole,
    Notice,
    Notifier,
    QueryResult,
    UploadedFile,
    new_id,
)

__all__ = [
    "AnswerRequest",
    "AnswerResponse",
    "AskResponse",
    "Message",
    "MessageRole",
    "Notice",
    "Notifier",
    "QueryResult",
    "UploadedFile",
    "new_id",
]
