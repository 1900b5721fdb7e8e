"""The answer provider capability shared by the question form and the chat."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from src.models.schemas import UploadedFile


class AnswerProviderError(Exception):
    """Raised when an answer could not be produced.

    Covers transport failures, non-success HTTP statuses, malformed
    bodies and errors reported by the remote services.
    """

    pass


@runtime_checkable
class AnswerProvider(Protocol):
    """Given files and a question, produce an answer asynchronously."""

    async def answer(self, files: Sequence[UploadedFile], question: str) -> str:
        """Answer a question about the given files.

        Raises:
            AnswerProviderError: If no answer could be produced.
        """
        ...
