"""Per-page interaction state, independent of NiceGUI widgets.

Each page builds its own instances; nothing here is module-level state.
Widgets read from these objects and call their methods, and user-facing
feedback goes out through the injected notifier.
"""

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from src.models.schemas import Message, MessageRole, Notice, Notifier, QueryResult, UploadedFile
from src.providers.base import AnswerProvider, AnswerProviderError

logger = logging.getLogger(__name__)

FAILURE_NOTICE = Notice(
    title="Error",
    description="Failed to process your request. Please try again.",
    variant="negative",
)


def _ignore(notice: Notice) -> None:
    pass


class QuestionForm:
    """Single-question submission: files + question in, one live result out."""

    def __init__(self, provider: AnswerProvider, notify: Notifier | None = None) -> None:
        self._provider = provider
        self._notify = notify or _ignore
        self.files: list[UploadedFile] = []
        self.question: str = ""
        self.result: QueryResult | None = None
        self.loading: bool = False

    def set_files(self, files: Sequence[UploadedFile]) -> None:
        """Receive the accepted selection from the file selector."""
        self.files = list(files)

    @property
    def can_submit(self) -> bool:
        return bool(self.files) and not self.loading

    async def submit(self) -> QueryResult | None:
        """Validate, call the provider once and store the answer.

        Returns:
            The new result, or None if nothing was submitted or the call failed.
        """
        if self.loading:
            return None

        if not self.files:
            self._notify(
                Notice(
                    title="No files selected",
                    description="Please select at least one PDF file.",
                    variant="negative",
                )
            )
            return None

        if not self.question.strip():
            self._notify(
                Notice(
                    title="No question provided",
                    description="Please enter a question about your documents.",
                    variant="negative",
                )
            )
            return None

        # Captured by value; later edits to the form do not affect this request
        files = list(self.files)
        question = self.question

        self.loading = True
        try:
            answer = await self._provider.answer(files, question)
        except AnswerProviderError:
            logger.exception("Error calling answer provider")
            self._notify(FAILURE_NOTICE)
            return None
        finally:
            self.loading = False

        self.result = QueryResult(
            question=question,
            file_names=[f.name for f in files],
            answer=answer,
        )
        self._notify(Notice(title="Analysis complete", description="Your PDF analysis is ready."))
        return self.result


class ResultView:
    """Display and copy of the live answer text."""

    def __init__(
        self,
        write_clipboard: Callable[[str], None],
        notify: Notifier | None = None,
    ) -> None:
        self._write_clipboard = write_clipboard
        self._notify = notify or _ignore
        self.text: str = ""

    def show(self, result: QueryResult | None) -> None:
        """Replace the displayed text with the result's answer, verbatim."""
        if result is not None:
            self.text = result.answer

    @property
    def visible(self) -> bool:
        return bool(self.text)

    def copy(self) -> None:
        """Copy the exact stored text to the clipboard."""
        if not self.text:
            return
        self._write_clipboard(self.text)
        self._notify(Notice(title="Copied!", description="Result copied to clipboard."))


class ChatState(str, Enum):
    """Conversation lifecycle."""

    EMPTY = "empty"
    AWAITING_RESPONSE = "awaiting_response"
    IDLE = "idle"


class ChatSession:
    """Manages chat state for one chat page.

    Turns are appended in order and never edited. Only the current question
    and files go to the provider; earlier turns are not sent. ``on_change``
    fires after every append and whenever the pending flag flips.
    """

    def __init__(
        self,
        provider: AnswerProvider,
        notify: Notifier | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._provider = provider
        self._notify = notify or _ignore
        self._on_change = on_change or (lambda: None)
        self.messages: list[Message] = []
        self.files: list[UploadedFile] = []
        self.is_pending: bool = False

    def set_files(self, files: Sequence[UploadedFile]) -> None:
        """Receive the accepted selection from the file selector."""
        self.files = list(files)
        self._on_change()

    @property
    def has_documents(self) -> bool:
        return bool(self.files)

    @property
    def state(self) -> ChatState:
        if self.is_pending:
            return ChatState.AWAITING_RESPONSE
        if not self.messages:
            return ChatState.EMPTY
        return ChatState.IDLE

    def can_send(self, text: str) -> bool:
        return bool(text.strip()) and self.has_documents and not self.is_pending

    def add_message(self, role: MessageRole, content: str) -> Message:
        message = Message(role=role, content=content)
        self.messages.append(message)
        return message

    async def send(self, text: str) -> Message | None:
        """Append a user turn, await the provider, append the assistant turn.

        Returns:
            The assistant message, or None if nothing was sent or the call failed.
        """
        if not self.can_send(text):
            return None

        content = text.strip()
        files = list(self.files)
        self.add_message(MessageRole.USER, content)
        self.is_pending = True
        self._on_change()
        try:
            reply = await self._provider.answer(files, content)
        except AnswerProviderError:
            logger.exception("Error calling answer provider")
            self._notify(FAILURE_NOTICE)
            return None
        else:
            return self.add_message(MessageRole.ASSISTANT, reply)
        finally:
            self.is_pending = False
            self._on_change()
