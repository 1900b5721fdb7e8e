"""File selection state for one page instance.

Holds the accepted PDFs and reports every change to the parent
through a callback. Nothing here is shared between pages.
"""

import logging
from collections.abc import Callable, Iterable

from src.intake.pdf_filter import IntakePolicy, InvalidFileError, filter_pdfs
from src.models.schemas import Notice, Notifier, UploadedFile

logger = logging.getLogger(__name__)

FilesCallback = Callable[[list[UploadedFile]], None]


def _plural_pdfs(count: int) -> str:
    return f"{count} PDF{'s' if count > 1 else ''}"


class FileSelection:
    """Accepted PDF files for a single page.

    Under REJECT_BATCH a new batch replaces the selection, under FILTER it
    is appended. The parent receives a copy of the full selection after
    every change.
    """

    def __init__(
        self,
        policy: IntakePolicy = IntakePolicy.REJECT_BATCH,
        on_change: FilesCallback | None = None,
        notify: Notifier | None = None,
    ) -> None:
        self.policy = policy
        self._files: list[UploadedFile] = []
        self._on_change = on_change
        self._notify = notify or (lambda notice: None)

    @property
    def files(self) -> list[UploadedFile]:
        return list(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def add(self, candidates: Iterable[UploadedFile]) -> list[UploadedFile]:
        """Run a batch through the PDF filter and update the selection.

        Args:
            candidates: Files picked in one user action.

        Returns:
            The files accepted from this batch (empty if rejected).
        """
        batch = list(candidates)
        try:
            accepted = filter_pdfs(batch, self.policy)
        except InvalidFileError as e:
            self._notify(Notice(title="Invalid files", description=str(e), variant="negative"))
            return []

        if not accepted:
            return []

        if self.policy is IntakePolicy.REJECT_BATCH:
            self._files = accepted
            notice = Notice(
                title=f"{_plural_pdfs(len(accepted))} selected",
                description="Ready to ask questions about your documents.",
            )
        else:
            self._files = [*self._files, *accepted]
            notice = Notice(
                title=f"{_plural_pdfs(len(accepted))} uploaded",
                description="Your documents are ready for analysis.",
            )

        logger.info(f"Accepted {len(accepted)} PDFs, {len(self._files)} selected")
        self._changed()
        self._notify(notice)
        return accepted

    def remove(self, file_id: str) -> None:
        """Drop a file from the selection by id."""
        remaining = [f for f in self._files if f.id != file_id]
        if len(remaining) == len(self._files):
            return
        self._files = remaining
        self._changed()

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.files)
