"""Unit tests for PDF intake filtering and file selection."""

import pytest
import pytest_check as check

from src.intake import (
    PDF_MIME_TYPE,
    FileSelection,
    IntakePolicy,
    InvalidFileError,
    filter_pdfs,
    format_file_size,
)


class TestFilterPdfs:
    """Tests for batch filtering by declared media type."""

    def test_accepts_all_pdf_batch(self, make_pdf) -> None:
        """A batch of PDFs is accepted in order."""
        batch = [make_pdf("a.pdf"), make_pdf("b.pdf")]

        accepted = filter_pdfs(batch, IntakePolicy.REJECT_BATCH)

        assert [f.name for f in accepted] == ["a.pdf", "b.pdf"]

    def test_reject_batch_policy_rejects_mixed_batch(self, make_pdf, make_file) -> None:
        """One non-PDF file rejects the whole batch."""
        batch = [make_pdf("a.pdf"), make_file("notes.txt", content_type="text/plain")]

        with pytest.raises(InvalidFileError, match="only PDF"):
            filter_pdfs(batch, IntakePolicy.REJECT_BATCH)

    def test_filter_policy_drops_non_pdfs(self, make_pdf, make_file) -> None:
        """Non-PDF files are dropped silently under the filter policy."""
        batch = [
            make_file("photo.jpg", content_type="image/jpeg"),
            make_pdf("a.pdf"),
        ]

        accepted = filter_pdfs(batch, IntakePolicy.FILTER)

        assert [f.name for f in accepted] == ["a.pdf"]

    def test_filter_policy_rejects_batch_without_pdf(self, make_file) -> None:
        """A batch with no PDF at all is rejected under the filter policy."""
        batch = [make_file("notes.txt", content_type="text/plain")]

        with pytest.raises(InvalidFileError):
            filter_pdfs(batch, IntakePolicy.FILTER)

    def test_empty_batch_returns_empty(self) -> None:
        """An empty batch is neither accepted nor rejected."""
        check.equal(filter_pdfs([], IntakePolicy.REJECT_BATCH), [])
        check.equal(filter_pdfs([], IntakePolicy.FILTER), [])

    def test_trusts_declared_type_over_content(self, make_file) -> None:
        """Declared PDF type is accepted even when bytes are not a PDF."""
        fake = make_file("fake.pdf", content_type=PDF_MIME_TYPE, content=b"plain text")

        assert filter_pdfs([fake]) == [fake]

    def test_pdf_extension_without_pdf_type_is_rejected(self, make_file) -> None:
        """The filename extension alone does not make a file a PDF."""
        wrong_type = make_file("report.pdf", content_type="application/octet-stream")

        with pytest.raises(InvalidFileError):
            filter_pdfs([wrong_type])


class TestFormatFileSize:
    """Tests for human-readable file sizes."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0 Bytes"),
            (512, "512 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (10 * 1024 * 1024, "10 MB"),
            (1234567, "1.18 MB"),
            (3 * 1024**3, "3 GB"),
            (2 * 1024**4, "2048 GB"),
            (13255991318282, "12345.67 GB"),
        ],
    )
    def test_formats_size(self, size: int, expected: str) -> None:
        """Sizes are rounded to two decimals without trailing zeros."""
        assert format_file_size(size) == expected


class TestFileSelection:
    """Tests for per-page selection state."""

    def test_reject_batch_replaces_selection(self, make_pdf, notices, notify) -> None:
        """A new accepted batch replaces the previous selection."""
        changes: list[list[str]] = []
        selection = FileSelection(
            IntakePolicy.REJECT_BATCH,
            on_change=lambda files: changes.append([f.name for f in files]),
            notify=notify,
        )

        selection.add([make_pdf("a.pdf")])
        selection.add([make_pdf("b.pdf"), make_pdf("c.pdf")])

        check.equal([f.name for f in selection.files], ["b.pdf", "c.pdf"])
        check.equal(changes, [["a.pdf"], ["b.pdf", "c.pdf"]])
        check.equal(notices[0].title, "1 PDF selected")
        check.equal(notices[1].title, "2 PDFs selected")
        check.equal(notices[1].description, "Ready to ask questions about your documents.")

    def test_rejected_batch_keeps_selection_and_warns(
        self, make_pdf, make_file, notices, notify
    ) -> None:
        """A rejected batch leaves the selection untouched and warns once."""
        changes: list[list] = []
        selection = FileSelection(
            IntakePolicy.REJECT_BATCH, on_change=changes.append, notify=notify
        )
        selection.add([make_pdf("keep.pdf")])
        notices.clear()

        accepted = selection.add([make_pdf("a.pdf"), make_file("x.txt", content_type="text/plain")])

        check.equal(accepted, [])
        check.equal([f.name for f in selection.files], ["keep.pdf"])
        check.equal(len(changes), 1)
        check.equal(len(notices), 1)
        check.equal(notices[0].title, "Invalid files")
        check.equal(notices[0].variant, "negative")

    def test_filter_policy_appends(self, make_pdf, make_file, notices, notify) -> None:
        """Under the filter policy new PDFs are appended to the selection."""
        selection = FileSelection(IntakePolicy.FILTER, notify=notify)

        selection.add([make_pdf("a.pdf")])
        selection.add([make_pdf("b.pdf"), make_file("x.txt", content_type="text/plain")])

        check.equal([f.name for f in selection.files], ["a.pdf", "b.pdf"])
        check.equal(notices[-1].title, "1 PDF uploaded")
        check.equal(notices[-1].description, "Your documents are ready for analysis.")

    def test_empty_batch_is_noop(self, notices, notify) -> None:
        """Cancelling the picker changes nothing and shows nothing."""
        changes: list[list] = []
        selection = FileSelection(on_change=changes.append, notify=notify)

        selection.add([])

        check.equal(len(selection), 0)
        check.equal(changes, [])
        check.equal(notices, [])

    def test_remove_by_id(self, make_pdf) -> None:
        """Removing a file drops exactly that file and reports the change."""
        changes: list[list[str]] = []
        selection = FileSelection(
            IntakePolicy.FILTER,
            on_change=lambda files: changes.append([f.name for f in files]),
        )
        a, b = make_pdf("a.pdf"), make_pdf("b.pdf")
        selection.add([a, b])

        selection.remove(a.id)

        check.equal([f.name for f in selection.files], ["b.pdf"])
        check.equal(changes[-1], ["b.pdf"])

    def test_remove_unknown_id_is_noop(self, make_pdf) -> None:
        """Removing an unknown id does not notify the parent."""
        changes: list[list] = []
        selection = FileSelection(on_change=changes.append)
        selection.add([make_pdf()])

        selection.remove("missing")

        assert len(changes) == 1

    def test_files_are_unique_ids(self, make_pdf) -> None:
        """Each accepted file carries its own identifier."""
        selection = FileSelection(IntakePolicy.FILTER)
        selection.add([make_pdf("same.pdf") for _ in range(20)])

        ids = [f.id for f in selection.files]
        assert len(set(ids)) == len(ids)

    def test_files_property_returns_copy(self, make_pdf) -> None:
        """Mutating the returned list does not change the selection."""
        selection = FileSelection()
        selection.add([make_pdf()])

        selection.files.clear()

        assert len(selection) == 1
