"""File intake for user-selected documents.

Responsibilities:
    - Filtering batches to the PDF media type under a batch policy
    - Holding the accepted selection for one page instance
    - Reporting selection changes to the owning component
    - Human-readable file sizes for the file list

The media type is the one reported by the browser; file contents are
never inspected here.
"""

from src.intake.pdf_filter import (
    PDF_MIME_TYPE,
    IntakePolicy,
    InvalidFileError,
    filter_pdfs,
    format_file_size,
    is_pdf,
)
from src.intake.selection import FileSelection

__all__ = [
    "PDF_MIME_TYPE",
    "FileSelection",
    "IntakePolicy",
    "InvalidFileError",
    "filter_pdfs",
    "format_file_size",
    "is_pdf",
]
