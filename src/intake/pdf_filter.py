"""PDF intake filtering by client-reported media type.

Admits only files whose declared type is PDF. The type comes from the
browser and is not verified against the file bytes; the extraction
service is the authoritative validator.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from src.models.schemas import UploadedFile

logger = logging.getLogger(__name__)

# Constants
PDF_MIME_TYPE = "application/pdf"
_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


class IntakePolicy(str, Enum):
    """How a batch containing non-PDF files is treated.

    REJECT_BATCH: one non-PDF file rejects the whole batch.
    FILTER: non-PDF files are dropped; the batch is rejected only if no PDF remains.
    """

    REJECT_BATCH = "reject_batch"
    FILTER = "filter"


class InvalidFileError(Exception):
    """Raised when a batch of files is rejected by the PDF filter."""

    pass


def is_pdf(file: UploadedFile) -> bool:
    """Return True when the client declared the file as a PDF."""
    return file.content_type == PDF_MIME_TYPE


def filter_pdfs(
    candidates: Iterable[UploadedFile],
    policy: IntakePolicy = IntakePolicy.REJECT_BATCH,
) -> list[UploadedFile]:
    """Apply the intake policy to a batch of candidate files.

    Args:
        candidates: Files picked by the user in one action.
        policy: Whether a single non-PDF rejects the batch or is dropped.

    Returns:
        The accepted PDF files, in their original order. Empty when the
        batch itself was empty.

    Raises:
        InvalidFileError: If the batch is rejected under the policy.
    """
    files = list(candidates)
    if not files:
        return []

    pdfs = [f for f in files if is_pdf(f)]
    rejected = len(files) - len(pdfs)

    if policy is IntakePolicy.REJECT_BATCH and rejected:
        logger.info(f"Rejecting batch of {len(files)} files: {rejected} not declared as PDF")
        raise InvalidFileError("Please select only PDF files.")

    if not pdfs:
        logger.info(f"Rejecting batch of {len(files)} files: no PDF found")
        raise InvalidFileError("Please select only PDF files.")

    if rejected:
        logger.debug(f"Dropped {rejected} non-PDF files from batch")

    return pdfs


def format_file_size(size: int) -> str:
    """Format a byte count for display, e.g. ``1.5 KB`` or ``0 Bytes``."""
    if size <= 0:
        return "0 Bytes"

    index = 0
    value = float(size)
    while value >= 1024 and index < len(_SIZE_UNITS) - 1:
        value /= 1024
        index += 1

    number = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{number} {_SIZE_UNITS[index]}"
