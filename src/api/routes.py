"""Question endpoint for non-browser clients.

Runs the same checks as the question page, then hands files and question
to the configured answer provider.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from src.intake import IntakePolicy, InvalidFileError, filter_pdfs
from src.models.schemas import AskResponse, UploadedFile
from src.providers import AnswerProvider, AnswerProviderError, create_answer_provider

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ask", tags=["ask"])

FAILURE_DETAIL = "Failed to process your request. Please try again."


def get_answer_provider() -> AnswerProvider:
    """Build the answer provider configured for the question page."""
    return create_answer_provider()


async def _read_uploads(files: list[UploadFile]) -> list[UploadedFile]:
    """Read uploaded parts into memory.

    Args:
        files: The multipart file parts.

    Returns:
        UploadedFile objects carrying the client-reported media type.
    """
    return [
        UploadedFile.from_bytes(f.filename or "document.pdf", await f.read(), f.content_type)
        for f in files
    ]


@router.post("", response_model=AskResponse)
async def ask(
    files: Annotated[list[UploadFile], File(description="PDF files to ask about")],
    question: Annotated[str, Form(description="Question about the documents")],
    provider: Annotated[AnswerProvider, Depends(get_answer_provider)],
) -> AskResponse:
    """Answer a question about uploaded PDF documents.

    Args:
        files: One or more PDF files (multipart/form-data, field ``files``).
        question: The question text.
        provider: Answer provider dependency.

    Returns:
        AskResponse with the question, the answer and the file names.

    Raises:
        400: Empty question or a non-PDF file in the batch.
        422: No files or no question field.
        502: Extraction or answer service failed.
    """
    if not question.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please enter a question about your documents.",
        )

    uploads = await _read_uploads(files)
    try:
        accepted = filter_pdfs(uploads, IntakePolicy.REJECT_BATCH)
    except InvalidFileError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Only PDF files are accepted. {e}",
        ) from e

    try:
        answer = await provider.answer(accepted, question)
    except AnswerProviderError as e:
        logger.error(f"Answer provider failed for {len(accepted)} files: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=FAILURE_DETAIL,
        ) from e

    logger.info(f"Answered question about {len(accepted)} files")
    return AskResponse(question=question, answer=answer, files=[f.name for f in accepted])
