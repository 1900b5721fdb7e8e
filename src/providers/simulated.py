"""Offline answer provider returning a canned reply after a fixed delay."""

import asyncio
import logging
from collections.abc import Sequence

from src.models.schemas import UploadedFile

logger = logging.getLogger(__name__)

SIMULATED_ANSWER = (
    "I'm analyzing your PDF documents to answer your question. This is a demo "
    "response - in a real application, I would process your uploaded PDFs and "
    "provide specific answers based on their content."
)


class SimulatedAnswerProvider:
    """Answers every question with the same demo text. Never touches the network."""

    def __init__(self, delay: float = 1.5, answer: str = SIMULATED_ANSWER) -> None:
        self._delay = delay
        self._answer = answer

    async def answer(self, files: Sequence[UploadedFile], question: str) -> str:
        logger.debug(f"Simulating answer for {len(files)} files after {self._delay}s")
        await asyncio.sleep(self._delay)
        return self._answer
