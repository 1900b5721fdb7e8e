"""Two-stage remote answer provider over HTTP.

1. **Extraction call** - the selected PDFs are posted as multipart form data
   to the extraction endpoint. The response must be a JSON object; a truthy
   ``error`` member means the service failed. The whole object is serialized
   and used as the document text, whatever keys the service chose.

2. **Answer call** - ``{"pdf_text": ..., "question": ...}`` is posted as JSON
   to the answer endpoint, which replies ``{"answer": ...}``.

Every failure along the way surfaces as a single AnswerProviderError. There
is no retry; a timeout applies only when one is configured.
"""

import json
import logging
from collections.abc import Sequence

import httpx

from src.models.schemas import AnswerRequest, AnswerResponse, UploadedFile
from src.providers.base import AnswerProviderError
from src.providers.config import ProviderConfig

logger = logging.getLogger(__name__)

NO_ANSWER = "No answer returned"

FilePart = tuple[str, tuple[str, bytes, str]]


class RemoteAnswerProvider:
    """Answers questions through the extraction and answer services.

    Each call opens its own client, so concurrent pages never share
    connection state.
    """

    def __init__(
        self,
        config: ProviderConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            config: Endpoint and request settings.
            transport: Optional transport override, used by tests.
        """
        if not config.extraction_url:
            raise ValueError("EXTRACTION_URL is required for the remote answer provider")
        self._config = config
        self._transport = transport

    def build_file_parts(self, files: Sequence[UploadedFile]) -> list[FilePart]:
        """Build multipart file parts in the configured field naming."""
        parts: list[FilePart] = []
        for i, f in enumerate(files):
            field = f"file_{i}" if self._config.file_field_style == "indexed" else "file"
            parts.append((field, (f.name, f.content, f.content_type or "application/pdf")))
        return parts

    def _extraction_headers(self) -> dict[str, str]:
        key = self._config.extraction_api_key
        if not key:
            return {}
        return {"Authorization": f"Bearer {key}", "apikey": key}

    async def extract_text(self, client: httpx.AsyncClient, files: Sequence[UploadedFile]) -> str:
        """Run the extraction call and return the serialized response body."""
        response = await client.post(
            self._config.extraction_url,
            files=self.build_file_parts(files),
            headers=self._extraction_headers(),
        )
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise AnswerProviderError("Extraction response is not a JSON object")
        if data.get("error"):
            raise AnswerProviderError(f"Extraction service reported an error: {data['error']}")

        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    async def ask(self, client: httpx.AsyncClient, pdf_text: str, question: str) -> str:
        """Run the answer call and return the answer text verbatim."""
        payload = AnswerRequest(pdf_text=pdf_text, question=question)
        response = await client.post(self._config.answer_url, json=payload.model_dump())
        response.raise_for_status()

        body = AnswerResponse.model_validate(response.json())
        return body.answer or NO_ANSWER

    async def answer(self, files: Sequence[UploadedFile], question: str) -> str:
        """Extract text from the files, then ask the question about it.

        Args:
            files: Selected PDFs, captured at submission time.
            question: The user's question.

        Returns:
            The answer text.

        Raises:
            AnswerProviderError: On any transport, status or payload failure.
        """
        if not files:
            raise AnswerProviderError("No files to extract text from")

        logger.info(f"Extracting text from {len(files)} files")
        try:
            async with httpx.AsyncClient(
                timeout=self._config.request_timeout,
                transport=self._transport,
            ) as client:
                pdf_text = await self.extract_text(client, files)
                logger.info(f"Extracted {len(pdf_text)} characters, requesting answer")
                return await self.ask(client, pdf_text, question)
        except httpx.HTTPStatusError as e:
            logger.error(f"{e.request.url} returned HTTP {e.response.status_code}")
            raise AnswerProviderError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"Request failed: {e}")
            raise AnswerProviderError(f"Connection failed: {e}") from e
        except ValueError as e:
            logger.error(f"Malformed response body: {e}")
            raise AnswerProviderError(f"Malformed response: {e}") from e
