"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - make_pdf / make_file: Build in-memory UploadedFile objects
    - make_provider: Build a recording stub answer provider
    - notices: List collecting notices, with a notifier appending to it
    - provider_config: ProviderConfig pointing at fake endpoints
    - async_client: HTTPX client for API testing with a stub provider
"""

import asyncio
from collections.abc import AsyncGenerator, Callable, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import app
from src.api.routes import get_answer_provider
from src.models.schemas import Notice, UploadedFile
from src.providers.config import ProviderConfig

SAMPLE_PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF\n"


class StubProvider:
    """Answer provider that records calls and returns a fixed answer.

    Optionally blocks on ``gate`` until the test releases it, and raises
    ``error`` instead of answering when set.
    """

    def __init__(
        self,
        answer: str = "Stub answer",
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.answer_text = answer
        self.error = error
        self.gate = gate
        self.calls: list[tuple[list[UploadedFile], str]] = []

    async def answer(self, files: Sequence[UploadedFile], question: str) -> str:
        self.calls.append((list(files), question))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.answer_text


@pytest.fixture
def make_file() -> Callable[..., UploadedFile]:
    """Return a factory for in-memory uploaded files."""

    def _make(
        name: str = "report.pdf",
        content_type: str = "application/pdf",
        content: bytes = SAMPLE_PDF_BYTES,
    ) -> UploadedFile:
        return UploadedFile.from_bytes(name, content, content_type)

    return _make


@pytest.fixture
def make_pdf(make_file: Callable[..., UploadedFile]) -> Callable[..., UploadedFile]:
    """Return a factory for files declared as PDF."""

    def _make(name: str = "report.pdf") -> UploadedFile:
        return make_file(name=name)

    return _make


@pytest.fixture
def make_provider() -> type[StubProvider]:
    """Return the stub provider class for per-test construction."""
    return StubProvider


@pytest.fixture
def notices() -> list[Notice]:
    """Collect notices emitted during a test."""
    return []


@pytest.fixture
def notify(notices: list[Notice]) -> Callable[[Notice], None]:
    """Notifier that appends to the ``notices`` fixture."""
    return notices.append


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Provider configuration pointing at fake endpoints.

    Returns:
        Remote configuration with no timeout and no simulated delay.
    """
    return ProviderConfig(
        provider="remote",
        chat_provider="simulated",
        extraction_url="https://extract.test/functions/v1/extract-text-pdf",
        extraction_api_key=None,
        answer_url="https://answer.test/api/answer_pdf_question",
        file_field_style="repeated",
        request_timeout=None,
        simulated_delay=0.0,
    )


@pytest.fixture
def stub_provider() -> StubProvider:
    """Stub provider used by the API dependency override."""
    return StubProvider(answer="Revenue: $5M\nNet income: $1M")


@pytest.fixture
async def async_client(stub_provider: StubProvider) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    The answer provider dependency is replaced by ``stub_provider``.

    Yields:
        Configured AsyncClient for making test requests.
    """
    app.dependency_overrides[get_answer_provider] = lambda: stub_provider
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
