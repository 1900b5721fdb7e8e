"""Answer provider configuration with environment variable loading.

Pydantic-based configuration for the extraction and answer services.
Values come from the environment, with a .env file loaded first.
"""

import os
from typing import Annotated, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_ANSWER_URL = "https://cmfspyd53pg0823qu9fdad3fi.agent.a.smyth.ai/api/answer_pdf_question"

ProviderMode = Literal["remote", "simulated"]


class ProviderConfig(BaseModel):
    """Configuration for answer providers.

    Attributes:
        provider: Strategy used by the question page.
        chat_provider: Strategy used by the chat page.
        extraction_url: Endpoint that turns uploaded PDFs into text.
        extraction_api_key: Optional key sent to the extraction endpoint.
        answer_url: Endpoint that answers a question about extracted text.
        file_field_style: Multipart naming, ``file`` repeated or ``file_0, file_1, ...``.
        request_timeout: Per-request timeout in seconds (None waits indefinitely).
        simulated_delay: Seconds the simulated provider waits before answering.
    """

    model_config = ConfigDict(validate_default=True)

    provider: ProviderMode = Field(
        default_factory=lambda: (os.getenv("ANSWER_PROVIDER") or "remote").strip().lower(),
        description="Answer strategy for the question page",
    )
    chat_provider: ProviderMode = Field(
        default_factory=lambda: (os.getenv("CHAT_PROVIDER") or "simulated").strip().lower(),
        description="Answer strategy for the chat page",
    )
    extraction_url: str | None = Field(
        default_factory=lambda: os.getenv("EXTRACTION_URL") or None,
        description="PDF text extraction endpoint",
    )
    extraction_api_key: str | None = Field(
        default_factory=lambda: os.getenv("EXTRACTION_API_KEY") or None,
        description="Bearer key for the extraction endpoint",
    )
    answer_url: str = Field(
        default_factory=lambda: os.getenv("ANSWER_URL") or DEFAULT_ANSWER_URL,
        description="Question answering endpoint",
    )
    file_field_style: Literal["repeated", "indexed"] = Field(
        default_factory=lambda: (
            (os.getenv("EXTRACTION_FILE_FIELD") or "repeated").strip().lower()
        ),
        description="Multipart field naming for uploaded files",
    )
    request_timeout: Annotated[float, Field(gt=0)] | None = Field(
        default_factory=lambda: os.getenv("REQUEST_TIMEOUT") or None,
        description="Timeout in seconds for each outbound request",
    )
    simulated_delay: float = Field(
        default_factory=lambda: os.getenv("SIMULATED_DELAY") or "1.5",
        ge=0.0,
        le=60.0,
        description="Delay before the simulated provider answers",
    )

    @field_validator("extraction_url", "answer_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Require an absolute http(s) URL."""
        if v is None:
            return v
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Endpoint must be an http(s) URL, got {v!r}")
        return v


def get_provider_config() -> ProviderConfig:
    """Create provider configuration from environment.

    Returns:
        Configured ProviderConfig instance.

    Raises:
        pydantic.ValidationError: If a value is malformed.
    """
    return ProviderConfig()
