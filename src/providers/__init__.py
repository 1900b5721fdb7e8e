"""Answer providers: given files and a question, produce an answer.

Two interchangeable strategies sit behind the AnswerProvider protocol:

    - RemoteAnswerProvider: extraction call followed by an answer call over HTTP
    - SimulatedAnswerProvider: fixed delay and canned text, no network

Pages and the API depend only on the protocol, so either strategy can be
swapped in through configuration without touching interaction logic.
"""

from src.providers.base import AnswerProvider, AnswerProviderError
from src.providers.config import ProviderConfig, ProviderMode, get_provider_config
from src.providers.remote import RemoteAnswerProvider
from src.providers.simulated import SimulatedAnswerProvider


def create_answer_provider(
    config: ProviderConfig | None = None,
    mode: ProviderMode | None = None,
) -> AnswerProvider:
    """Build the answer provider for a page.

    Args:
        config: Provider configuration. Loads from environment if not provided.
        mode: Strategy to build; defaults to ``config.provider``.

    Returns:
        A ready-to-use AnswerProvider.

    Raises:
        ValueError: If the remote strategy is requested without EXTRACTION_URL.
    """
    config = config or get_provider_config()
    mode = mode or config.provider

    if mode == "simulated":
        return SimulatedAnswerProvider(delay=config.simulated_delay)
    return RemoteAnswerProvider(config)


__all__ = [
    "AnswerProvider",
    "AnswerProviderError",
    "ProviderConfig",
    "ProviderMode",
    "RemoteAnswerProvider",
    "SimulatedAnswerProvider",
    "create_answer_provider",
    "get_provider_config",
]
