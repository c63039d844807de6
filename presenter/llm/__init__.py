"""
LLM Infrastructure Layer

Generative model providers used by the slide planner. The planner treats
the model as a black box that turns a prompt into text; everything
provider-specific lives here.

Key Components:
    - providers/: provider implementations (CloudGeminiProvider, CloudOpenAIProvider, ...)
    - factory.py: LLMProviderFactory for provider instantiation
    - config.py: Configuration with environment variable support
    - errors.py: LLM-specific error classes

Usage:
    >>> from presenter.llm import LLMProviderFactory, LLMConfig, LLMRequest
    >>>
    >>> factory = LLMProviderFactory(LLMConfig.load_from_dict({}))
    >>> provider = factory.create_provider("cloud-gemini")
    >>> response = provider.generate(LLMRequest(prompt="Hello", max_tokens=100, temperature=0.4))
"""

from presenter.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse
from presenter.llm.factory import LLMProviderFactory, AutoSelectionConfig
from presenter.llm.config import (
    LLMConfig,
    GeminiConfig,
    OpenAIConfig,
    AnthropicConfig,
)
from presenter.llm.errors import (
    LLMError,
    ConfigurationError,
    ProviderError,
    ProviderNotAvailableError,
    RateLimitError,
    AuthenticationError,
    InvalidRequestError,
)

__all__ = [
    "BaseLLMProvider",
    "LLMRequest",
    "LLMResponse",
    "LLMProviderFactory",
    "AutoSelectionConfig",
    "LLMConfig",
    "GeminiConfig",
    "OpenAIConfig",
    "AnthropicConfig",
    "LLMError",
    "ConfigurationError",
    "ProviderError",
    "ProviderNotAvailableError",
    "RateLimitError",
    "AuthenticationError",
    "InvalidRequestError",
]
