"""
Base LLM Provider Protocol

Defines the abstract base class and standardized request/response formats
for all generative model providers. The slide planner only depends on this
interface, so Gemini, OpenAI and Anthropic are interchangeable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, Optional


@dataclass
class LLMRequest:
    """Standardized request format for all LLM providers.

    Attributes:
        prompt: The complete prompt text to send to the LLM
        max_tokens: Maximum number of tokens to generate in the response
        temperature: Sampling temperature (0.0 = deterministic, 1.0 = creative)
        model: Optional specific model to use (overrides provider default)
        metadata: Additional provider-specific parameters
    """
    prompt: str
    max_tokens: int
    temperature: float
    model: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate request parameters."""
        if not self.prompt:
            raise ValueError("Prompt cannot be empty")
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be positive")
        if not 0.0 <= self.temperature <= 2.0:
            raise ValueError("temperature must be between 0.0 and 2.0")


@dataclass
class LLMResponse:
    """Standardized response format from all LLM providers.

    Attributes:
        content: The generated text content from the LLM
        model_used: The actual model that processed the request
        tokens_used: Total number of tokens consumed (input + output)
        metadata: Additional provider-specific response data
    """
    content: str
    model_used: str
    tokens_used: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM provider implementations.

    The provider is responsible for:
    - Making API calls to the model service
    - Reporting provider capabilities
    - Validating that the provider is usable

    Providers accept their configuration object in __init__ rather than
    reading credentials from module-level state.
    """

    @abstractmethod
    def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate completion from LLM.

        Args:
            request: Standardized LLM request with prompt and parameters

        Returns:
            Standardized LLM response with content and metadata

        Raises:
            ProviderError: If the API call fails
            ProviderNotAvailableError: If the provider SDK is not installed
        """
        pass

    @abstractmethod
    def get_capabilities(self) -> Dict[str, Any]:
        """Return provider capabilities.

        Returns:
            Dictionary containing at least:
                - provider: Provider identifier (e.g., "cloud-gemini")
                - default_model: Model used when the request names none
                - supported_models: List of known model identifiers
        """
        pass

    @abstractmethod
    def validate_requirements(self) -> bool:
        """Check if provider is available.

        Returns:
            True if provider is ready to use, False otherwise
        """
        pass
