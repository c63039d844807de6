"""
Cloud OpenAI LLM Provider

Cloud-based provider for OpenAI's GPT models. Handles authentication,
API calls and token counting with tiktoken.

File naming follows pattern: cloud_{service}.py
Provider ID: cloud-openai
"""

from typing import Dict, Any

from presenter.llm.config import OpenAIConfig
from presenter.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse
from presenter.llm.errors import ProviderNotAvailableError, classify_provider_error


class CloudOpenAIProvider(BaseLLMProvider):
    """Cloud OpenAI LLM provider.

    Configuration is loaded from:
    1. Environment variables (OPENAI_API_KEY, OPENAI_MODEL, etc.)
    2. Config file (config.yaml llm.openai section)
    3. Defaults (gpt-4-turbo, 4096 max_tokens, etc.)

    Example:
        >>> from presenter.llm.config import OpenAIConfig
        >>> provider = CloudOpenAIProvider(OpenAIConfig(api_key="sk-..."))
        >>> request = LLMRequest(prompt="Plan slides", max_tokens=500, temperature=0.4)
        >>> response = provider.generate(request)
        >>> print(response.content)
    """

    SUPPORTED_MODELS = [
        "gpt-3.5-turbo",
        "gpt-4",
        "gpt-4-turbo",
        "gpt-4o",
        "gpt-4o-mini",
    ]

    def __init__(self, config: OpenAIConfig):
        """Initialize Cloud OpenAI provider.

        Args:
            config: OpenAI configuration loaded from environment/config/defaults
        """
        self.config = config
        self._client = None
        self._tiktoken_encoding = None

    @property
    def client(self):
        """Lazy-load OpenAI client.

        Raises:
            ProviderNotAvailableError: If OpenAI SDK is not installed
        """
        if self._client is None:
            try:
                import openai
            except ImportError:
                raise ProviderNotAvailableError(
                    "OpenAI SDK not installed. Install with: pip install openai"
                )
            self._client = openai.OpenAI(
                api_key=self.config.api_key,
                timeout=self.config.timeout
            )
        return self._client

    def _count_tokens(self, text: str) -> int:
        """Count tokens in text using tiktoken's cl100k_base encoding."""
        if self._tiktoken_encoding is None:
            try:
                import tiktoken
            except ImportError:
                raise ProviderNotAvailableError(
                    "tiktoken not installed. Install with: pip install tiktoken"
                )
            self._tiktoken_encoding = tiktoken.get_encoding("cl100k_base")
        return len(self._tiktoken_encoding.encode(text))

    def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate completion from OpenAI.

        Args:
            request: Standardized LLM request

        Returns:
            Standardized LLM response with content and metadata

        Raises:
            ProviderError: If the API call fails (classified subclass)
        """
        model = request.model or self.config.default_model

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "user", "content": request.prompt}
                ],
                max_tokens=request.max_tokens,
                temperature=request.temperature,
                **request.metadata
            )
        except Exception as e:
            raise classify_provider_error("OpenAI", e)

        content = response.choices[0].message.content or ""

        input_tokens = self._count_tokens(request.prompt)
        output_tokens = self._count_tokens(content)

        return LLMResponse(
            content=content,
            model_used=model,
            tokens_used=input_tokens + output_tokens,
            metadata={
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "finish_reason": response.choices[0].finish_reason,
                "response_id": response.id,
            }
        )

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": "cloud-openai",
            "default_model": self.config.default_model,
            "supported_models": list(self.SUPPORTED_MODELS),
        }

    def validate_requirements(self) -> bool:
        """Check if OpenAI is available.

        Performs a health check by attempting to list available models.
        """
        if not self.config.api_key:
            return False

        try:
            self.client.models.list()
            return True
        except Exception:
            return False
