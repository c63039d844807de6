"""
Cloud Anthropic Claude Provider

Cloud-based LLM provider implementation for Anthropic's Claude models via
the Anthropic API.

File naming follows pattern: cloud_{provider}.py
Provider ID: cloud-anthropic
"""

from typing import Dict, Any

from presenter.llm.config import AnthropicConfig
from presenter.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse
from presenter.llm.errors import (
    AuthenticationError,
    ProviderNotAvailableError,
    classify_provider_error,
)


class CloudAnthropicProvider(BaseLLMProvider):
    """Cloud Anthropic Claude LLM provider.

    Deployment: Cloud (requires API key and internet connection)
    Provider: Anthropic
    Access Method: Direct API

    Example:
        >>> from presenter.llm.config import AnthropicConfig
        >>> provider = CloudAnthropicProvider(AnthropicConfig(api_key="sk-ant-..."))
        >>> request = LLMRequest(prompt="Plan slides", max_tokens=4096, temperature=0.4)
        >>> response = provider.generate(request)
    """

    SUPPORTED_MODELS = [
        "claude-3-opus-20240229",
        "claude-3-5-sonnet-20241022",
        "claude-3-5-sonnet-20240620",
        "claude-3-haiku-20240307",
    ]

    def __init__(self, config: AnthropicConfig):
        """Initialize Cloud Anthropic provider.

        Args:
            config: Anthropic configuration

        Raises:
            AuthenticationError: If API key is not provided
            ProviderNotAvailableError: If anthropic package is not installed
        """
        if not config.api_key:
            raise AuthenticationError(
                "Anthropic API key not found. Set ANTHROPIC_API_KEY environment "
                "variable or provide api_key in configuration."
            )

        self.config = config

        try:
            import anthropic
            self.client = anthropic.Anthropic(api_key=self.config.api_key)
        except ImportError:
            raise ProviderNotAvailableError(
                "anthropic package not installed. Install with: pip install anthropic"
            )

    def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate completion using Claude.

        Args:
            request: LLM request with prompt and parameters

        Returns:
            LLM response with generated content

        Raises:
            ProviderError: If the API call fails (classified subclass)
        """
        model = request.model or self.config.default_model

        try:
            response = self.client.messages.create(
                model=model,
                max_tokens=request.max_tokens or self.config.max_tokens,
                temperature=request.temperature,
                messages=[{"role": "user", "content": request.prompt}],
                timeout=self.config.timeout
            )
        except Exception as e:
            raise classify_provider_error("Claude", e)

        content = response.content[0].text
        input_tokens = response.usage.input_tokens
        output_tokens = response.usage.output_tokens

        return LLMResponse(
            content=content,
            model_used=model,
            tokens_used=input_tokens + output_tokens,
            metadata={
                "provider": "anthropic",
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
            }
        )

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": "cloud-anthropic",
            "default_model": self.config.default_model,
            "supported_models": list(self.SUPPORTED_MODELS),
        }

    def validate_requirements(self) -> bool:
        return self.client is not None and bool(self.config.api_key)
