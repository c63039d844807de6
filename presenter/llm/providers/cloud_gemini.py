"""
Cloud Google Gemini Provider

Cloud-based provider for Google's Gemini models via the google-generativeai
SDK. Gemini is the default planner model (gemini-1.5-flash).

File naming follows pattern: cloud_{service}.py
Provider ID: cloud-gemini
"""

from typing import Dict, Any

from presenter.llm.config import GeminiConfig
from presenter.llm.providers.base import BaseLLMProvider, LLMRequest, LLMResponse
from presenter.llm.errors import (
    AuthenticationError,
    ProviderNotAvailableError,
    classify_provider_error,
)


class CloudGeminiProvider(BaseLLMProvider):
    """Cloud Gemini LLM provider.

    Deployment: Cloud (requires API key and internet connection)
    Provider: Google
    Access Method: google-generativeai SDK

    Example:
        >>> from presenter.llm.config import GeminiConfig
        >>> provider = CloudGeminiProvider(GeminiConfig(api_key="..."))
        >>> request = LLMRequest(prompt="Plan slides", max_tokens=8192, temperature=0.4)
        >>> response = provider.generate(request)
    """

    SUPPORTED_MODELS = [
        "gemini-1.5-flash",
        "gemini-1.5-pro",
        "gemini-2.0-flash",
        "gemini-2.5-flash",
    ]

    def __init__(self, config: GeminiConfig):
        """Initialize Cloud Gemini provider.

        Args:
            config: Gemini configuration

        Raises:
            AuthenticationError: If API key is not provided
        """
        if not config.api_key:
            raise AuthenticationError(
                "Gemini API key not found. Set GEMINI_API_KEY environment "
                "variable or provide api_key in configuration."
            )

        self.config = config
        self._genai = None

    @property
    def genai(self):
        """Lazy-load the configured google.generativeai module.

        Raises:
            ProviderNotAvailableError: If google-generativeai is not installed
        """
        if self._genai is None:
            try:
                import google.generativeai as genai
            except ImportError:
                raise ProviderNotAvailableError(
                    "google-generativeai package not installed. "
                    "Install with: pip install google-generativeai"
                )
            genai.configure(api_key=self.config.api_key)
            self._genai = genai
        return self._genai

    def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate completion using Gemini.

        Args:
            request: LLM request with prompt and parameters

        Returns:
            LLM response with generated content

        Raises:
            ProviderError: If the API call fails (classified subclass)
        """
        model_name = request.model or self.config.default_model
        genai = self.genai

        try:
            model = genai.GenerativeModel(model_name)
            response = model.generate_content(
                request.prompt,
                generation_config=genai.types.GenerationConfig(
                    temperature=request.temperature,
                    max_output_tokens=request.max_tokens,
                ),
                request_options={"timeout": self.config.timeout},
            )
            content = response.text
        except Exception as e:
            raise classify_provider_error("Gemini", e)

        usage = getattr(response, "usage_metadata", None)
        total_tokens = getattr(usage, "total_token_count", 0) or 0

        return LLMResponse(
            content=content,
            model_used=model_name,
            tokens_used=total_tokens,
            metadata={"provider": "gemini"}
        )

    def get_capabilities(self) -> Dict[str, Any]:
        return {
            "provider": "cloud-gemini",
            "default_model": self.config.default_model,
            "supported_models": list(self.SUPPORTED_MODELS),
        }

    def validate_requirements(self) -> bool:
        """Check that an API key is configured and the SDK imports."""
        if not self.config.api_key:
            return False
        try:
            return self.genai is not None
        except ProviderNotAvailableError:
            return False
