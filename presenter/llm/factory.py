"""
LLM Provider Factory

Factory pattern for creating LLM providers with auto-selection support.
Handles provider instantiation, caching, and selection of the first
available provider.
"""

import logging
from typing import Dict, Optional, List
from dataclasses import dataclass, field

from presenter.llm.config import LLMConfig
from presenter.llm.providers.base import BaseLLMProvider
from presenter.llm.providers.cloud_gemini import CloudGeminiProvider
from presenter.llm.providers.cloud_openai import CloudOpenAIProvider
from presenter.llm.providers.cloud_anthropic import CloudAnthropicProvider
from presenter.llm.errors import ConfigurationError, LLMError


logger = logging.getLogger(__name__)

PROVIDER_IDS = ["cloud-gemini", "cloud-openai", "cloud-anthropic"]

# Short names accepted on the command line and in config files
PROVIDER_ALIASES = {
    "gemini": "cloud-gemini",
    "openai": "cloud-openai",
    "claude": "cloud-anthropic",
    "anthropic": "cloud-anthropic",
}


@dataclass
class AutoSelectionConfig:
    """Configuration for auto-selection behavior.

    Attributes:
        priority_order: List of providers to try in order
    """
    priority_order: List[str] = field(default_factory=lambda: list(PROVIDER_IDS))


class LLMProviderFactory:
    """Factory for creating LLM providers with auto-selection support.

    Example:
        >>> from presenter.llm.config import LLMConfig
        >>> factory = LLMProviderFactory(LLMConfig.load_from_dict({}))
        >>> provider = factory.create_provider("cloud-gemini")
        >>> # Or use auto-selection
        >>> provider = factory.create_provider("auto")
    """

    def __init__(
        self,
        config: LLMConfig,
        auto_selection: Optional[AutoSelectionConfig] = None
    ):
        """Initialize LLM provider factory.

        Args:
            config: LLM configuration with all provider configs
            auto_selection: Configuration for auto-selection behavior
        """
        self.config = config
        self.auto_selection = auto_selection or AutoSelectionConfig()
        self._provider_cache: Dict[str, BaseLLMProvider] = {}

    @staticmethod
    def normalize_provider_id(provider: str) -> str:
        """Map short aliases onto canonical provider ids."""
        provider = provider.strip().lower()
        return PROVIDER_ALIASES.get(provider, provider)

    def create_provider(self, provider: str) -> BaseLLMProvider:
        """Create provider for specified provider name.

        Args:
            provider: Provider id, alias, or "auto" for auto-selection

        Returns:
            Instantiated LLM provider

        Raises:
            ConfigurationError: If provider is unknown or not configured
        """
        provider = self.normalize_provider_id(provider)

        if provider == "auto":
            return self._auto_select_provider()

        if provider in self._provider_cache:
            return self._provider_cache[provider]

        provider_instance = self._instantiate_provider(provider)
        self._provider_cache[provider] = provider_instance
        return provider_instance

    def has_credentials(self, provider: str) -> bool:
        """Report whether an API key is configured for the provider.

        "auto" is satisfied when any provider has a key.
        """
        provider = self.normalize_provider_id(provider)
        keys = {
            "cloud-gemini": self.config.gemini.api_key,
            "cloud-openai": self.config.openai.api_key,
            "cloud-anthropic": self.config.anthropic.api_key,
        }
        if provider == "auto":
            return any(keys.values())
        return bool(keys.get(provider))

    def _auto_select_provider(self) -> BaseLLMProvider:
        """Auto-select first available provider.

        Raises:
            ConfigurationError: If no providers are available
        """
        errors = []

        for provider in self.auto_selection.priority_order:
            try:
                provider_instance = self._instantiate_provider(provider)
            except (ConfigurationError, LLMError) as e:
                errors.append(f"{provider}: {e}")
                continue

            if provider_instance.validate_requirements():
                logger.info(f"Auto-selected LLM provider: {provider}")
                self._provider_cache[provider] = provider_instance
                return provider_instance
            errors.append(f"{provider}: validation failed")

        error_details = "\n".join(f"  - {err}" for err in errors)
        raise ConfigurationError(
            f"No LLM providers available. Tried:\n{error_details}\n\n"
            "Setup instructions:\n"
            "  - cloud-gemini: Set GEMINI_API_KEY environment variable\n"
            "  - cloud-openai: Set OPENAI_API_KEY environment variable\n"
            "  - cloud-anthropic: Set ANTHROPIC_API_KEY environment variable"
        )

    def _instantiate_provider(self, provider: str) -> BaseLLMProvider:
        """Instantiate specific provider type.

        Raises:
            ConfigurationError: If provider is unknown or not configured
        """
        if provider == "cloud-gemini":
            if not self.config.gemini.api_key:
                raise ConfigurationError(
                    "Gemini API key not configured. "
                    "Set GEMINI_API_KEY environment variable or provide in config."
                )
            return CloudGeminiProvider(self.config.gemini)

        elif provider == "cloud-openai":
            if not self.config.openai.api_key:
                raise ConfigurationError(
                    "OpenAI API key not configured. "
                    "Set OPENAI_API_KEY environment variable or provide in config."
                )
            return CloudOpenAIProvider(self.config.openai)

        elif provider == "cloud-anthropic":
            if not self.config.anthropic.api_key:
                raise ConfigurationError(
                    "Anthropic API key not configured. "
                    "Set ANTHROPIC_API_KEY environment variable or provide in config."
                )
            return CloudAnthropicProvider(self.config.anthropic)

        else:
            raise ConfigurationError(
                f"Unknown provider: {provider}. "
                f"Valid options: {', '.join(PROVIDER_IDS)}, auto"
            )

    def clear_cache(self):
        """Clear the provider cache."""
        self._provider_cache.clear()
