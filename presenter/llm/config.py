"""
LLM Configuration Management

Configuration for the generative model providers used by the slide planner.
Values are resolved with the following precedence:
1. Environment variables (highest priority)
2. Config file values (llm section of .webpage-presenter/config.yaml)
3. Default values (lowest priority)

Usage:
    >>> from presenter.llm.config import LLMConfig
    >>>
    >>> llm_config = LLMConfig.load_from_dict({'gemini': {'default_model': 'gemini-1.5-pro'}})
    >>> print(llm_config.gemini.default_model)
"""

from dataclasses import dataclass, field
from typing import Optional, Any, Dict
import os


@dataclass
class GeminiConfig:
    """Configuration for Google Gemini provider.

    Attributes:
        api_key: Gemini API key (required for cloud-gemini provider)
        default_model: Default model to use if not specified in request
        max_tokens: Default maximum tokens for responses
        temperature: Default sampling temperature
        timeout: Request timeout in seconds
    """
    api_key: str = ""
    default_model: str = "gemini-1.5-flash"
    max_tokens: int = 8192
    temperature: float = 0.4
    timeout: int = 120


@dataclass
class OpenAIConfig:
    """Configuration for OpenAI provider.

    Attributes:
        api_key: OpenAI API key (required for cloud-openai provider)
        default_model: Default model to use if not specified in request
        max_tokens: Default maximum tokens for responses
        temperature: Default sampling temperature
        timeout: Request timeout in seconds
    """
    api_key: str = ""
    default_model: str = "gpt-4-turbo"
    max_tokens: int = 4096
    temperature: float = 0.4
    timeout: int = 60


@dataclass
class AnthropicConfig:
    """Configuration for Anthropic provider.

    Attributes:
        api_key: Anthropic API key (required for cloud-anthropic provider)
        default_model: Default model to use if not specified in request
        max_tokens: Default maximum tokens for responses
        temperature: Default sampling temperature
        timeout: Request timeout in seconds
    """
    api_key: str = ""
    default_model: str = "claude-3-5-sonnet-20241022"
    max_tokens: int = 4096
    temperature: float = 0.4
    timeout: int = 60


@dataclass
class LLMConfig:
    """Complete LLM configuration for all providers.

    Attributes:
        gemini: Configuration for Gemini provider
        openai: Configuration for OpenAI provider
        anthropic: Configuration for Anthropic provider
    """
    gemini: GeminiConfig = field(default_factory=GeminiConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    anthropic: AnthropicConfig = field(default_factory=AnthropicConfig)

    @classmethod
    def load_from_dict(cls, llm_section: Optional[Dict[str, Any]]) -> 'LLMConfig':
        """Load LLM configuration from dictionary.

        Configuration precedence (highest to lowest):
        1. Environment variables
        2. Config dict values
        3. Default values

        Args:
            llm_section: Dictionary containing llm configuration (may be None)

        Returns:
            LLMConfig instance with all provider configurations loaded
        """
        llm_section = llm_section or {}
        gemini = llm_section.get('gemini') or {}
        openai = llm_section.get('openai') or {}
        anthropic = llm_section.get('anthropic') or {}

        gemini_config = GeminiConfig(
            api_key=cls._resolve_value(gemini.get('api_key'), 'GEMINI_API_KEY', ''),
            default_model=cls._resolve_value(
                gemini.get('default_model'), 'GEMINI_MODEL', 'gemini-1.5-flash'
            ),
            max_tokens=int(cls._resolve_value(
                gemini.get('max_tokens'), 'GEMINI_MAX_TOKENS', 8192
            )),
            temperature=float(cls._resolve_value(
                gemini.get('temperature'), 'GEMINI_TEMPERATURE', 0.4
            )),
            timeout=int(cls._resolve_value(
                gemini.get('timeout'), 'GEMINI_TIMEOUT', 120
            ))
        )

        openai_config = OpenAIConfig(
            api_key=cls._resolve_value(openai.get('api_key'), 'OPENAI_API_KEY', ''),
            default_model=cls._resolve_value(
                openai.get('default_model'), 'OPENAI_MODEL', 'gpt-4-turbo'
            ),
            max_tokens=int(cls._resolve_value(
                openai.get('max_tokens'), 'OPENAI_MAX_TOKENS', 4096
            )),
            temperature=float(cls._resolve_value(
                openai.get('temperature'), 'OPENAI_TEMPERATURE', 0.4
            )),
            timeout=int(cls._resolve_value(
                openai.get('timeout'), 'OPENAI_TIMEOUT', 60
            ))
        )

        anthropic_config = AnthropicConfig(
            api_key=cls._resolve_value(anthropic.get('api_key'), 'ANTHROPIC_API_KEY', ''),
            default_model=cls._resolve_value(
                anthropic.get('default_model'), 'ANTHROPIC_MODEL', 'claude-3-5-sonnet-20241022'
            ),
            max_tokens=int(cls._resolve_value(
                anthropic.get('max_tokens'), 'ANTHROPIC_MAX_TOKENS', 4096
            )),
            temperature=float(cls._resolve_value(
                anthropic.get('temperature'), 'ANTHROPIC_TEMPERATURE', 0.4
            )),
            timeout=int(cls._resolve_value(
                anthropic.get('timeout'), 'ANTHROPIC_TIMEOUT', 60
            ))
        )

        return cls(
            gemini=gemini_config,
            openai=openai_config,
            anthropic=anthropic_config
        )

    @staticmethod
    def _resolve_value(config_value: Any, env_var: str, default: Any) -> Any:
        """Resolve configuration value with precedence: ENV > Config > Default.

        Example:
            >>> # With GEMINI_MODEL="gemini-1.5-pro" in environment
            >>> _resolve_value(None, 'GEMINI_MODEL', 'gemini-1.5-flash')
            'gemini-1.5-pro'
        """
        env_value = os.getenv(env_var)
        if env_value is not None:
            return env_value

        if config_value is not None:
            return config_value

        return default
