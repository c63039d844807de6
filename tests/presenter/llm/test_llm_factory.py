"""
Unit Tests: LLMProviderFactory and LLMConfig
"""

import os
from unittest.mock import patch

import pytest

from presenter.errors import ConfigurationError
from presenter.llm.config import AnthropicConfig, GeminiConfig, LLMConfig, OpenAIConfig
from presenter.llm.factory import AutoSelectionConfig, LLMProviderFactory
from presenter.llm.providers.cloud_gemini import CloudGeminiProvider
from presenter.llm.providers.cloud_openai import CloudOpenAIProvider


@pytest.fixture
def configured():
    return LLMConfig(
        gemini=GeminiConfig(api_key="gemini-key"),
        openai=OpenAIConfig(api_key="openai-key"),
        anthropic=AnthropicConfig(api_key=""),
    )


# ============================================================================
# Test: Provider creation
# ============================================================================

def test_create_gemini(configured):
    provider = LLMProviderFactory(configured).create_provider("cloud-gemini")
    assert isinstance(provider, CloudGeminiProvider)


@pytest.mark.parametrize("alias,expected", [
    ("gemini", CloudGeminiProvider),
    ("OpenAI", CloudOpenAIProvider),
    (" cloud-openai ", CloudOpenAIProvider),
])
def test_aliases(configured, alias, expected):
    assert isinstance(LLMProviderFactory(configured).create_provider(alias), expected)


def test_providers_are_cached(configured):
    factory = LLMProviderFactory(configured)
    assert factory.create_provider("gemini") is factory.create_provider("cloud-gemini")

    factory.clear_cache()
    assert factory._provider_cache == {}


def test_missing_key_raises_configuration_error(configured):
    with pytest.raises(ConfigurationError, match="ANTHROPIC_API_KEY"):
        LLMProviderFactory(configured).create_provider("claude")


def test_unknown_provider(configured):
    with pytest.raises(ConfigurationError, match="Unknown provider"):
        LLMProviderFactory(configured).create_provider("cloud-mystery")


# ============================================================================
# Test: Auto-selection
# ============================================================================

def test_auto_selects_first_valid_provider(configured):
    factory = LLMProviderFactory(
        configured,
        AutoSelectionConfig(priority_order=["cloud-anthropic", "cloud-gemini"]),
    )

    with patch.object(CloudGeminiProvider, "validate_requirements", return_value=True):
        provider = factory.create_provider("auto")

    assert isinstance(provider, CloudGeminiProvider)


def test_auto_without_any_provider():
    factory = LLMProviderFactory(LLMConfig())

    with pytest.raises(ConfigurationError, match="No LLM providers available"):
        factory.create_provider("auto")


# ============================================================================
# Test: has_credentials
# ============================================================================

def test_has_credentials(configured):
    factory = LLMProviderFactory(configured)

    assert factory.has_credentials("gemini")
    assert factory.has_credentials("cloud-openai")
    assert not factory.has_credentials("anthropic")
    assert factory.has_credentials("auto")
    assert not factory.has_credentials("cloud-mystery")


def test_has_credentials_auto_with_nothing():
    assert not LLMProviderFactory(LLMConfig()).has_credentials("auto")


# ============================================================================
# Test: LLMConfig precedence
# ============================================================================

def test_config_defaults():
    config = LLMConfig.load_from_dict(None)

    assert config.gemini.default_model == "gemini-1.5-flash"
    assert config.gemini.max_tokens == 8192
    assert config.openai.default_model == "gpt-4-turbo"
    assert config.anthropic.api_key == ""


def test_config_values_from_dict():
    config = LLMConfig.load_from_dict({
        "gemini": {"default_model": "gemini-1.5-pro", "temperature": 0.1},
        "openai": {"max_tokens": 1000},
    })

    assert config.gemini.default_model == "gemini-1.5-pro"
    assert config.gemini.temperature == 0.1
    assert config.openai.max_tokens == 1000


def test_environment_overrides_dict():
    with patch.dict(os.environ, {"GEMINI_MODEL": "gemini-2.0-flash", "GEMINI_MAX_TOKENS": "2048"}):
        config = LLMConfig.load_from_dict({"gemini": {"default_model": "gemini-1.5-pro"}})

    assert config.gemini.default_model == "gemini-2.0-flash"
    assert config.gemini.max_tokens == 2048
