"""
Unit Tests: PresenterConfig

Tests value precedence (environment > config file > defaults) and the
fail-fast credential check.
"""

import os
from unittest.mock import patch

import pytest
import yaml

from presenter.config import DEFAULT_CONFIG_PATH, AlaiConfig, PresenterConfig
from presenter.errors import ConfigurationError


ALL_CREDENTIALS = {
    "FIRECRAWL_API_KEY": "fc-key",
    "ALAI_EMAIL": "user@example.com",
    "ALAI_PASSWORD": "secret",
    "GEMINI_API_KEY": "gemini-key",
}


def write_config(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


# ============================================================================
# Test: Loading
# ============================================================================

def test_defaults_without_config_file():
    config = PresenterConfig.load_from_yaml()

    assert config.provider == "cloud-gemini"
    assert config.use_llm is True
    assert config.scraper.base_url == "https://api.firecrawl.dev/v1"
    assert config.alai.api_base_url == AlaiConfig().api_base_url
    assert config.alai.email == ""


def test_loads_default_config_path(tmp_path):
    write_config(tmp_path / DEFAULT_CONFIG_PATH, {
        "provider": "openai",
        "scraper": {"wait_for": 1000},
        "alai": {"theme_id": "theme-x", "color_set_id": 2},
    })

    config = PresenterConfig.load_from_yaml()

    assert config.provider == "openai"
    assert config.scraper.wait_for == 1000
    assert config.alai.theme_id == "theme-x"
    assert config.alai.color_set_id == 2


def test_explicit_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        PresenterConfig.load_from_yaml(str(tmp_path / "nope.yaml"))


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("scraper: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid YAML"):
        PresenterConfig.load_from_yaml(str(path))


def test_non_mapping_yaml_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        PresenterConfig.load_from_yaml(str(path))


def test_empty_yaml_is_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert PresenterConfig.load_from_yaml(str(path)).provider == "cloud-gemini"


def test_environment_overrides_file(tmp_path):
    path = write_config(tmp_path / "config.yaml", {
        "scraper": {"api_key": "from-file"},
        "alai": {"timeout": 10},
    })

    with patch.dict(os.environ, {"FIRECRAWL_API_KEY": "from-env", "ALAI_TIMEOUT": "99"}):
        config = PresenterConfig.load_from_yaml(str(path))

    assert config.scraper.api_key == "from-env"
    assert config.alai.timeout == 99


@pytest.mark.parametrize("value,expected", [
    ("false", False), ("0", False), ("off", False), ("true", True), ("1", True),
])
def test_use_llm_from_environment(value, expected):
    with patch.dict(os.environ, {"PRESENTER_USE_LLM": value}):
        assert PresenterConfig.load_from_dict({}).use_llm is expected


def test_llm_section_is_loaded():
    config = PresenterConfig.load_from_dict({"llm": {"gemini": {"api_key": "g"}}})
    assert config.llm.gemini.api_key == "g"


# ============================================================================
# Test: Validation
# ============================================================================

def test_validate_passes_with_all_credentials():
    with patch.dict(os.environ, ALL_CREDENTIALS):
        config = PresenterConfig.load_from_dict({})
    config.validate()


def test_validate_lists_every_missing_name():
    config = PresenterConfig.load_from_dict({})

    with pytest.raises(ConfigurationError) as exc_info:
        config.validate()

    message = str(exc_info.value)
    for name in ("FIRECRAWL_API_KEY", "ALAI_EMAIL", "ALAI_PASSWORD", "GEMINI_API_KEY"):
        assert name in message


def test_model_key_not_required_without_llm():
    config = PresenterConfig.load_from_dict({})
    assert "GEMINI_API_KEY" not in config.missing_credentials(use_llm=False)


def test_alai_not_required_when_not_assembling():
    with patch.dict(os.environ, {"FIRECRAWL_API_KEY": "fc"}):
        config = PresenterConfig.load_from_dict({})

    config.validate(use_llm=False, require_alai=False)


def test_provider_override_checks_that_providers_key():
    with patch.dict(os.environ, dict(ALL_CREDENTIALS)):
        config = PresenterConfig.load_from_dict({})

    assert config.missing_credentials(provider="openai") == ["OPENAI_API_KEY"]
    assert config.missing_credentials(provider="claude") == ["ANTHROPIC_API_KEY"]
    assert config.missing_credentials(provider="gemini") == []


def test_auto_provider_needs_any_key():
    with patch.dict(os.environ, {"OPENAI_API_KEY": "sk"}):
        config = PresenterConfig.load_from_dict({})

    assert config.missing_credentials(provider="auto") == [
        "FIRECRAWL_API_KEY", "ALAI_EMAIL", "ALAI_PASSWORD",
    ]


def test_auto_provider_without_keys():
    config = PresenterConfig.load_from_dict({})
    assert "API key for provider auto" in config.missing_credentials(provider="auto")
