"""
Pytest configuration and fixtures for test isolation.
"""
import logging
import os

import pytest


# Credentials and overrides read by PresenterConfig / LLMConfig
PRESENTER_ENV_PREFIXES = (
    "FIRECRAWL_",
    "ALAI_",
    "GEMINI_",
    "OPENAI_",
    "ANTHROPIC_",
    "PRESENTER_",
)


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests.

    Variables the presenter reads are removed up front so that a developer's
    .env (loaded when the cli package is imported) never leaks into a test.
    """
    original_env = os.environ.copy()
    for name in list(os.environ):
        if name.startswith(PRESENTER_ENV_PREFIXES):
            del os.environ[name]
    yield
    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """Run each test from a temporary working directory.

    Keeps the default config path (.webpage-presenter/config.yaml) and any
    written output files out of the repository.
    """
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls made by CLI commands under test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def sample_markdown():
    """Markdown rendering of a small article."""
    return (
        "# Machine Learning in Practice\n"
        "\n"
        "This article explains how teams ship machine learning systems to production.\n"
        "\n"
        "![Architecture diagram](/images/architecture.png)\n"
        "\n"
        "## Data Collection\n"
        "\n"
        "Gather and label the data.\n"
        "\n"
        "## Model Training\n"
        "\n"
        "## Deployment and Monitoring\n"
        "\n"
        "![Dashboard](https://cdn.example.com/dashboard.jpg)\n"
    )


@pytest.fixture
def sample_html():
    """HTML rendering of the same article."""
    return (
        "<html><head><title>ML in Practice | Example Blog</title>"
        '<meta name="description" content="How teams ship ML systems.">'
        "</head><body>"
        "<h1>Machine Learning in Practice</h1>"
        "<p>This article explains how teams ship machine learning systems to production.</p>"
        "<h2>Data Collection</h2>"
        "<h2>Feature Stores for Reuse</h2>"
        "<h3>Model Training</h3>"
        '<img src="/images/architecture.png">'
        '<img src="https://cdn.example.com/team.webp">'
        "</body></html>"
    )
