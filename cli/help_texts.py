"""
Centralized Help Text Constants

This module provides all CLI help text constants for commands and options,
exit codes for each error kind, and the shared error reporter that turns a
PresenterError into a message and an exit code.
"""

import logging
import sys

import click

from presenter.errors import (
    ConfigurationError,
    ExtractionError,
    PlanningError,
    PresenterError,
    ProtocolError,
    RemoteCallError,
)
from presenter.llm.errors import ProviderError, ProviderNotAvailableError


# Exit codes for different error types
class ExitCodes:
    SUCCESS = 0
    GENERAL_ERROR = 1
    MISSING_REQUIRED_OPTION = 2
    INVALID_CONFIGURATION = 3
    EXTRACTION_ERROR = 4
    PLANNING_ERROR = 5
    PROTOCOL_ERROR = 6
    NETWORK_ERROR = 8


# Command help texts
CREATE_HELP = "Turn a webpage into a shareable presentation."
EXTRACT_HELP = "Scrape a webpage and print its extracted content as JSON."
PLAN_HELP = "Scrape a webpage and print the planned slides as JSON, without creating a presentation."

# Option help texts
URL_HELP = "Webpage to present"

NO_LLM_HELP = (
    "Plan slides directly from the extracted content (title, key points, "
    "first image) instead of asking a model."
)

PROVIDER_HELP = (
    "Model provider used to plan slides:\n"
    "  cloud-gemini: Google Gemini (default, requires GEMINI_API_KEY)\n"
    "  cloud-openai: OpenAI (requires OPENAI_API_KEY)\n"
    "  cloud-anthropic: Anthropic Claude (requires ANTHROPIC_API_KEY)\n"
    "  auto: First provider with a configured key"
)

MODEL_HELP = "Specific model to use (overrides provider default)"

CONFIG_HELP = (
    "Path to configuration file (.yaml). If not specified, looks for "
    "./.webpage-presenter/config.yaml, then uses environment variables and defaults."
)

PLAN_OUTPUT_HELP = "Write the raw model reply to this file for inspection."

EXTRACT_OUTPUT_HELP = "Write the extracted content JSON to this file instead of stdout."

PLAN_FILE_OUTPUT_HELP = "Write the slide plan JSON to this file instead of stdout."

LOG_LEVEL_HELP = "Logging level for detailed output. Use DEBUG for troubleshooting."

SETUP_INSTRUCTIONS = """
Setup instructions:
  - FIRECRAWL_API_KEY: Firecrawl API key for scraping
  - ALAI_EMAIL / ALAI_PASSWORD: Alai account used to create the presentation
  - GEMINI_API_KEY (or OPENAI_API_KEY / ANTHROPIC_API_KEY): model used to plan slides,
    not needed with --no-llm
Put them in .env, export them, or set them in .webpage-presenter/config.yaml.
"""

# Error kind -> (label, exit code); most specific first
ERROR_KINDS = (
    (ConfigurationError, "Configuration Error", ExitCodes.INVALID_CONFIGURATION),
    (ProviderNotAvailableError, "Configuration Error", ExitCodes.INVALID_CONFIGURATION),
    (ExtractionError, "Extraction Error", ExitCodes.EXTRACTION_ERROR),
    (PlanningError, "Planning Error", ExitCodes.PLANNING_ERROR),
    (ProtocolError, "Protocol Error", ExitCodes.PROTOCOL_ERROR),
    (RemoteCallError, "Remote Call Error", ExitCodes.NETWORK_ERROR),
    (ProviderError, "Model Provider Error", ExitCodes.NETWORK_ERROR),
    (PresenterError, "Error", ExitCodes.GENERAL_ERROR),
)


def classify_error(error: Exception):
    """
    Map an exception onto its display label and exit code.

    Args:
        error: The exception that aborted the command

    Returns:
        Tuple of (label, exit code)
    """
    for error_type, label, exit_code in ERROR_KINDS:
        if isinstance(error, error_type):
            return label, exit_code
    return "Unexpected Error", ExitCodes.GENERAL_ERROR


def handle_presenter_error(error: Exception):
    """
    Report an error on stderr and exit with the code for its kind.

    Args:
        error: The exception that aborted the command
    """
    logger = logging.getLogger(__name__)
    label, exit_code = classify_error(error)

    click.echo(f"\n❌ {label}: {error}", err=True)

    if isinstance(error, ConfigurationError):
        click.echo(SETUP_INSTRUCTIONS, err=True)
    elif isinstance(error, RemoteCallError) and error.status_code is not None:
        click.echo(f"Status: {error.status_code}", err=True)
    elif isinstance(error, PlanningError) and error.response_text:
        logger.debug(f"Model response: {error.response_text}")

    if not isinstance(error, PresenterError):
        logger.exception("Unexpected error")

    sys.exit(exit_code)
