"""
Shared CLI Option Decorators

This module provides reusable Click decorators for common CLI options,
ensuring consistency across subcommands.
"""

import click

from presenter.llm.factory import PROVIDER_ALIASES, PROVIDER_IDS

from .help_texts import (
    CONFIG_HELP,
    LOG_LEVEL_HELP,
    MODEL_HELP,
    NO_LLM_HELP,
    PROVIDER_HELP,
    URL_HELP,
)

PROVIDER_CHOICES = list(PROVIDER_IDS) + sorted(PROVIDER_ALIASES) + ["auto"]


def url_argument():
    """Decorator for the positional webpage URL."""
    def decorator(f):
        return click.argument('url')(f)
    return decorator


def output_option(help=None):
    """Decorator for output file options."""
    def decorator(f):
        return click.option(
            '--output', '-o',
            default=None,
            type=click.Path(dir_okay=False),
            help=help or 'Output file path'
        )(f)
    return decorator


def no_llm_option(help=None):
    """Decorator for skipping model-based planning."""
    def decorator(f):
        return click.option(
            '--no-llm',
            is_flag=True,
            default=False,
            help=help or NO_LLM_HELP
        )(f)
    return decorator


def provider_option(help=None):
    """Decorator for model provider selection."""
    def decorator(f):
        return click.option(
            '--provider', '-p',
            default=None,
            type=click.Choice(PROVIDER_CHOICES, case_sensitive=False),
            help=help or PROVIDER_HELP
        )(f)
    return decorator


def model_option(help=None):
    """Decorator for model selection."""
    def decorator(f):
        return click.option(
            '--model', '-m',
            default=None,
            help=help or MODEL_HELP
        )(f)
    return decorator


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config',
            default=None,
            help=help or CONFIG_HELP
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default='INFO',
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or LOG_LEVEL_HELP
        )(f)
    return decorator
