"""
Create Subcommand Module

Full run: scrape the page, extract and plan its content, build the slides
on the presentation service and print the share link.
"""

import logging

import click

from presenter.config import PresenterConfig
from presenter.orchestrator import PlanOptions, WebpagePresenter
from presenter.utils.logging_config import configure_logging

from .help_texts import CREATE_HELP, PLAN_OUTPUT_HELP, handle_presenter_error
from .shared_options import (
    config_option,
    log_level_option,
    model_option,
    no_llm_option,
    provider_option,
    url_argument,
)


@click.command(help=CREATE_HELP)
@url_argument()
@no_llm_option()
@provider_option()
@model_option()
@config_option()
@click.option(
    '--plan-output',
    default=None,
    type=click.Path(dir_okay=False),
    help=PLAN_OUTPUT_HELP
)
@log_level_option()
def create(url, no_llm, provider, model, config, plan_output, log_level):
    """
    Turn a webpage into a shareable presentation.

    Examples:
        webpage-presenter create https://example.com/article
        webpage-presenter create https://example.com/article --no-llm
        webpage-presenter create https://example.com/article --provider openai --model gpt-4o
    """
    configure_logging(level=log_level.lower(), force=True)
    logger = logging.getLogger(__name__)
    logger.debug(f"CLI arguments: url={url}, no_llm={no_llm}, provider={provider}, model={model}")

    try:
        presenter_config = PresenterConfig.load_from_yaml(config)
        presenter = WebpagePresenter(presenter_config)
        session = presenter.run(url, PlanOptions(
            use_llm=False if no_llm else None,
            provider=provider,
            model=model,
            plan_output=plan_output,
        ))
    except Exception as e:
        handle_presenter_error(e)

    click.echo("✅ Presentation created successfully!")
    click.echo(f"Shareable link: {session.share_url}")
