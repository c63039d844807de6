"""
Plan Subcommand Module

Scrapes, extracts and plans a webpage, printing the presentation title and
slide descriptors as JSON. Useful for checking a plan before creating it.
"""

import json
from pathlib import Path

import click

from presenter.config import PresenterConfig
from presenter.orchestrator import PlanOptions, WebpagePresenter
from presenter.utils.logging_config import configure_logging

from .help_texts import PLAN_FILE_OUTPUT_HELP, PLAN_HELP, handle_presenter_error
from .shared_options import (
    config_option,
    log_level_option,
    model_option,
    no_llm_option,
    output_option,
    provider_option,
    url_argument,
)


@click.command(help=PLAN_HELP)
@url_argument()
@no_llm_option()
@provider_option()
@model_option()
@config_option()
@output_option(help=PLAN_FILE_OUTPUT_HELP)
@log_level_option()
def plan(url, no_llm, provider, model, config, output, log_level):
    """
    Print the slides that would be created for a webpage.

    Examples:
        webpage-presenter plan https://example.com/article
        webpage-presenter plan https://example.com/article --no-llm --output plan.json
    """
    configure_logging(level=log_level.lower(), force=True)

    try:
        presenter = WebpagePresenter(PresenterConfig.load_from_yaml(config))
        presentation = presenter.plan(url, PlanOptions(
            use_llm=False if no_llm else None,
            provider=provider,
            model=model,
        ))
    except Exception as e:
        handle_presenter_error(e)

    payload = json.dumps({
        "title": presentation.title,
        "slides": [slide.model_dump() for slide in presentation.slides],
    }, indent=2, ensure_ascii=False)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n", encoding='utf-8')
        click.echo(f"✅ Slide plan written to {output_path}")
    else:
        click.echo(payload)
