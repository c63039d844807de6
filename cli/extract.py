"""
Extract Subcommand Module

Scrapes a webpage and prints the extracted content (title, description,
main points, image URLs) as JSON. No model or presentation service calls.
"""

import json
from pathlib import Path

import click

from presenter.config import PresenterConfig
from presenter.orchestrator import WebpagePresenter
from presenter.utils.logging_config import configure_logging

from .help_texts import EXTRACT_HELP, EXTRACT_OUTPUT_HELP, handle_presenter_error
from .shared_options import config_option, log_level_option, output_option, url_argument


@click.command(help=EXTRACT_HELP)
@url_argument()
@config_option()
@output_option(help=EXTRACT_OUTPUT_HELP)
@log_level_option()
def extract(url, config, output, log_level):
    """
    Scrape a webpage and print its extracted content.

    Examples:
        webpage-presenter extract https://example.com/article
        webpage-presenter extract https://example.com/article --output content.json
    """
    configure_logging(level=log_level.lower(), force=True)

    try:
        presenter = WebpagePresenter(PresenterConfig.load_from_yaml(config))
        content = presenter.extract(url)
    except Exception as e:
        handle_presenter_error(e)

    payload = json.dumps(content.to_json_dict(), indent=2, ensure_ascii=False)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload + "\n", encoding='utf-8')
        click.echo(f"✅ Content written to {output_path}")
    else:
        click.echo(payload)
