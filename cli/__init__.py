"""
CLI Package for Webpage Presenter

This package provides a modular CLI architecture using Click groups and subcommands.
Each subcommand is implemented in its own module for better maintainability and testing.

The main entry point is the main() function which creates a Click group and registers
all available subcommands. The cli() function serves as the console script entry point
for setup.py.
"""

import os
import click
from dotenv import load_dotenv
from presenter import __version__
from presenter.utils.logging_config import configure_logging

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .create import create
from .extract import extract
from .plan import plan

# Configure logging when CLI package is imported
configure_logging()

@click.group()
@click.version_option(version=__version__, prog_name='webpage-presenter')
def main():
    """Webpage Presenter CLI - Turn a webpage into a shareable slide presentation.

    Scrapes a page, extracts its title, description, key points and images,
    plans slides (with a generative model or directly from the content) and
    builds them on the Alai presentation service.
    """
    pass

# Register subcommands
main.add_command(create)
main.add_command(extract)
main.add_command(plan)

# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the webpage-presenter command is executed
    from the command line after installation via pip.
    """
    main()
