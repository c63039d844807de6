"""
setup.py

Packaging metadata and CLI entry point for webpage-presenter.

Version: 0.1.0 — Scrapes a webpage, plans slides with Gemini, OpenAI or
Anthropic (or directly from the extracted content) and builds them on the
Alai presentation service.
"""
from setuptools import setup, find_packages

setup(
    name="webpage-presenter",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "presenter.planning.prompts": ["*.yaml"],
    },
    install_requires=[
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
        "requests",
        "jinja2",
        "beautifulsoup4",
        "openai",
        "tiktoken",
        "anthropic",
        "google-generativeai",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "webpage-presenter=cli:cli",
        ],
    },
    python_requires=">=3.9",
)
