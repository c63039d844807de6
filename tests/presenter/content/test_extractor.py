"""
Unit Tests: ContentExtractor
"""

import pytest

from presenter.content.extractor import ContentExtractor
from presenter.content.models import ScrapeResult
from presenter.errors import ExtractionError


URL = "https://example.com/blog/post"


@pytest.fixture
def extractor():
    return ContentExtractor()


def test_extract_fails_without_any_format(extractor):
    with pytest.raises(ExtractionError):
        extractor.extract(ScrapeResult(url=URL))


def test_extract_fails_on_empty_strings(extractor):
    with pytest.raises(ExtractionError):
        extractor.extract(ScrapeResult(url=URL, markdown="", html=""))


def test_extract_markdown_only_end_to_end(extractor):
    markdown = (
        "# Title\n\n"
        "This is a description paragraph that is long enough.\n\n"
        "## Point One\n\n"
        "## Point Two"
    )
    content = extractor.extract(ScrapeResult(url=URL, markdown=markdown))

    assert content.title == "Title"
    assert content.description == "This is a description paragraph that is long enough."
    assert content.main_points == ["Point One", "Point Two"]
    assert content.image_urls == []


def test_extract_html_only(extractor, sample_html):
    content = extractor.extract(ScrapeResult(url=URL, html=sample_html))

    assert content.title == "ML in Practice | Example Blog"
    assert content.main_points == ["Data Collection", "Feature Stores for Reuse", "Model Training"]


def test_extract_merges_both_passes(extractor, sample_markdown, sample_html):
    content = extractor.extract(ScrapeResult(url=URL, markdown=sample_markdown, html=sample_html))

    assert content.title == "Machine Learning in Practice"
    assert content.description == (
        "This article explains how teams ship machine learning systems to production."
    )
    assert content.main_points == [
        "Data Collection",
        "Model Training",
        "Deployment and Monitoring",
        "Feature Stores for Reuse",
    ]
    assert content.image_urls == [
        "https://example.com/images/architecture.png",
        "https://cdn.example.com/dashboard.jpg",
        "https://cdn.example.com/team.webp",
    ]


def test_extract_uses_metadata_title(extractor):
    scrape = ScrapeResult(url=URL, markdown="plain words only", metadata={"title": "From Metadata"})
    assert extractor.extract(scrape).title == "From Metadata"


def test_to_json_dict_uses_camel_case(extractor, sample_markdown):
    data = extractor.extract(ScrapeResult(url=URL, markdown=sample_markdown)).to_json_dict()
    assert set(data) == {"title", "description", "mainPoints", "imageUrls"}
