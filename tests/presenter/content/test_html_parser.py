"""
Unit Tests: HTML Extraction Pass
"""

from presenter.content.html_parser import parse_html_content
from presenter.content.models import DEFAULT_DESCRIPTION, DEFAULT_TITLE


BASE_URL = "https://example.com/blog/post"

LONG_PARAGRAPH = "A paragraph that is long enough to be treated as a key point of the page."


def test_title_prefers_title_tag():
    content = parse_html_content("<title>Page Title</title><h1>Heading</h1>", BASE_URL)
    assert content.title == "Page Title"


def test_title_falls_back_to_h1():
    content = parse_html_content("<h1> Heading </h1>", BASE_URL)
    assert content.title == "Heading"


def test_title_defaults_to_untitled():
    content = parse_html_content("<p>text</p>", BASE_URL)
    assert content.title == DEFAULT_TITLE


def test_description_prefers_meta_description():
    html = '<meta name="description" content="Meta text"><p>First paragraph</p>'
    assert parse_html_content(html, BASE_URL).description == "Meta text"


def test_description_falls_back_to_first_paragraph():
    html = "<p>First paragraph</p><p>Second paragraph</p>"
    assert parse_html_content(html, BASE_URL).description == "First paragraph"


def test_description_default():
    assert parse_html_content("<div>nothing</div>", BASE_URL).description == DEFAULT_DESCRIPTION


def test_main_points_from_h2_and_h3_in_document_order():
    html = "<h2>One</h2><h3>Two</h3><h2>Three</h2><h4>Skipped</h4>"
    assert parse_html_content(html, BASE_URL).main_points == ["One", "Two", "Three"]


def test_main_points_topped_up_with_long_paragraphs():
    html = f"<h2>One</h2><p>short</p><p>{LONG_PARAGRAPH}</p>"
    assert parse_html_content(html, BASE_URL).main_points == ["One", LONG_PARAGRAPH]


def test_main_points_capped_at_five():
    html = "".join(f"<h2>Heading {i}</h2>" for i in range(9))
    assert len(parse_html_content(html, BASE_URL).main_points) == 5


def test_image_sources_resolved_and_capped():
    html = "".join(f'<img src="/img/{i}.png">' for i in range(7))
    content = parse_html_content(html, BASE_URL)
    assert content.image_urls == [f"https://example.com/img/{i}.png" for i in range(5)]


def test_images_without_src_are_skipped():
    html = '<img alt="no source"><img src="https://cdn.example.com/a.svg">'
    assert parse_html_content(html, BASE_URL).image_urls == ["https://cdn.example.com/a.svg"]


def test_parse_sample_article(sample_html):
    content = parse_html_content(sample_html, BASE_URL)

    assert content.title == "ML in Practice | Example Blog"
    assert content.description == "How teams ship ML systems."
    assert content.main_points == ["Data Collection", "Feature Stores for Reuse", "Model Training"]
    assert content.image_urls == [
        "https://example.com/images/architecture.png",
        "https://cdn.example.com/team.webp",
    ]
