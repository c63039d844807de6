"""
Unit Tests: AlaiClient

Tests endpoint URLs, request payloads and response handling for each
presentation endpoint. The HTTP session is mocked.
"""

from unittest.mock import Mock

import pytest

from presenter.alai.client import AlaiClient
from presenter.config import AlaiConfig
from presenter.errors import ProtocolError, RemoteCallError


API = "https://backend.example.com"


@pytest.fixture
def config():
    return AlaiConfig(
        api_base_url=API + "/",
        share_base_url="https://app.example.com/view",
        theme_id="theme-1",
        color_set_id=3,
        timeout=15,
    )


@pytest.fixture
def session():
    session = Mock()
    session.post.return_value = Mock(ok=True, status_code=200, json=Mock(return_value={}))
    return session


@pytest.fixture
def client(config, session):
    return AlaiClient(config, "bearer-token", session=session)


def respond_with(session, data):
    session.post.return_value = Mock(ok=True, status_code=200, json=Mock(return_value=data))


def last_call(session):
    args, kwargs = session.post.call_args
    return args[0], kwargs["json"], kwargs["headers"]


# ============================================================================
# Test: create_presentation
# ============================================================================

def test_create_presentation(client, session):
    respond_with(session, {"id": "p-1", "slides": [{"id": "slide-0"}]})

    created = client.create_presentation("Presentation: Title", presentation_id="p-1")

    url, payload, headers = last_call(session)
    assert url == f"{API}/create-new-presentation"
    assert headers == {"Authorization": "Bearer bearer-token"}
    assert payload == {
        "presentation_id": "p-1",
        "presentation_title": "Presentation: Title",
        "create_first_slide": True,
        "default_color_set_id": 3,
        "theme_id": "theme-1",
    }
    assert created == {"presentation_id": "p-1", "first_slide_id": "slide-0"}
    assert session.post.call_args[1]["timeout"] == 15


def test_create_presentation_generates_id(client, session):
    respond_with(session, {"slides": [{"id": "slide-0"}]})

    created = client.create_presentation("T")

    _, payload, _ = last_call(session)
    assert created["presentation_id"] == payload["presentation_id"]
    assert len(created["presentation_id"]) == 36


@pytest.mark.parametrize("data", [{}, {"slides": []}, {"slides": [{}]}, {"slides": "nope"}, "text"])
def test_create_presentation_without_first_slide(client, session, data):
    respond_with(session, data)

    with pytest.raises(ProtocolError, match="Failed to get slide ID"):
        client.create_presentation("T")


# ============================================================================
# Test: create_slide
# ============================================================================

def test_create_slide(client, session):
    slide_id = client.create_slide("p-1", slide_order=2, slide_id="s-2")

    url, payload, _ = last_call(session)
    assert slide_id == "s-2"
    assert url == f"{API}/create-new-slide"
    assert payload == {
        "slide_id": "s-2",
        "presentation_id": "p-1",
        "product_type": "PRESENTATION_CREATOR",
        "slide_order": 2,
        "color_set_id": 3,
    }


def test_create_slide_generates_id(client, session):
    slide_id = client.create_slide("p-1", slide_order=1)
    _, payload, _ = last_call(session)
    assert payload["slide_id"] == slide_id


def test_create_slide_failure(client, session):
    session.post.return_value = Mock(ok=False, status_code=500, json=Mock(return_value={"msg": "boom"}))

    with pytest.raises(RemoteCallError, match="Failed to create slide"):
        client.create_slide("p-1", slide_order=1)


# ============================================================================
# Test: variants
# ============================================================================

def test_create_slide_variant(client, session):
    respond_with(session, {"id": "v-1"})
    variant = {"type": "TITLE_AND_BODY_LAYOUT", "elements": [[]]}

    variant_id = client.create_slide_variant("s-1", variant)

    url, payload, _ = last_call(session)
    assert variant_id == "v-1"
    assert url == f"{API}/create-slide-variant-from-element-slide"
    assert payload == {"slide_id": "s-1", "element_slide_variant": variant}


def test_create_slide_variant_without_id(client, session):
    respond_with(session, {"status": "ok"})

    with pytest.raises(ProtocolError, match="No variant ID"):
        client.create_slide_variant("s-1", {})


def test_set_active_variant(client, session):
    client.set_active_variant("s-1", "v-1")

    url, payload, _ = last_call(session)
    assert url == f"{API}/set-active-variant"
    assert payload == {"slide_id": "s-1", "variant_id": "v-1"}


def test_set_active_variant_failure(client, session):
    session.post.return_value = Mock(ok=False, status_code=404, json=Mock(return_value={}))

    with pytest.raises(RemoteCallError, match="Failed to set active variant"):
        client.set_active_variant("s-1", "v-1")


# ============================================================================
# Test: sharing
# ============================================================================

def test_upsert_share_from_dict(client, session):
    respond_with(session, {"id": "share-9"})

    url = client.upsert_presentation_share("p-1")

    request_url, payload, _ = last_call(session)
    assert request_url == f"{API}/upsert-presentation-share"
    assert payload == {"presentation_id": "p-1", "public": True}
    assert url == "https://app.example.com/view/share-9"


def test_upsert_share_from_string(client, session):
    respond_with(session, "share-7")
    assert client.upsert_presentation_share("p-1") == "https://app.example.com/view/share-7"


@pytest.mark.parametrize("data", [{}, {"id": None}, {"id": 12}, None, ""])
def test_upsert_share_without_id(client, session, data):
    respond_with(session, data)

    with pytest.raises(ProtocolError, match="No share ID"):
        client.upsert_presentation_share("p-1")
