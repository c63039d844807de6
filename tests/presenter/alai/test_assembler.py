"""
Unit Tests: PresentationAssembler

Tests the strictly sequential protocol: every slide is created, its
variant submitted and activated before the next slide is created, and
any failure aborts the run.
"""

from unittest.mock import Mock, call

import pytest

from presenter.alai.assembler import PresentationAssembler, SessionState
from presenter.config import AlaiConfig
from presenter.errors import PlanningError, ProtocolError, RemoteCallError
from presenter.planning.schemas import SlideDescriptor


SLIDES = [
    SlideDescriptor(title="One", content={"body": "first"}),
    SlideDescriptor(title="Two", content={"body": "second"}),
    SlideDescriptor(layout="IMAGE_ONLY_LAYOUT", title="Three", content={"imageUrl": "https://a/x.png"}),
]


@pytest.fixture
def client():
    client = Mock()
    client.create_presentation.return_value = {"presentation_id": "p-1", "first_slide_id": "s-0"}
    client.create_slide.side_effect = lambda presentation_id, slide_order: f"s-{slide_order}"
    client.create_slide_variant.side_effect = lambda slide_id, payload: f"v-{slide_id}"
    client.upsert_presentation_share.return_value = "https://app.example.com/view/share-1"
    return client


@pytest.fixture
def authenticator():
    authenticator = Mock()
    authenticator.authenticate.return_value = "token-1"
    return authenticator


@pytest.fixture
def assembler(client, authenticator):
    factory = Mock(return_value=client)
    return PresentationAssembler(AlaiConfig(), authenticator=authenticator, client_factory=factory)


def protocol_calls(client):
    """(method, first positional arg) for each call, in order."""
    return [(name, args[0] if args else None) for name, args, _ in client.mock_calls]


# ============================================================================
# Test: Happy path
# ============================================================================

def test_assemble_returns_finished_session(assembler, client):
    session = assembler.assemble("Presentation: Title", SLIDES)

    assert session.state == SessionState.DONE
    assert session.bearer_token == "token-1"
    assert session.presentation_id == "p-1"
    assert session.share_url == "https://app.example.com/view/share-1"
    assert [slide.slide_id for slide in session.slides] == ["s-0", "s-1", "s-2"]
    assert [slide.active_variant_id for slide in session.slides] == ["v-s-0", "v-s-1", "v-s-2"]


def test_client_built_with_bearer_token(assembler, authenticator):
    assembler.assemble("T", SLIDES[:1])
    assembler.client_factory.assert_called_once_with("token-1")


def test_calls_are_strictly_sequential(assembler, client):
    assembler.assemble("Presentation: Title", SLIDES)

    assert protocol_calls(client) == [
        ("create_presentation", "Presentation: Title"),
        ("create_slide_variant", "s-0"),
        ("set_active_variant", "s-0"),
        ("create_slide", "p-1"),
        ("create_slide_variant", "s-1"),
        ("set_active_variant", "s-1"),
        ("create_slide", "p-1"),
        ("create_slide_variant", "s-2"),
        ("set_active_variant", "s-2"),
        ("upsert_presentation_share", "p-1"),
    ]


def test_first_slide_reuses_initial_slide(assembler, client):
    assembler.assemble("T", SLIDES)

    assert client.create_slide.call_args_list == [
        call("p-1", slide_order=1),
        call("p-1", slide_order=2),
    ]


def test_variant_payload_matches_layout(assembler, client):
    assembler.assemble("T", SLIDES)

    payloads = [args[1] for args, _ in client.create_slide_variant.call_args_list]
    assert [payload["type"] for payload in payloads] == [
        "TITLE_AND_BODY_LAYOUT",
        "TITLE_AND_BODY_LAYOUT",
        "IMAGE_ONLY_LAYOUT",
    ]


def test_activates_returned_variant(assembler, client):
    assembler.assemble("T", SLIDES[:1])
    client.set_active_variant.assert_called_once_with("s-0", "v-s-0")


def test_single_slide_creates_no_extra_slides(assembler, client):
    assembler.assemble("T", SLIDES[:1])
    client.create_slide.assert_not_called()


# ============================================================================
# Test: Failures
# ============================================================================

def test_empty_plan_rejected_before_authentication(assembler, authenticator):
    with pytest.raises(PlanningError, match="No slides"):
        assembler.assemble("T", [])

    authenticator.authenticate.assert_not_called()


def test_variant_failure_aborts_run(assembler, client):
    client.create_slide_variant.side_effect = [
        "v-0",
        RemoteCallError("create slide variant", status_code=500),
    ]

    with pytest.raises(RemoteCallError, match="Failed to create slide variant"):
        assembler.assemble("T", SLIDES)

    # slide 1 was created but never activated, nothing after it ran
    assert client.create_slide.call_count == 1
    assert client.set_active_variant.call_count == 1
    client.upsert_presentation_share.assert_not_called()


def test_protocol_error_on_creation_aborts_run(assembler, client):
    client.create_presentation.side_effect = ProtocolError("Failed to get slide ID from presentation creation")

    with pytest.raises(ProtocolError):
        assembler.assemble("T", SLIDES)

    client.create_slide_variant.assert_not_called()


def test_authentication_failure_aborts_run(assembler, authenticator, client):
    authenticator.authenticate.side_effect = RemoteCallError("authenticate with Alai", status_code=400)

    with pytest.raises(RemoteCallError):
        assembler.assemble("T", SLIDES)

    assert client.mock_calls == []


def test_share_failure_propagates(assembler, client):
    client.upsert_presentation_share.side_effect = ProtocolError("No share ID returned for presentation")

    with pytest.raises(ProtocolError):
        assembler.assemble("T", SLIDES)

    assert client.set_active_variant.call_count == 3
