"""
Presentation Assembler

Drives the presentation service protocol for one run:

    UNAUTHENTICATED -> AUTHENTICATED -> PRESENTATION_CREATED
        -> (SLIDE_CREATED -> VARIANT_SUBMITTED -> VARIANT_ACTIVATED) per slide
        -> SHARED -> DONE

Calls are strictly sequential. Each slide is created, its variant submitted
and activated before the next slide begins. Any failure aborts the run;
slides already created stay on the service.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

import requests

from presenter.alai.auth import AlaiAuthenticator
from presenter.alai.client import AlaiClient
from presenter.config import AlaiConfig
from presenter.errors import PlanningError
from presenter.planning.schemas import Slide, SlideDescriptor
from presenter.slides.builders import build_slide_variant
from presenter.utils.logging_config import get_progress_context


logger = logging.getLogger(__name__)


class SessionState(Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"
    PRESENTATION_CREATED = "presentation_created"
    SLIDE_CREATED = "slide_created"
    VARIANT_SUBMITTED = "variant_submitted"
    VARIANT_ACTIVATED = "variant_activated"
    SHARED = "shared"
    DONE = "done"


@dataclass
class RemoteSlide:
    slide_id: str
    active_variant_id: Optional[str] = None


@dataclass
class RemoteSession:
    """Remote state accumulated during one run. Never persisted.

    Attributes:
        bearer_token: Access token for the presentation endpoints
        presentation_id: Client-generated presentation id
        slides: Slides created so far, in presentation order
        state: Last completed protocol step
        share_url: Public view URL once shared
    """
    bearer_token: Optional[str] = None
    presentation_id: Optional[str] = None
    slides: List[RemoteSlide] = field(default_factory=list)
    state: SessionState = SessionState.UNAUTHENTICATED
    share_url: Optional[str] = None


class PresentationAssembler:
    """Builds a presentation from slide descriptors on the remote service.

    Example:
        >>> assembler = PresentationAssembler(config.alai)
        >>> session = assembler.assemble("Presentation: Title", descriptors)
        >>> print(session.share_url)
    """

    def __init__(
        self,
        config: AlaiConfig,
        authenticator: Optional[AlaiAuthenticator] = None,
        client_factory: Optional[Callable[[str], AlaiClient]] = None,
        session: Optional[requests.Session] = None
    ):
        self.config = config
        self.http = session or requests.Session()
        self.authenticator = authenticator or AlaiAuthenticator(config, session=self.http)
        self.client_factory = client_factory or (
            lambda token: AlaiClient(config, token, session=self.http)
        )

    def assemble(
        self,
        title: str,
        slides: Sequence[Union[SlideDescriptor, Slide]]
    ) -> RemoteSession:
        """Create, populate and share a presentation.

        Args:
            title: Presentation title
            slides: Planned slides, in presentation order

        Returns:
            Finished RemoteSession with share_url set

        Raises:
            PlanningError: If there are no slides
            ConfigurationError: If presentation service credentials are missing
            RemoteCallError: If any remote call fails
            ProtocolError: If a response lacks an expected field
        """
        if not slides:
            raise PlanningError("No slides to assemble")

        remote = RemoteSession()

        remote.bearer_token = self.authenticator.authenticate()
        remote.state = SessionState.AUTHENTICATED
        client = self.client_factory(remote.bearer_token)

        created = client.create_presentation(title)
        remote.presentation_id = created["presentation_id"]
        remote.state = SessionState.PRESENTATION_CREATED

        with get_progress_context("Building slides", len(slides)) as progress:
            for index, slide in enumerate(slides):
                if index == 0:
                    slide_id = created["first_slide_id"]
                else:
                    slide_id = client.create_slide(remote.presentation_id, slide_order=index)
                remote.slides.append(RemoteSlide(slide_id=slide_id))
                remote.state = SessionState.SLIDE_CREATED

                self._populate_slide(client, remote, slide)
                progress.update(message=f"Slide {index + 1}/{len(slides)}")

        remote.share_url = client.upsert_presentation_share(remote.presentation_id)
        remote.state = SessionState.SHARED
        logger.info(f"Presentation shared at {remote.share_url}")

        remote.state = SessionState.DONE
        return remote

    def _populate_slide(
        self,
        client: AlaiClient,
        remote: RemoteSession,
        slide: Union[SlideDescriptor, Slide]
    ) -> None:
        """Submit the slide's element grid and make it the active variant."""
        current = remote.slides[-1]
        variant = build_slide_variant(slide)
        logger.debug(
            f"Built {variant.layout.value} grid with {len(variant.rows)} rows "
            f"for slide {current.slide_id}"
        )

        variant_id = client.create_slide_variant(current.slide_id, variant.to_payload())
        remote.state = SessionState.VARIANT_SUBMITTED

        client.set_active_variant(current.slide_id, variant_id)
        current.active_variant_id = variant_id
        remote.state = SessionState.VARIANT_ACTIVATED
