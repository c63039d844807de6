"""
Presentation Service Client

Thin wrapper over the presentation REST endpoints. Each method is one
POST; identifiers for presentations and slides are generated client-side,
variant identifiers come back from the service.
"""

import logging
import uuid
from typing import Any, Dict, Optional

import requests

from presenter.config import AlaiConfig
from presenter.errors import ProtocolError
from presenter.remote import post_json


logger = logging.getLogger(__name__)

PRODUCT_TYPE = "PRESENTATION_CREATOR"


class AlaiClient:
    """Authenticated client for the presentation endpoints.

    Attributes:
        config: Presentation service configuration
        bearer_token: Access token from AlaiAuthenticator
    """

    def __init__(
        self,
        config: AlaiConfig,
        bearer_token: str,
        session: Optional[requests.Session] = None
    ):
        self.config = config
        self.bearer_token = bearer_token
        self.session = session or requests.Session()

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.bearer_token}"}

    def _post(self, endpoint: str, operation: str, payload: Dict[str, Any]) -> Any:
        url = f"{self.config.api_base_url.rstrip('/')}/{endpoint}"
        return post_json(
            self.session,
            url,
            operation,
            payload,
            headers=self.headers,
            timeout=self.config.timeout,
        )

    def create_presentation(self, title: str, presentation_id: Optional[str] = None) -> Dict[str, Any]:
        """Create a presentation with its first slide.

        Args:
            title: Presentation title
            presentation_id: Client-generated id (generated when omitted)

        Returns:
            Dict with 'presentation_id' and 'first_slide_id'

        Raises:
            ProtocolError: If the response does not name the initial slide
        """
        presentation_id = presentation_id or str(uuid.uuid4())

        data = self._post("create-new-presentation", "create Alai presentation", {
            "presentation_id": presentation_id,
            "presentation_title": title,
            "create_first_slide": True,
            "default_color_set_id": self.config.color_set_id,
            "theme_id": self.config.theme_id,
        })
        logger.info(f"Created presentation with ID: {presentation_id}")

        slides = data.get("slides") if isinstance(data, dict) else None
        first_slide = slides[0] if isinstance(slides, list) and slides else None
        first_slide_id = first_slide.get("id") if isinstance(first_slide, dict) else None
        if not first_slide_id:
            raise ProtocolError("Failed to get slide ID from presentation creation")

        return {"presentation_id": presentation_id, "first_slide_id": first_slide_id}

    def create_slide(self, presentation_id: str, slide_order: int, slide_id: Optional[str] = None) -> str:
        """Append a slide at the given position.

        Returns:
            The client-generated slide id
        """
        slide_id = slide_id or str(uuid.uuid4())

        self._post("create-new-slide", "create slide", {
            "slide_id": slide_id,
            "presentation_id": presentation_id,
            "product_type": PRODUCT_TYPE,
            "slide_order": slide_order,
            "color_set_id": self.config.color_set_id,
        })
        logger.info(f"Created new slide with ID: {slide_id}")
        return slide_id

    def create_slide_variant(self, slide_id: str, variant_payload: Dict[str, Any]) -> str:
        """Submit an element grid as a variant of a slide.

        Returns:
            Variant id assigned by the service

        Raises:
            ProtocolError: If the response has no variant id
        """
        data = self._post("create-slide-variant-from-element-slide", "create slide variant", {
            "slide_id": slide_id,
            "element_slide_variant": variant_payload,
        })

        variant_id = data.get("id") if isinstance(data, dict) else None
        if not variant_id:
            raise ProtocolError(f"No variant ID returned for slide {slide_id}")

        logger.info(f"Created slide variant with ID: {variant_id}")
        return variant_id

    def set_active_variant(self, slide_id: str, variant_id: str) -> None:
        self._post("set-active-variant", "set active variant", {
            "slide_id": slide_id,
            "variant_id": variant_id,
        })
        logger.debug(f"Activated variant {variant_id} on slide {slide_id}")

    def upsert_presentation_share(self, presentation_id: str) -> str:
        """Make the presentation public and return its view URL.

        Raises:
            ProtocolError: If the response has no share id
        """
        data = self._post("upsert-presentation-share", "get shareable link", {
            "presentation_id": presentation_id,
            "public": True,
        })

        share_id = data.get("id") if isinstance(data, dict) else data
        if not share_id or not isinstance(share_id, str):
            raise ProtocolError("No share ID returned for presentation")

        return f"{self.config.share_base_url.rstrip('/')}/{share_id}"
