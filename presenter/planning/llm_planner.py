"""
Model-Based Slide Planner

Asks a generative model to restructure page content into a JSON array of
slide descriptors. The model is a black box: the reply is parsed leniently
(direct JSON, then the first array-of-objects substring) and only checked
for being a list of objects. Per-layout validation happens at build time.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, List, Optional

from presenter.content.models import NormalizedContent
from presenter.errors import PlanningError
from presenter.llm.providers.base import BaseLLMProvider, LLMRequest
from presenter.planning.prompts import PromptLoader, PromptRenderer
from presenter.planning.schemas import SlideDescriptor


logger = logging.getLogger(__name__)

# First bracket-delimited array of objects in a free-text reply
JSON_ARRAY_PATTERN = re.compile(r'\[\s*\{[\s\S]*\}\s*\]')

DEFAULT_MAX_TOKENS = 8192
DEFAULT_TEMPERATURE = 0.4


def parse_slide_plan(text: str) -> List[SlideDescriptor]:
    """Parse a model reply into slide descriptors.

    Args:
        text: Raw model response

    Returns:
        Slide descriptors in the order the model emitted them

    Raises:
        PlanningError: If no JSON array of objects can be recovered
    """
    if not text or not text.strip():
        raise PlanningError("Model returned an empty response", response_text=text)

    data: Any
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        match = JSON_ARRAY_PATTERN.search(text)
        if not match:
            raise PlanningError(
                "Failed to parse slide plan: no JSON array found in model response",
                response_text=text
            )
        try:
            data = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            raise PlanningError(
                f"Failed to parse slide plan: {e}",
                response_text=text
            )

    if not isinstance(data, list):
        raise PlanningError(
            f"Slide plan must be a JSON array, got {type(data).__name__}",
            response_text=text
        )

    descriptors = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise PlanningError(
                f"Slide plan entry {index} is not an object",
                response_text=text
            )
        descriptors.append(SlideDescriptor.model_validate(item))

    if not descriptors:
        raise PlanningError("Slide plan is empty", response_text=text)

    return descriptors


def content_to_markdown(content: NormalizedContent) -> str:
    """Render extracted content as markdown for the planning prompt.

    Used when the scrape returned HTML only.
    """
    lines = [f"# {content.title}", "", content.description, ""]
    for point in content.main_points:
        lines.append(f"## {point}")
        lines.append("")
    for url in content.image_urls:
        lines.append(f"![]({url})")
    return "\n".join(lines).strip() + "\n"


class LLMSlidePlanner:
    """Plans slides by prompting a generative model.

    Attributes:
        provider: Model provider used for the single generation call
        model: Optional model override
        plan_output: Optional path where the raw model reply is written

    Example:
        >>> planner = LLMSlidePlanner(factory.create_provider("cloud-gemini"))
        >>> slides = planner.plan(markdown, "https://example.com/article")
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        prompt_loader: Optional[PromptLoader] = None,
        prompt_renderer: Optional[PromptRenderer] = None,
        model: Optional[str] = None,
        plan_output: Optional[str] = None
    ):
        self.provider = provider
        self.prompt_loader = prompt_loader or PromptLoader()
        self.prompt_renderer = prompt_renderer or PromptRenderer()
        self.model = model
        self.plan_output = plan_output

    def build_prompt(self, markdown: str, base_url: str) -> str:
        template = self.prompt_loader.load_prompt('slide_plan')
        return self.prompt_renderer.render(template, markdown=markdown, base_url=base_url)

    def plan(self, markdown: str, base_url: str) -> List[SlideDescriptor]:
        """Generate a slide plan for the given page content.

        Args:
            markdown: Page content as markdown
            base_url: Page URL, for resolving relative image links

        Returns:
            Slide descriptors (unvalidated against their layouts)

        Raises:
            PlanningError: If the reply cannot be parsed
            ProviderError: If the model call fails
        """
        prompt = self.build_prompt(markdown, base_url)

        provider_config = getattr(self.provider, "config", None)
        request = LLMRequest(
            prompt=prompt,
            max_tokens=getattr(provider_config, "max_tokens", DEFAULT_MAX_TOKENS),
            temperature=getattr(provider_config, "temperature", DEFAULT_TEMPERATURE),
            model=self.model
        )

        logger.info(f"Requesting slide plan from {type(self.provider).__name__}")
        response = self.provider.generate(request)
        logger.debug(
            f"Model {response.model_used} replied with {len(response.content)} chars "
            f"({response.tokens_used} tokens)"
        )

        if self.plan_output:
            self._write_plan_output(response.content)

        descriptors = parse_slide_plan(response.content)
        logger.info(f"Model planned {len(descriptors)} slides")
        return descriptors

    def _write_plan_output(self, text: str):
        path = Path(self.plan_output)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding='utf-8')
            logger.debug(f"Raw slide plan written to {path}")
        except OSError as e:
            logger.warning(f"Failed to write slide plan to {path}: {e}")
