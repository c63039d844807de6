"""
Presentation Orchestrator

Coordinates one webpage-to-presentation run:
scrape -> extract -> plan -> authenticate -> assemble -> share.
Every step's failure aborts the run.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from presenter.alai.assembler import PresentationAssembler, RemoteSession
from presenter.config import PresenterConfig
from presenter.content.extractor import ContentExtractor
from presenter.content.models import NormalizedContent, ScrapeResult
from presenter.llm.factory import LLMProviderFactory
from presenter.planning.llm_planner import LLMSlidePlanner, content_to_markdown
from presenter.planning.planner import ContentSlidePlanner, presentation_title
from presenter.planning.schemas import SlideDescriptor
from presenter.scraper import FirecrawlScraper
from presenter.utils.logging_config import logging_config, timed_operation


logger = logging.getLogger(__name__)


@dataclass
class PlanOptions:
    """How slides are planned for a run.

    Attributes:
        use_llm: Plan with a model (None uses the configured default)
        provider: Model provider id or alias (None uses the configured default)
        model: Optional model override
        plan_output: Optional path for the raw model reply
    """
    use_llm: Optional[bool] = None
    provider: Optional[str] = None
    model: Optional[str] = None
    plan_output: Optional[str] = None


@dataclass
class PresentationPlan:
    """Extracted content and the slides planned from it.

    Attributes:
        content: Normalized page content
        title: Presentation title
        slides: Slide descriptors in presentation order
    """
    content: NormalizedContent
    title: str
    slides: List[SlideDescriptor]


class WebpagePresenter:
    """Runs the webpage-to-presentation workflow.

    Collaborators are built from the configuration unless injected.

    Example:
        >>> presenter = WebpagePresenter(PresenterConfig.load_from_yaml())
        >>> session = presenter.run("https://example.com/article")
        >>> print(session.share_url)
    """

    def __init__(
        self,
        config: PresenterConfig,
        scraper: Optional[FirecrawlScraper] = None,
        extractor: Optional[ContentExtractor] = None,
        provider_factory: Optional[LLMProviderFactory] = None,
        assembler: Optional[PresentationAssembler] = None
    ):
        self.config = config
        self._scraper = scraper
        self.extractor = extractor or ContentExtractor()
        self.provider_factory = provider_factory or LLMProviderFactory(config.llm)
        self._assembler = assembler

    @property
    def scraper(self) -> FirecrawlScraper:
        if self._scraper is None:
            self._scraper = FirecrawlScraper(self.config.scraper)
        return self._scraper

    @property
    def assembler(self) -> PresentationAssembler:
        if self._assembler is None:
            self._assembler = PresentationAssembler(self.config.alai)
        return self._assembler

    def _resolve_use_llm(self, options: PlanOptions) -> bool:
        return self.config.use_llm if options.use_llm is None else options.use_llm

    def scrape_and_extract(self, url: str) -> Tuple[ScrapeResult, NormalizedContent]:
        with timed_operation("Scrape webpage"):
            scrape = self.scraper.scrape(url)
        with timed_operation("Extract content"):
            content = self.extractor.extract(scrape)
        return scrape, content

    def extract(self, url: str) -> NormalizedContent:
        """Scrape and extract a page without planning.

        Raises:
            ConfigurationError: If the scrape provider key is missing
            RemoteCallError: If the scrape call fails
            ExtractionError: If the page has no usable content
        """
        self.config.validate(use_llm=False, require_alai=False)
        _, content = self.scrape_and_extract(url)
        return content

    def plan(self, url: str, options: Optional[PlanOptions] = None) -> PresentationPlan:
        """Scrape, extract and plan slides. No presentation service calls.

        Raises:
            ConfigurationError: If a required key is missing
            PlanningError: If the model reply cannot be parsed
        """
        options = options or PlanOptions()
        use_llm = self._resolve_use_llm(options)
        self.config.validate(use_llm=use_llm, require_alai=False, provider=options.provider)
        return self._plan(url, options, use_llm)

    def run(self, url: str, options: Optional[PlanOptions] = None) -> RemoteSession:
        """Full run: plan the slides, then build and share the presentation.

        Args:
            url: Page to present
            options: Planning options

        Returns:
            Finished RemoteSession; share_url holds the public link

        Raises:
            PresenterError: Any failure, see presenter.errors
        """
        options = options or PlanOptions()
        use_llm = self._resolve_use_llm(options)
        self.config.validate(use_llm=use_llm, require_alai=True, provider=options.provider)

        logger.info(f"Processing webpage: {url}")
        presentation = self._plan(url, options, use_llm)

        with timed_operation("Assemble presentation"):
            return self.assembler.assemble(presentation.title, presentation.slides)

    def _plan(self, url: str, options: PlanOptions, use_llm: bool) -> PresentationPlan:
        logging_config.log_configuration_details({
            "url": url,
            "use_llm": use_llm,
            "provider": options.provider or self.config.provider,
            "model": options.model,
            "firecrawl_api_key": self.config.scraper.api_key,
        })

        scrape, content = self.scrape_and_extract(url)

        with timed_operation("Plan slides"):
            if use_llm:
                provider = self.provider_factory.create_provider(
                    options.provider or self.config.provider
                )
                planner = LLMSlidePlanner(
                    provider,
                    model=options.model,
                    plan_output=options.plan_output,
                )
                markdown = scrape.markdown or content_to_markdown(content)
                slides = planner.plan(markdown, url)
                title = slides[0].title or content.title
            else:
                slides = ContentSlidePlanner().plan(content)
                title = content.title

        return PresentationPlan(
            content=content,
            title=presentation_title(title),
            slides=slides,
        )
