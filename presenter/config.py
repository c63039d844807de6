"""
Presenter Configuration

Centralized configuration for the scrape provider, the presentation service
and the model providers. Values are resolved with the following precedence:
1. Environment variables (highest priority)
2. Config file values (.webpage-presenter/config.yaml)
3. Default values (lowest priority)

The resulting PresenterConfig is passed explicitly to every collaborator;
nothing reads credentials from module-level state.

Usage:
    >>> from presenter.config import PresenterConfig
    >>>
    >>> config = PresenterConfig.load_from_yaml()
    >>> config.validate(use_llm=True)
    >>> print(config.alai.api_base_url)
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import os

import yaml

from presenter.errors import ConfigurationError
from presenter.llm.config import LLMConfig
from presenter.llm.factory import LLMProviderFactory


DEFAULT_CONFIG_PATH = '.webpage-presenter/config.yaml'


@dataclass
class ScraperConfig:
    """Configuration for the Firecrawl scrape provider.

    Attributes:
        api_key: Firecrawl API key (required)
        base_url: Firecrawl API base URL
        timeout: Provider-side page load timeout in milliseconds
        wait_for: Provider-side wait before capture in milliseconds
        request_timeout: HTTP client timeout in seconds
    """
    api_key: str = ""
    base_url: str = "https://api.firecrawl.dev/v1"
    timeout: int = 30000
    wait_for: int = 5000
    request_timeout: int = 60


@dataclass
class AlaiConfig:
    """Configuration for the Alai presentation service.

    Attributes:
        email: Account email used for the token exchange (required)
        password: Account password used for the token exchange (required)
        anon_key: Public anon key sent with the token exchange
        auth_url: Token exchange endpoint
        api_base_url: Base URL of the presentation REST endpoints
        share_base_url: Base URL for public view links
        theme_id: Theme applied to new presentations
        color_set_id: Color set applied to new presentations and slides
        timeout: HTTP client timeout in seconds
    """
    email: str = ""
    password: str = ""
    anon_key: str = ""
    auth_url: str = "https://api.getalai.com/auth/v1/token?grant_type=password"
    api_base_url: str = "https://alai-standalone-backend.getalai.com"
    share_base_url: str = "https://app.getalai.com/view"
    theme_id: str = "a6bff6e5-3afc-4336-830b-fbc710081012"
    color_set_id: int = 0
    timeout: int = 60


@dataclass
class PresenterConfig:
    """Complete configuration for one presentation-creation run.

    Attributes:
        scraper: Scrape provider configuration
        alai: Presentation service configuration
        llm: Model provider configuration
        provider: Model provider id used for slide planning
        use_llm: Whether slides are planned by a model (False uses the content planner)
    """
    scraper: ScraperConfig = field(default_factory=ScraperConfig)
    alai: AlaiConfig = field(default_factory=AlaiConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    provider: str = "cloud-gemini"
    use_llm: bool = True

    @classmethod
    def load_from_yaml(cls, config_path: Optional[str] = None) -> 'PresenterConfig':
        """Load configuration from YAML file.

        A missing file is not an error; environment variables and
        defaults still apply.

        Args:
            config_path: Path to config YAML file (default: .webpage-presenter/config.yaml)

        Raises:
            ConfigurationError: If the file exists but is not valid YAML
        """
        config_data: Dict[str, Any] = {}
        config_file = Path(config_path or DEFAULT_CONFIG_PATH)

        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {config_file}: {e}")
            if not isinstance(config_data, dict):
                raise ConfigurationError(
                    f"Config file {config_file} must contain a mapping, "
                    f"got {type(config_data).__name__}"
                )
        elif config_path is not None:
            raise ConfigurationError(f"Config file not found: {config_path}")

        return cls.load_from_dict(config_data)

    @classmethod
    def load_from_dict(cls, config_data: Dict[str, Any]) -> 'PresenterConfig':
        """Load configuration from dictionary.

        Args:
            config_data: Dictionary with optional 'scraper', 'alai', 'llm',
                'provider' and 'use_llm' keys

        Returns:
            PresenterConfig with every section resolved
        """
        scraper = config_data.get('scraper') or {}
        alai = config_data.get('alai') or {}
        resolve = cls._resolve_value

        scraper_config = ScraperConfig(
            api_key=resolve(scraper.get('api_key'), 'FIRECRAWL_API_KEY', ''),
            base_url=resolve(
                scraper.get('base_url'), 'FIRECRAWL_BASE_URL', 'https://api.firecrawl.dev/v1'
            ),
            timeout=int(resolve(scraper.get('timeout'), 'FIRECRAWL_TIMEOUT', 30000)),
            wait_for=int(resolve(scraper.get('wait_for'), 'FIRECRAWL_WAIT_FOR', 5000)),
            request_timeout=int(resolve(
                scraper.get('request_timeout'), 'FIRECRAWL_REQUEST_TIMEOUT', 60
            )),
        )

        defaults = AlaiConfig()
        alai_config = AlaiConfig(
            email=resolve(alai.get('email'), 'ALAI_EMAIL', ''),
            password=resolve(alai.get('password'), 'ALAI_PASSWORD', ''),
            anon_key=resolve(alai.get('anon_key'), 'ALAI_ANON_KEY', ''),
            auth_url=resolve(alai.get('auth_url'), 'ALAI_AUTH_URL', defaults.auth_url),
            api_base_url=resolve(
                alai.get('api_base_url'), 'ALAI_API_BASE_URL', defaults.api_base_url
            ),
            share_base_url=resolve(
                alai.get('share_base_url'), 'ALAI_SHARE_BASE_URL', defaults.share_base_url
            ),
            theme_id=resolve(alai.get('theme_id'), 'ALAI_THEME_ID', defaults.theme_id),
            color_set_id=int(resolve(
                alai.get('color_set_id'), 'ALAI_COLOR_SET_ID', defaults.color_set_id
            )),
            timeout=int(resolve(alai.get('timeout'), 'ALAI_TIMEOUT', defaults.timeout)),
        )

        use_llm = resolve(config_data.get('use_llm'), 'PRESENTER_USE_LLM', True)
        if isinstance(use_llm, str):
            use_llm = use_llm.strip().lower() not in ('0', 'false', 'no', 'off')

        return cls(
            scraper=scraper_config,
            alai=alai_config,
            llm=LLMConfig.load_from_dict(config_data.get('llm')),
            provider=resolve(config_data.get('provider'), 'PRESENTER_LLM_PROVIDER', 'cloud-gemini'),
            use_llm=bool(use_llm),
        )

    def missing_credentials(
        self,
        use_llm: Optional[bool] = None,
        provider: Optional[str] = None
    ) -> List[str]:
        """List the environment variables for credentials that are not set.

        Args:
            use_llm: Override for self.use_llm; model keys are only required
                when slides are planned by a model
            provider: Override for self.provider
        """
        if use_llm is None:
            use_llm = self.use_llm
        provider = provider or self.provider

        missing = []
        if not self.scraper.api_key:
            missing.append('FIRECRAWL_API_KEY')
        if not self.alai.email:
            missing.append('ALAI_EMAIL')
        if not self.alai.password:
            missing.append('ALAI_PASSWORD')

        if use_llm:
            factory = LLMProviderFactory(self.llm)
            if not factory.has_credentials(provider):
                provider = factory.normalize_provider_id(provider)
                env_names = {
                    'cloud-gemini': 'GEMINI_API_KEY',
                    'cloud-openai': 'OPENAI_API_KEY',
                    'cloud-anthropic': 'ANTHROPIC_API_KEY',
                }
                missing.append(env_names.get(provider, f'API key for provider {provider}'))
        return missing

    def validate(
        self,
        use_llm: Optional[bool] = None,
        require_alai: bool = True,
        provider: Optional[str] = None
    ) -> None:
        """Fail fast when a required credential is missing.

        Args:
            use_llm: Override for self.use_llm
            require_alai: Whether presentation service credentials are required
                (False for commands that never call the service)
            provider: Override for self.provider

        Raises:
            ConfigurationError: Listing every missing credential
        """
        missing = self.missing_credentials(use_llm, provider)
        if not require_alai:
            missing = [name for name in missing if not name.startswith('ALAI_')]
        if missing:
            raise ConfigurationError(
                "Missing required configuration: "
                f"{', '.join(missing)}. "
                "Set them as environment variables (or in .env) "
                f"or in {DEFAULT_CONFIG_PATH}."
            )

    @staticmethod
    def _resolve_value(config_value: Any, env_var: str, default: Any) -> Any:
        """Resolve configuration value with precedence: ENV > Config > Default."""
        env_value = os.getenv(env_var)
        if env_value is not None:
            return env_value

        if config_value is not None:
            return config_value

        return default
