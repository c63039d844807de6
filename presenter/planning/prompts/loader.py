"""
Prompt Loader

Loads and validates YAML prompt templates for slide planning.
Supports a custom prompt directory with fallback to the packaged defaults.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from presenter.errors import PlanningError


class PromptLoader:
    """Loads and validates YAML prompt templates.

    Attributes:
        default_prompts_dir: Directory containing default prompt templates
        custom_prompts_dir: Optional directory for custom templates
    """

    TEMPLATE_MAP = {
        'slide_plan': 'slide_plan.yaml',
    }

    REQUIRED_FIELDS = ("system", "user_template", "expected_output")

    def __init__(
        self,
        default_prompts_dir: Optional[Path] = None,
        custom_prompts_dir: Optional[Path] = None
    ):
        """Initialize the prompt loader.

        Args:
            default_prompts_dir: Directory with default prompts (defaults to this package)
            custom_prompts_dir: Optional directory with custom prompts

        Raises:
            PlanningError: If the default prompts directory does not exist
        """
        if default_prompts_dir is None:
            default_prompts_dir = Path(__file__).parent

        self.default_prompts_dir = Path(default_prompts_dir)
        self.custom_prompts_dir = Path(custom_prompts_dir) if custom_prompts_dir else None
        self._prompt_cache: Dict[str, Dict[str, Any]] = {}

        if not self.default_prompts_dir.exists():
            raise PlanningError(
                f"Default prompts directory does not exist: {self.default_prompts_dir}"
            )

    def load_prompt(self, prompt_name: str = 'slide_plan') -> Dict[str, Any]:
        """Load prompt template by name.

        Checks the custom prompts directory first, then falls back to defaults.

        Args:
            prompt_name: Template name (currently only 'slide_plan')

        Returns:
            Prompt template dictionary with 'system', 'user_template' and 'expected_output'

        Raises:
            PlanningError: If the prompt cannot be loaded or is invalid
        """
        if prompt_name in self._prompt_cache:
            return self._prompt_cache[prompt_name]

        if prompt_name not in self.TEMPLATE_MAP:
            raise PlanningError(
                f"Unknown prompt: {prompt_name}. "
                f"Must be one of: {list(self.TEMPLATE_MAP.keys())}"
            )

        template_filename = self.TEMPLATE_MAP[prompt_name]

        candidates = []
        if self.custom_prompts_dir:
            candidates.append(self.custom_prompts_dir / template_filename)
        candidates.append(self.default_prompts_dir / template_filename)

        for path in candidates:
            if path.exists():
                prompt = self._load_yaml(path)
                self._validate_prompt(prompt, prompt_name)
                self._prompt_cache[prompt_name] = prompt
                return prompt

        raise PlanningError(
            f"No prompt template found for {prompt_name} in "
            f"{', '.join(str(p.parent) for p in candidates)}"
        )

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PlanningError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise PlanningError(f"Error reading {path}: {e}")

        if not isinstance(data, dict):
            raise PlanningError(
                f"YAML file must contain a dictionary, got {type(data).__name__}"
            )
        return data

    def _validate_prompt(self, prompt: Dict[str, Any], prompt_name: str):
        """Ensure the template has every required field with the right type."""
        for field in self.REQUIRED_FIELDS:
            if field not in prompt:
                raise PlanningError(
                    f"Prompt for {prompt_name} missing required field: {field}"
                )

        for field in ("system", "user_template"):
            if not isinstance(prompt[field], str) or not prompt[field].strip():
                raise PlanningError(
                    f"Prompt '{field}' field must be a non-empty string for {prompt_name}"
                )

        if not isinstance(prompt["expected_output"], dict):
            raise PlanningError(
                f"Prompt 'expected_output' field must be a dictionary, "
                f"got {type(prompt['expected_output']).__name__}"
            )

    def clear_cache(self):
        """Clear the prompt cache."""
        self._prompt_cache.clear()
