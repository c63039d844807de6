"""
Prompt Renderer

Renders prompt templates with page context using Jinja2.
"""

from jinja2 import TemplateError, Environment, StrictUndefined
from typing import Dict, Any, Optional

from presenter.errors import PlanningError


class PromptRenderer:
    """Renders prompt templates with page context.

    Attributes:
        strict_mode: If True, raises error for undefined variables
    """

    def __init__(self, strict_mode: bool = True):
        self.strict_mode = strict_mode

        if strict_mode:
            self.env = Environment(undefined=StrictUndefined)
        else:
            self.env = Environment()

    def render(
        self,
        prompt_template: Dict[str, Any],
        markdown: str,
        base_url: str,
        additional_context: Optional[Dict[str, Any]] = None
    ) -> str:
        """Render prompt template with context.

        Args:
            prompt_template: Template dict with 'system' and 'user_template' keys
            markdown: Page content as markdown
            base_url: Page URL for resolving relative image links
            additional_context: Optional additional context variables

        Returns:
            Rendered prompt string (system + user combined)

        Raises:
            PlanningError: If template rendering fails
        """
        context = {
            "markdown": markdown,
            "base_url": base_url,
        }
        if additional_context:
            context.update(additional_context)

        try:
            system_prompt = self.env.from_string(prompt_template["system"]).render(**context)
            user_prompt = self.env.from_string(prompt_template["user_template"]).render(**context)
        except TemplateError as e:
            raise PlanningError(f"Error rendering prompt template: {e}")
        except KeyError as e:
            raise PlanningError(f"Prompt template missing required field: {e}")

        return f"{system_prompt}\n\n{user_prompt}"
