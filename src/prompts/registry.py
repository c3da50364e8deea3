"""Prompt registry serving the static prompt templates."""

import logging
from typing import Dict, List, Optional

from mcp.types import GetPromptResult, Prompt, PromptMessage, TextContent

from core.exceptions import UnknownOperationError, ValidationError
from prompts.templates import PROMPT_TEMPLATES, PromptTemplate

logger = logging.getLogger(__name__)


class PromptRegistry:
    """Closed mapping of prompt names to templates."""

    def __init__(self, templates: Optional[List[PromptTemplate]] = None):
        self.templates: Dict[str, PromptTemplate] = {
            template.name: template for template in (templates or PROMPT_TEMPLATES)
        }

    def list_prompts(self) -> List[Prompt]:
        return [
            Prompt(name=t.name, description=t.description, arguments=list(t.arguments))
            for t in self.templates.values()
        ]

    def get_prompt(self, name: str, arguments: Optional[Dict[str, str]] = None) -> GetPromptResult:
        """Render prompt ``name``.

        Raises:
            UnknownOperationError: if no prompt has that name
            ValidationError: if a required argument is missing or blank
        """
        template = self.templates.get(name)
        if template is None:
            raise UnknownOperationError(f"Unknown prompt: {name}")

        arguments = arguments or {}
        values = {}
        for argument in template.arguments:
            value = arguments.get(argument.name)
            if argument.required and (not isinstance(value, str) or not value.strip()):
                raise ValidationError(f"Missing required argument: {argument.name}")
            values[argument.name] = value or ""

        logger.debug(f"Rendering prompt {name}")
        return GetPromptResult(
            description=template.render_title(values),
            messages=[
                PromptMessage(
                    role="user",
                    content=TextContent(type="text", text=template.render(values)),
                )
            ],
        )
