"""MCP prompt templates for the MySQL MCP server."""

from prompts.registry import PromptRegistry
from prompts.templates import PROMPT_TEMPLATES, PromptTemplate

__all__ = [
    'PromptRegistry',
    'PromptTemplate',
    'PROMPT_TEMPLATES',
]
