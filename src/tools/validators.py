"""Argument models for MCP tools.

Each tool has one closed argument model. ``parse_arguments`` turns the raw
argument mapping of a tool call into a validated model or raises
``ValidationError`` with a message naming the offending field.
"""

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.exceptions import ValidationError

ArgumentsT = TypeVar("ArgumentsT", bound=BaseModel)


class ToolArguments(BaseModel):
    """Base for tool argument models. Unknown extra arguments are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    database: Optional[str] = None

    @field_validator("database")
    @classmethod
    def _empty_database_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value if value and value.strip() else None


def _non_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must be a non-empty string")
    return value


class ExecuteQueryArguments(ToolArguments):
    query: str

    @field_validator("query")
    @classmethod
    def _check_query(cls, value: str) -> str:
        return _non_blank(value)


class DescribeTableArguments(ToolArguments):
    table_name: str

    @field_validator("table_name")
    @classmethod
    def _check_table_name(cls, value: str) -> str:
        return _non_blank(value)


class ListTablesArguments(ToolArguments):
    pass


def _describe_error(error: Dict[str, Any]) -> str:
    field = ".".join(str(loc) for loc in error["loc"]) or "arguments"
    if error["type"] == "missing":
        return f"Missing required argument: {field}"
    if error["type"] in ("string_type", "value_error", "string_too_short"):
        return f"Argument '{field}' must be a non-empty string"
    return f"Invalid argument '{field}': {error['msg']}"


def parse_arguments(model: Type[ArgumentsT], arguments: Optional[Dict[str, Any]]) -> ArgumentsT:
    """Validate raw tool arguments against ``model``.

    Raises:
        ValidationError: if a required argument is missing or has the wrong type.
    """
    try:
        return model.model_validate(arguments or {})
    except PydanticValidationError as e:
        messages = [_describe_error(err) for err in e.errors()]
        raise ValidationError("; ".join(messages), {"arguments": sorted((arguments or {}).keys())}) from e
