"""Error and result normalization for tool calls and resource reads.

Provides the JSON serialization used for result payloads and converts
exceptions into ``Failure`` envelopes. Diagnostic detail (tracebacks,
exception details) goes to the log only; the envelope carries the
top-level message text.
"""

import datetime
import decimal
import json
import logging
from typing import Any, Optional

from core.envelope import Failure, Success
from core.exceptions import MySQLMCPError, UnknownOperationError

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    """Coerce driver values json cannot encode natively."""
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (decimal.Decimal, datetime.timedelta)):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (set, frozenset)):
        # SET columns
        return sorted(value)
    if hasattr(value, "model_dump"):
        return value.model_dump()
    return str(value)


def to_json(data: Any) -> str:
    """Pretty-print result data as JSON (indent 2, non-ASCII preserved)."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=_json_default)


def format_error_response(
    error: Exception,
    operation: str,
    context: Optional[dict] = None
) -> Failure:
    """Convert an exception raised while serving ``operation`` into a Failure.

    Args:
        error: The exception that occurred
        operation: Tool name or resource URI being served
        context: Additional context, logged only

    Returns:
        Failure envelope with the underlying message text
    """
    if isinstance(error, UnknownOperationError):
        logger.warning(error.message)
        return Failure(message=error.message)

    error_message = error.message if isinstance(error, MySQLMCPError) else str(error)
    error_type = type(error).__name__

    # Domain errors are expected per-request failures; anything else is a bug
    log_traceback = not isinstance(error, MySQLMCPError)
    logger.error(
        f"{error_type} while executing {operation}: {error_message}"
        + (f" (context: {context})" if context else ""),
        exc_info=log_traceback
    )

    return Failure(message=f"Error executing {operation}: {error_message}")


def format_success_response(text: str) -> Success:
    """Wrap result text in a single text block."""
    return Success.text(text)
