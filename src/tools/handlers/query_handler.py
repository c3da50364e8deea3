"""Ad-hoc SQL execution handler."""

import logging
from typing import Type

from pydantic import BaseModel

from core.envelope import Success
from core.error_handling import format_success_response, to_json
from database import catalog
from database.connector import MySQLConnector
from tools.base import ToolHandler
from tools.definitions import TOOL_EXECUTE_QUERY
from tools.validators import ExecuteQueryArguments

logger = logging.getLogger(__name__)


class ExecuteQueryHandler(ToolHandler):
    """Handler for ``execute_query``.

    The statement is passed through as-is: no parsing, sanitization or
    parameterization. Callers are fully trusted.
    """

    @property
    def tool_name(self) -> str:
        return TOOL_EXECUTE_QUERY

    @property
    def arguments_model(self) -> Type[BaseModel]:
        return ExecuteQueryArguments

    async def handle(self, arguments: ExecuteQueryArguments, session: MySQLConnector) -> Success:
        result = await catalog.execute_statement(session, arguments.query, arguments.database)

        if isinstance(result, list):
            logger.debug(f"Query returned {len(result)} rows")

        output = "Query result:\n"
        output += f"```sql\n{arguments.query}\n```\n\n"
        output += "Results:\n"
        output += f"```json\n{to_json(result)}\n```"
        return format_success_response(output)
