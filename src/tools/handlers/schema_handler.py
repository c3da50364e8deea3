"""Table introspection handlers."""

from typing import Type

from pydantic import BaseModel

from core.envelope import Success
from database import catalog
from database.connector import MySQLConnector
from tools.base import ToolHandler
from tools.definitions import TOOL_DESCRIBE_TABLE, TOOL_LIST_TABLES
from tools.validators import DescribeTableArguments, ListTablesArguments


class DescribeTableHandler(ToolHandler):
    """Handler for ``describe_table``: column list of one table."""

    @property
    def tool_name(self) -> str:
        return TOOL_DESCRIBE_TABLE

    @property
    def arguments_model(self) -> Type[BaseModel]:
        return DescribeTableArguments

    async def handle(self, arguments: DescribeTableArguments, session: MySQLConnector) -> Success:
        rows = await catalog.describe_table(session, arguments.table_name, arguments.database)
        return self._json_block_response(f'Structure of table "{arguments.table_name}":', rows)


class ListTablesHandler(ToolHandler):
    """Handler for ``list_tables``."""

    @property
    def tool_name(self) -> str:
        return TOOL_LIST_TABLES

    @property
    def arguments_model(self) -> Type[BaseModel]:
        return ListTablesArguments

    async def handle(self, arguments: ListTablesArguments, session: MySQLConnector) -> Success:
        rows = await catalog.list_tables(session, arguments.database)
        return self._json_block_response("Tables:", rows)
