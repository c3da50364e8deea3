"""Tool handlers package."""

from tools.handlers.query_handler import ExecuteQueryHandler
from tools.handlers.schema_handler import DescribeTableHandler, ListTablesHandler

__all__ = [
    'ExecuteQueryHandler',
    'DescribeTableHandler',
    'ListTablesHandler',
]
