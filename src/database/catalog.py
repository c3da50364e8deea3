"""Catalog operations: statement execution and MySQL introspection.

Each function takes the session explicitly and returns plain data; response
formatting belongs to the tool and resource handlers.

Selecting a database (``database=...``) is a persistent session-level side
effect, not scoped to the single request that requested it.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from core.exceptions import QueryExecutionError
from database.connector import MySQLConnector, QueryResult, Rows, quote_identifier

logger = logging.getLogger(__name__)


class ColumnInfo(BaseModel):
    """One column as reported by ``DESCRIBE``."""

    name: str
    type: str
    nullable: bool
    key: str = ""
    default: Any = None
    extra: str = ""

    @classmethod
    def from_describe_row(cls, row: Dict[str, Any]) -> "ColumnInfo":
        return cls(
            name=row["Field"],
            type=_as_text(row["Type"]),
            nullable=row.get("Null") == "YES",
            key=row.get("Key") or "",
            default=row.get("Default"),
            extra=row.get("Extra") or "",
        )


class CatalogEntry(BaseModel):
    """A table and its ordered columns. Built per request, never cached."""

    table_name: str
    columns: List[ColumnInfo] = Field(default_factory=list)


def _as_text(value: Any) -> str:
    # Some server versions report column types as bytes
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def table_names(rows: Rows) -> List[str]:
    """Extract table names from ``SHOW TABLES`` rows (single ``Tables_in_<db>`` column)."""
    return [_as_text(next(iter(row.values()))) for row in rows]


async def _select_database(session: MySQLConnector, database: Optional[str]) -> None:
    if database:
        logger.debug(f"Switching session database to {database}")
        await session.use_database(database)


async def execute_statement(session: MySQLConnector, statement: str, database: Optional[str] = None) -> QueryResult:
    """Run ``statement`` verbatim, after switching database if requested."""
    await _select_database(session, database)
    return await session.query(statement)


async def describe_table(session: MySQLConnector, table_name: str, database: Optional[str] = None) -> Rows:
    await _select_database(session, database)
    return await session.query(f"DESCRIBE {quote_identifier(table_name)}")


async def list_tables(session: MySQLConnector, database: Optional[str] = None) -> Rows:
    await _select_database(session, database)
    return await session.query("SHOW TABLES")


async def list_databases(session: MySQLConnector) -> Rows:
    return await session.query("SHOW DATABASES")


async def build_schema(session: MySQLConnector) -> List[CatalogEntry]:
    """Describe every table of the current database, in ``SHOW TABLES`` order.

    Issues one listing statement followed by one ``DESCRIBE`` per table.
    There is no partial result: if any describe fails, the whole call fails.
    """
    names = table_names(await list_tables(session))
    entries = []
    for name in names:
        try:
            rows = await describe_table(session, name)
        except QueryExecutionError as e:
            raise QueryExecutionError(f"Failed to describe table '{name}': {e.message}", e.details) from e
        entries.append(CatalogEntry(
            table_name=name,
            columns=[ColumnInfo.from_describe_row(row) for row in rows],
        ))
    logger.debug(f"Built schema for {len(entries)} tables")
    return entries
