"""
pytest configuration

Puts ``src`` on the import path and provides an in-memory MySQL session
so dispatcher and handler tests need no live database.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

# Add src directory to the Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from core.config import ConnectionConfig  # noqa: E402
from core.exceptions import QueryExecutionError  # noqa: E402
from database.connector import quote_identifier  # noqa: E402
from database.session import SessionManager  # noqa: E402


def column(name: str, type_: str = "int", null: str = "YES", key: str = "",
           default: Any = None, extra: str = "") -> Dict[str, Any]:
    """A ``DESCRIBE`` row as returned by the driver's DictCursor."""
    return {"Field": name, "Type": type_, "Null": null, "Key": key, "Default": default, "Extra": extra}


class FakeSession:
    """Stand-in for MySQLConnector that records every statement it runs."""

    def __init__(self, tables: Optional[Dict[str, List[dict]]] = None,
                 databases: Optional[List[str]] = None, database: str = "app"):
        self.tables = tables if tables is not None else {}
        self.databases = databases or ["information_schema", "app"]
        self.database = database
        self.statements: List[str] = []
        self.results: Dict[str, Any] = {}
        self.failures: Dict[str, str] = {}
        self.close_calls = 0

    async def query(self, statement: str):
        self.statements.append(statement)
        if statement in self.failures:
            raise QueryExecutionError(self.failures[statement])
        if statement in self.results:
            return self.results[statement]
        if statement.startswith("USE `"):
            self.database = statement[len("USE `"):-1]
            return {"affectedRows": 0, "insertId": 0}
        if statement == "SHOW TABLES":
            return [{f"Tables_in_{self.database}": name} for name in self.tables]
        if statement == "SHOW DATABASES":
            return [{"Database": name} for name in self.databases]
        if statement.startswith("DESCRIBE `"):
            name = statement[len("DESCRIBE `"):-1]
            if name not in self.tables:
                raise QueryExecutionError(f"(1146) Table '{self.database}.{name}' doesn't exist")
            return self.tables[name]
        raise QueryExecutionError(f"Unexpected statement: {statement}")

    async def use_database(self, database: str) -> None:
        await self.query(f"USE {quote_identifier(database)}")

    async def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def connection_config():
    """Connection configuration fixture"""
    return ConnectionConfig(host="localhost", port=3306, user="root", password="", database=None)


@pytest.fixture
def shop_tables():
    """Two tables, in SHOW TABLES order"""
    return {
        "users": [
            column("id", "int", null="NO", key="PRI", extra="auto_increment"),
            column("email", "varchar(255)", null="NO", key="UNI"),
        ],
        "orders": [
            column("id", "int", null="NO", key="PRI"),
            column("user_id", "int", key="MUL"),
            column("total", "decimal(10,2)", default="0.00"),
        ],
    }


@pytest.fixture
def fake_session(shop_tables):
    return FakeSession(tables=shop_tables)


@pytest.fixture
def empty_session():
    return FakeSession(tables={})


@pytest.fixture
def session_factory(fake_session):
    return AsyncMock(return_value=fake_session)


@pytest.fixture
def session_manager(connection_config, session_factory):
    return SessionManager(connection_config, connector_factory=session_factory)
