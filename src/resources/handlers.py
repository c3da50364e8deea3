"""Resource handlers: databases, tables and full schema."""

from typing import Any, Dict

from database import catalog
from database.connector import MySQLConnector
from resources.base import ResourceHandler


class DatabasesResource(ResourceHandler):
    path = "databases"
    name = "Databases"
    description = "List of all databases visible to the connected user"

    async def read(self, session: MySQLConnector) -> Any:
        return await catalog.list_databases(session)


class TablesResource(ResourceHandler):
    path = "tables"
    name = "Tables"
    description = "List of all tables in the current database"

    async def read(self, session: MySQLConnector) -> Any:
        return await catalog.list_tables(session)


class SchemaResource(ResourceHandler):
    path = "schema"
    name = "Database Schema"
    description = "Complete schema of the current database: every table with its columns"

    async def read(self, session: MySQLConnector) -> Dict[str, Any]:
        entries = await catalog.build_schema(session)
        return {"tables": [entry.model_dump() for entry in entries]}
