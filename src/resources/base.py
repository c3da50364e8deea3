"""Base class for read-only MCP resources."""

from abc import ABC, abstractmethod
from typing import Any

from database.connector import MySQLConnector


class ResourceHandler(ABC):
    """A URI-identified, read-only JSON view of the database.

    ``path`` is the part after ``<scheme>://``; the registry builds the
    full URI.
    """

    path: str = ""
    name: str = ""
    description: str = ""

    @abstractmethod
    async def read(self, session: MySQLConnector) -> Any:
        """Return JSON-serializable data for this resource."""
        pass
