"""MySQL connector built on aiomysql.

Statements are sent through the text protocol (``cursor.execute`` without
parameters), one statement per round trip, so administrative statements
such as ``SHOW``, ``USE`` and ``DESCRIBE`` run the same way as ordinary
queries and no ``%`` interpolation is applied to the caller's SQL.
"""

import logging
from typing import Any, Dict, List, Union

import aiomysql
import pymysql

from core.config import ConnectionConfig
from core.exceptions import DatabaseConnectionError, QueryExecutionError

logger = logging.getLogger(__name__)

Rows = List[Dict[str, Any]]
QueryResult = Union[Rows, Dict[str, Any]]


def quote_identifier(name: str) -> str:
    """Back-tick quote a MySQL identifier, doubling embedded back-ticks."""
    return "`" + name.replace("`", "``") + "`"


def _driver_message(error: Exception) -> str:
    # pymysql errors carry (code, message) in args
    if isinstance(error, pymysql.MySQLError) and len(error.args) >= 2:
        return f"({error.args[0]}) {error.args[1]}"
    return str(error) or type(error).__name__


class MySQLConnector:
    """A single open MySQL connection.

    Use :meth:`connect` to create one. Rows are returned as dicts keyed by
    column name. Statements without a result set return a summary dict with
    ``affectedRows`` and ``insertId``.
    """

    def __init__(self, connection: Any, config: ConnectionConfig):
        self._connection = connection
        self.config = config

    @classmethod
    async def connect(cls, config: ConnectionConfig) -> "MySQLConnector":
        """Open a connection using ``config``.

        Raises:
            DatabaseConnectionError: if the server cannot be reached or
                rejects the credentials.
        """
        try:
            connection = await aiomysql.connect(
                host=config.host,
                port=config.port,
                user=config.user,
                password=config.password,
                db=config.database,
                connect_timeout=config.connect_timeout,
                autocommit=True,
                charset="utf8mb4",
                cursorclass=aiomysql.DictCursor,
            )
        except (pymysql.MySQLError, OSError) as e:
            raise DatabaseConnectionError(
                f"Failed to connect to MySQL at {config.host}:{config.port}: {_driver_message(e)}",
                {"host": config.host, "port": config.port, "user": config.user}
            ) from e
        return cls(connection, config)

    async def query(self, statement: str) -> QueryResult:
        """Execute ``statement`` verbatim and return its rows.

        Raises:
            QueryExecutionError: on any driver error, including a connection
                that broke since the last call.
        """
        try:
            async with self._connection.cursor() as cursor:
                await cursor.execute(statement)
                if cursor.description is None:
                    return {"affectedRows": cursor.rowcount, "insertId": cursor.lastrowid}
                rows = await cursor.fetchall()
                return list(rows)
        except (pymysql.MySQLError, OSError) as e:
            raise QueryExecutionError(_driver_message(e), {"statement": statement[:200]}) from e

    async def use_database(self, database: str) -> None:
        """Select ``database`` for this connection.

        The selection persists for every later statement on the connection,
        not only for the request that asked for it.
        """
        await self.query(f"USE {quote_identifier(database)}")

    async def close(self) -> None:
        """Send QUIT and close the socket."""
        try:
            await self._connection.ensure_closed()
        except (pymysql.MySQLError, OSError) as e:
            # Peer already gone; make sure the socket is released
            logger.warning(f"Error while closing MySQL connection: {e}")
            self._connection.close()
