"""Session manager owning the single MySQL connection of the process."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from core.config import ConnectionConfig
from core.exceptions import DatabaseConnectionError
from database.connector import MySQLConnector

logger = logging.getLogger(__name__)

ConnectorFactory = Callable[[ConnectionConfig], Awaitable[MySQLConnector]]


class SessionManager:
    """
    Lazily establishes and owns one MySQL session.

    - ``ensure_connected()`` opens the session on first use and returns the
      same session afterwards without checking liveness.
    - Concurrent first callers share one in-flight connection attempt, so at
      most one connection is ever opened.
    - A failed attempt is not recorded; the next call starts over.
    - ``close()`` is idempotent.
    """

    def __init__(self, config: ConnectionConfig, connector_factory: Optional[ConnectorFactory] = None):
        self.config = config
        self._connector_factory = connector_factory or MySQLConnector.connect
        self._session: Optional[MySQLConnector] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def is_connected(self) -> bool:
        return self._session is not None

    async def ensure_connected(self) -> MySQLConnector:
        """Return the session, connecting first if there is none.

        Raises:
            DatabaseConnectionError: if the connection attempt fails.
        """
        if self._session is not None:
            return self._session

        if self._pending is None:
            pending = asyncio.ensure_future(self._connect())
            # Cleared when the attempt settles, even if every waiter was cancelled
            pending.add_done_callback(self._clear_pending)
            self._pending = pending

        # shield: a cancelled caller must not abort the attempt others await
        return await asyncio.shield(self._pending)

    def _clear_pending(self, future: asyncio.Future) -> None:
        if self._pending is future:
            self._pending = None

    async def _connect(self) -> MySQLConnector:
        logger.info(f"Connecting to MySQL at {self.config.host}:{self.config.port} (user: {self.config.user})")
        try:
            session = await self._connector_factory(self.config)
        except DatabaseConnectionError as e:
            logger.error(f"MySQL connection failed: {e.message}")
            raise
        except Exception as e:
            logger.error(f"MySQL connection failed: {e}", exc_info=True)
            raise DatabaseConnectionError(
                f"Failed to connect to MySQL at {self.config.host}:{self.config.port}: {e}"
            ) from e

        self._session = session
        logger.info(f"Connected to MySQL at {self.config.host}:{self.config.port}")
        return session

    async def close(self):
        """Close the session if one exists. Safe to call repeatedly."""
        pending = self._pending
        if pending is not None and not pending.done():
            # Let an in-flight attempt settle so its connection is not leaked
            await asyncio.wait([pending])

        session = self._session
        if session is None:
            return

        self._session = None
        await session.close()
        logger.info("MySQL connection closed")
