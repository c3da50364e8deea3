"""STDIO transport MCP server and process lifecycle."""

import asyncio
import logging
import signal
from typing import Optional

from mcp.server.stdio import stdio_server

from core.config import AppConfig
from core.exceptions import DatabaseConnectionError
from database.session import SessionManager
from protocol.base_server import BaseMCPServer
from protocol.dispatcher import Dispatcher
from resources.registry import ResourceRegistry

logger = logging.getLogger(__name__)


class StdioMCPServer(BaseMCPServer):
    """MCP server using STDIO transport."""

    async def run(self):
        """Run the STDIO MCP server until stdin closes."""
        logger.info("Starting STDIO MCP server")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


SHUTDOWN_GRACE_SECONDS = 2.0
_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _install_signal_handlers(stop_event: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in _SIGNALS:
        try:
            loop.add_signal_handler(sig, _on_signal, sig, stop_event)
        except (NotImplementedError, RuntimeError):
            # Windows event loops have no signal handler support
            logger.debug(f"Signal handler for {sig.name} not supported on this platform")


def _restore_signal_handlers() -> None:
    # A second signal during shutdown falls back to the default behavior
    loop = asyncio.get_running_loop()
    for sig in _SIGNALS:
        try:
            loop.remove_signal_handler(sig)
        except (NotImplementedError, RuntimeError):
            pass


def _on_signal(sig: signal.Signals, stop_event: asyncio.Event) -> None:
    logger.info(f"Received {sig.name}, shutting down MCP server...")
    stop_event.set()


async def run_stdio_server(
    app_config: AppConfig,
    session_manager: Optional[SessionManager] = None,
    server: Optional[StdioMCPServer] = None
) -> bool:
    """Run the STDIO MCP server with ``app_config``.

    Serves until stdin closes or SIGINT/SIGTERM arrives, then closes the
    MySQL session and returns.

    Returns:
        True if a stop signal ended serving. The transport may then still
        hold a stdin read that only returns once the pipe closes.
    """
    session_manager = session_manager or SessionManager(app_config.connection)
    if server is None:
        dispatcher = Dispatcher(
            session_manager,
            resource_registry=ResourceRegistry(app_config.resource_scheme)
        )
        server = StdioMCPServer(dispatcher, app_config.server_name, app_config.server_version)

    if app_config.connect_on_startup:
        try:
            await session_manager.ensure_connected()
        except DatabaseConnectionError as e:
            # Left for lazy retry on the first request
            logger.warning(f"Startup connection failed, will retry on first request: {e.message}")

    stop_event = asyncio.Event()
    _install_signal_handlers(stop_event)

    serve_task = asyncio.create_task(server.run())
    stop_task = asyncio.create_task(stop_event.wait())
    try:
        await asyncio.wait({serve_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        stop_task.cancel()
        # Session first: it must be closed before the process exits
        await session_manager.close()
        if not serve_task.done():
            serve_task.cancel()
            # The stdin reader only notices cancellation once its pending read returns
            await asyncio.wait({serve_task}, timeout=SHUTDOWN_GRACE_SECONDS)
        _restore_signal_handlers()
        logger.info("Graceful shutdown completed")

    # Surface transport failures to the caller (exit code 1)
    if serve_task.done() and not serve_task.cancelled() and serve_task.exception() is not None:
        raise serve_task.exception()
    return stop_event.is_set()
