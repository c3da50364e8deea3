"""Entry point for the MySQL MCP server.

The server speaks MCP over stdio, so stdout carries protocol messages only
and all logging goes to stderr.

Usage:
    # Lazy connection on first request (default)
    python main.py

    # Connect before the transport attaches
    python main.py --connect-on-startup

Exit codes: 0 on graceful shutdown, 1 on configuration or transport failure.
"""

import argparse
import asyncio
import logging
import os
import sys

from core.config import AppConfig
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO"):
    """Send all logging to stderr; stdout belongs to the protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
        force=True
    )


def _exit_process(code: int):
    """Exit immediately, without joining the blocked stdin reader thread."""
    logging.shutdown()
    sys.stdout.flush()
    os._exit(code)


async def run_stdio_mode(app_config: AppConfig):
    """Run MCP server in STDIO mode.

    This mode is used when the server is spawned as a subprocess by an MCP
    client. After a stop signal the session is already closed, and the
    process exits from here: the stdin read would otherwise keep the event
    loop from shutting down until the client closes the pipe.
    """
    logger.info("Starting MySQL MCP Server in STDIO mode")

    from protocol.stdio_server import run_stdio_server
    stopped_by_signal = await run_stdio_server(app_config)
    if stopped_by_signal:
        _exit_process(0)


def main(argv=None) -> int:
    """Main entry point with argument parsing."""
    parser = argparse.ArgumentParser(
        description="MySQL MCP Server - exposes a MySQL database over MCP stdio"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from LOG_LEVEL env or INFO)"
    )
    parser.add_argument(
        "--connect-on-startup",
        action="store_true",
        help="Connect to MySQL before accepting requests (default: on first request)"
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level or "INFO")

    try:
        app_config = AppConfig.from_env()
    except ConfigurationError as e:
        logger.error(f"Failed to load configuration: {e.message}")
        return 1

    configure_logging(args.log_level or app_config.log_level)
    if args.connect_on_startup:
        app_config = app_config.model_copy(update={"connect_on_startup": True})

    logger.info(f"MySQL configuration loaded: {app_config.connection.describe()}")

    try:
        asyncio.run(run_stdio_mode(app_config))
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception as e:
        logger.error(f"STDIO server error: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
