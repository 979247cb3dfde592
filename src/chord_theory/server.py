#!/usr/bin/env python3
"""
Command-line entry point: `chord-theory-server`.

Serves the chord tools over stdio (for MCP clients that spawn the
process) or over HTTP.
"""

import argparse
import asyncio
import logging

from chord_theory import __version__
from chord_theory.constants import DEFAULT_HTTP_PORT, SERVER_NAME

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """CLI flags for the server."""
    parser = argparse.ArgumentParser(
        prog=f"{SERVER_NAME}-server",
        description="Serve chord voicing, naming, scale and MIDI export tools over MCP.",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio for spawned MCP clients, http for a long-running server",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_HTTP_PORT,
        help=f"HTTP port, ignored for stdio (default: {DEFAULT_HTTP_PORT})",
    )
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    # Deferred so the log level is set before the tools register
    from chord_theory.async_server import mcp

    logger.info("%s %s on %s", SERVER_NAME, __version__, args.transport)
    if args.transport == "http":
        asyncio.run(mcp.run_http(port=args.port))
    else:
        asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
