#!/usr/bin/env python3
"""
Entry point for the CHUK Palette MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Palette MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to palette YAML config (default: ./palette.yaml)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.config:
        os.environ["PALETTE_CONFIG"] = args.config

    # Import after argument parsing so the config path is picked up
    from chuk_mcp_palette.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Palette MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Palette MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
