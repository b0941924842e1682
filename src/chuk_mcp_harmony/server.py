#!/usr/bin/env python3
"""
Entry point for the CHUK Harmony MCP Server.

This module provides the main entry point for the MCP server over stdio.
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="CHUK Harmony MCP Server")
    parser.add_argument(
        "--tonal-keys",
        type=Path,
        default=None,
        help="Directory of project tonal key tables (default: ./tonal_keys)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing so --debug covers server setup
    from chuk_mcp_harmony.async_server import mcp, use_tonal_keys_dir

    if args.tonal_keys is not None:
        use_tonal_keys_dir(args.tonal_keys)

    logger.info("Starting CHUK Harmony MCP Server (stdio)")
    asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
