"""
Circle tools - MCP tools for the circle of fifths and chromatic circle.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.services import ChromaticCircleService, CircleOfFifthsService

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_circle_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register circle tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_circle_of_fifths() -> str:
        """
        Get the 12 circle-of-fifths segments.

        Each segment holds a major key, its relative minor and the
        key-signature label.

        Returns:
            JSON string with the segments in circle order

        Example:
            harmony_circle_of_fifths()
        """
        try:
            segments = CircleOfFifthsService.get_segment_dtos()
            return json.dumps(
                {
                    "status": "success",
                    "segments": [s.model_dump(by_alias=True) for s in segments],
                    "count": len(segments),
                }
            )
        except Exception as e:
            logger.exception("Failed to build circle of fifths")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_circle_of_fifths"] = harmony_circle_of_fifths

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_chromatic_circle() -> str:
        """
        Get the 12 pitch classes in chromatic order.

        Returns:
            JSON string with the segments, C first

        Example:
            harmony_chromatic_circle()
        """
        try:
            segments = ChromaticCircleService.get_segment_dtos()
            return json.dumps(
                {
                    "status": "success",
                    "segments": [s.model_dump(by_alias=True) for s in segments],
                    "count": len(segments),
                }
            )
        except Exception as e:
            logger.exception("Failed to build chromatic circle")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_chromatic_circle"] = harmony_chromatic_circle

    return tools
