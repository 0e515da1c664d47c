# =============================================================================
# canvas_tools/mcp_server.py - FastMCP Tool Server (all six tools)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the Canvas tools to an MCP host over stdio.  Each tool here is a
#   thin, typed wrapper: it hands its arguments to the ToolDispatcher
#   (canvas_tools/registry.py) and returns the pretty-printed JSON text.
#
# HOW IT WORKS (the flow):
#   1. The host lists tools; FastMCP answers from the decorated functions
#      below.  Their signatures are the advertised argument schemas, so
#      defaults such as days_ahead=7 live in the signature.
#   2. The host calls a tool by name, e.g. "get_upcoming_assignments"
#   3. The wrapper forwards to ToolDispatcher.call_payload()
#   4. canvas_core fetches from Canvas and shapes the result
#   5. The wrapper returns json.dumps(result, indent=2) as one text block
#
# ERRORS:
#   The dispatcher raises McpError.  FastMCP reports ToolError messages to
#   the host verbatim, so McpError is re-raised as ToolError with the same
#   message ("Error executing get_grades: Canvas API error: 401 ...").
#
#   Over the wire every tool failure is a tool result with isError=True and
#   the message as text, not a JSON-RPC error code.  That includes unknown
#   tool names, which FastMCP rejects before they reach this file
#   ("Unknown tool: nope").  The dispatcher's METHOD_NOT_FOUND and
#   INVALID_PARAMS codes are only visible when it is called directly.
#
# RUNNING THIS SERVER:
#     a) python main.py
#     b) python -m canvas_tools.mcp_server
#     c) canvas-mcp   (console script installed by pip)
# =============================================================================

import json
import logging
import os
import sys
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from mcp.shared.exceptions import McpError

from canvas_core.assignments import DEFAULT_DAYS_AHEAD
from canvas_tools.registry import TOOL_REGISTRY, ToolDispatcher

# =============================================================================
# Logging Setup
# =============================================================================
# stdout carries the MCP JSON-RPC stream, so every log line goes to stderr.
# =============================================================================
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)

SERVER_NAME = "canvas-server"


def _describe(name: str) -> str:
    return TOOL_REGISTRY[name].description


def create_server(dispatcher: Optional[ToolDispatcher] = None) -> FastMCP:
    """Build the FastMCP server with all six Canvas tools registered.

    Args:
        dispatcher: Dispatcher the tools forward to.  Tests pass one with a
            fake client factory; by default the dispatcher reads settings
            from the environment on each call.
    """
    dispatcher = dispatcher or ToolDispatcher()
    server = FastMCP(SERVER_NAME)

    async def _run(name: str, arguments: dict[str, Any]) -> str:
        # Omitted optional arguments arrive as None; drop them so the
        # handler defaults apply.
        arguments = {k: v for k, v in arguments.items() if v is not None}
        try:
            result = await dispatcher.call_payload(name, arguments)
        except McpError as e:
            raise ToolError(e.error.message) from e
        return json.dumps(result, indent=2)

    # -------------------------------------------------------------------------
    # TOOL 1: get_courses
    # -------------------------------------------------------------------------
    @server.tool(name="get_courses", description=_describe("get_courses"))
    async def get_courses() -> str:
        """Get all enrolled courses.

        Returns JSON: {"courses": [{"id", "name", "code"}]}
        """
        return await _run("get_courses", {})

    # -------------------------------------------------------------------------
    # TOOL 2: get_assignments
    # -------------------------------------------------------------------------
    @server.tool(name="get_assignments", description=_describe("get_assignments"))
    async def get_assignments(
        course_id: Optional[int] = None,
        include_completed: bool = False,
    ) -> str:
        """List assignments for one course, or every active course.

        Args:
            course_id: Course ID.  Omit to list assignments from all courses.
            include_completed: Also return assignments whose due date passed.
        """
        return await _run(
            "get_assignments",
            {"course_id": course_id, "include_completed": include_completed},
        )

    # -------------------------------------------------------------------------
    # TOOL 3: get_upcoming_assignments
    # -------------------------------------------------------------------------
    @server.tool(
        name="get_upcoming_assignments",
        description=_describe("get_upcoming_assignments"),
    )
    async def get_upcoming_assignments(days_ahead: float = DEFAULT_DAYS_AHEAD) -> str:
        """Assignments due in the next ``days_ahead`` days (default 7), soonest first."""
        return await _run("get_upcoming_assignments", {"days_ahead": days_ahead})

    # -------------------------------------------------------------------------
    # TOOL 4: get_grades
    # -------------------------------------------------------------------------
    @server.tool(name="get_grades", description=_describe("get_grades"))
    async def get_grades(course_id: Optional[int] = None) -> str:
        """Current grade and score, per course or with assignment detail for one course."""
        return await _run("get_grades", {"course_id": course_id})

    # -------------------------------------------------------------------------
    # TOOL 5: get_course_progress
    # -------------------------------------------------------------------------
    @server.tool(name="get_course_progress", description=_describe("get_course_progress"))
    async def get_course_progress(course_id: int) -> str:
        """Completed vs pending assignments, completion rate and grade for one course."""
        return await _run("get_course_progress", {"course_id": course_id})

    # -------------------------------------------------------------------------
    # TOOL 6: search_assignments
    # -------------------------------------------------------------------------
    @server.tool(name="search_assignments", description=_describe("search_assignments"))
    async def search_assignments(query: str) -> str:
        """Case-insensitive search over assignment names and course names."""
        return await _run("search_assignments", {"query": query})

    return server


mcp = create_server()


def run() -> None:
    """Serve the tools over stdio until the host disconnects."""
    logging.getLogger(__name__).info(f"{SERVER_NAME} running on stdio")
    mcp.run()


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    run()
