# =============================================================================
# canvas_tools/registry.py - Tool registry and dispatcher
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Declares the six Canvas tools (name, description, required arguments,
#   handler) and routes a call by name to its handler.  The argument
#   schemas a host sees come from the typed tool functions in
#   canvas_tools/mcp_server.py; this file owns the names, descriptions and
#   which arguments must be present.
#
# DISPATCH CONTRACT:
#   - Unknown tool name           -> McpError(METHOD_NOT_FOUND)
#   - Missing required argument   -> McpError(INVALID_PARAMS)
#   - Any handler failure         -> McpError(INTERNAL_ERROR) whose message
#                                    carries the original error text
#   - McpError from a handler     -> re-raised unchanged
#   - Success                     -> the handler's result dict
#
# CLIENT LIFETIME:
#   Each call opens its own CanvasClient and closes it when the call ends.
#   Nothing is shared between calls.
# =============================================================================

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData

from canvas_core import assignments, courses, grades, progress
from canvas_core.canvas_client import CanvasClient
from canvas_core.settings import CanvasSettings

logger = logging.getLogger(__name__)

Handler = Callable[[CanvasClient, dict[str, Any]], Awaitable[dict]]

# ANSI color codes for terminal output
_CYAN = "\033[36m"     # Requests (tool calls with arguments)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"


def _log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    arg_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logger.info(f"{_CYAN}{tool_name} called with: {arg_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(result, separators=(',', ':'))}{_RESET}")
    return result


def _log_counts(result: dict) -> None:
    for key, value in result.items():
        if isinstance(value, list):
            _log_status(f"{len(value)} {key} fetched")


def _mcp_error(code: int, message: str) -> McpError:
    return McpError(ErrorData(code=code, message=message))


def _optional_int(arguments: dict[str, Any], key: str) -> Optional[int]:
    value = arguments.get(key)
    return None if value is None else int(value)


# =============================================================================
# Handler adapters: argument dict -> canvas_core call
# =============================================================================
async def _get_courses(client: CanvasClient, arguments: dict[str, Any]) -> dict:
    return await courses.get_courses(client)


async def _get_assignments(client: CanvasClient, arguments: dict[str, Any]) -> dict:
    return await assignments.get_assignments(
        client,
        course_id=_optional_int(arguments, "course_id"),
        include_completed=bool(arguments.get("include_completed", False)),
    )


async def _get_upcoming_assignments(client: CanvasClient, arguments: dict[str, Any]) -> dict:
    return await assignments.get_upcoming_assignments(
        client, days_ahead=arguments.get("days_ahead")
    )


async def _get_grades(client: CanvasClient, arguments: dict[str, Any]) -> dict:
    return await grades.get_grades(client, course_id=_optional_int(arguments, "course_id"))


async def _get_course_progress(client: CanvasClient, arguments: dict[str, Any]) -> dict:
    return await progress.get_course_progress(client, int(arguments["course_id"]))


async def _search_assignments(client: CanvasClient, arguments: dict[str, Any]) -> dict:
    return await assignments.search_assignments(client, str(arguments["query"]))


# =============================================================================
# Registry
# =============================================================================
@dataclass(frozen=True)
class ToolSpec:
    """One tool: its advertised name and description, and how to run it."""

    name: str
    description: str
    handler: Handler
    required: tuple[str, ...] = ()


_TOOL_SPECS = [
    ToolSpec(
        name="get_courses",
        description="Get all enrolled courses",
        handler=_get_courses,
    ),
    ToolSpec(
        name="get_assignments",
        description="Get assignments for a specific course or all courses",
        handler=_get_assignments,
    ),
    ToolSpec(
        name="get_upcoming_assignments",
        description="Get upcoming assignments with deadlines",
        handler=_get_upcoming_assignments,
    ),
    ToolSpec(
        name="get_grades",
        description="Get grades for a specific course or all courses",
        handler=_get_grades,
    ),
    ToolSpec(
        name="get_course_progress",
        description="Get detailed progress information for a course",
        handler=_get_course_progress,
        required=("course_id",),
    ),
    ToolSpec(
        name="search_assignments",
        description="Search for assignments by name or keyword",
        handler=_search_assignments,
        required=("query",),
    ),
]

TOOL_REGISTRY: dict[str, ToolSpec] = {spec.name: spec for spec in _TOOL_SPECS}


def _default_client_factory() -> CanvasClient:
    return CanvasClient(CanvasSettings.from_env())


# =============================================================================
# Dispatcher
# =============================================================================
class ToolDispatcher:
    """Routes tool calls to canvas_core handlers.

    Args:
        client_factory: Zero-argument callable returning a fresh CanvasClient.
            Defaults to one built from environment settings.
    """

    def __init__(self, client_factory: Optional[Callable[[], CanvasClient]] = None):
        self.client_factory = client_factory or _default_client_factory

    async def call_payload(self, name: str, arguments: Optional[dict[str, Any]] = None) -> dict:
        """Run a tool and return its raw result dict."""
        arguments = dict(arguments or {})
        spec = TOOL_REGISTRY.get(name)
        if spec is None:
            raise _mcp_error(METHOD_NOT_FOUND, f"Unknown tool: {name}")

        _log_request(name, arguments)

        missing = [key for key in spec.required if arguments.get(key) is None]
        if missing:
            raise _mcp_error(
                INVALID_PARAMS,
                f"Missing required argument(s) for {name}: {', '.join(missing)}",
            )

        _log_status("Querying Canvas...")
        try:
            async with self.client_factory() as client:
                result = await spec.handler(client, arguments)
        except McpError:
            raise
        except Exception as e:
            _log_status(f"{name} failed: {e}")
            raise _mcp_error(INTERNAL_ERROR, f"Error executing {name}: {e}") from e

        _log_counts(result)
        return _log_response(name, result)
