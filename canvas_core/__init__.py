# =============================================================================
# canvas_core/__init__.py
# =============================================================================
# This package contains ALL Canvas-facing logic: settings, the HTTP client,
# data models, and the six query handlers.
#
# LAYERING RULE:
#   Nothing in this package imports FastMCP or the MCP SDK.  Every handler
#   takes a CanvasClient and returns a plain dict, so the whole package can
#   be exercised with an in-memory httpx transport and no network.
# =============================================================================
