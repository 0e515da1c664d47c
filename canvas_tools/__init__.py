# =============================================================================
# canvas_tools/__init__.py
# =============================================================================
# The MCP layer: translates tool calls from the host into canvas_core calls.
#
#   registry.py    tool names, schemas, dispatch and error mapping
#   mcp_server.py  FastMCP server wiring and stdio entry point
#
# Tools here hold no Canvas logic.  They validate arguments, call one
# canvas_core handler, and serialize the dict it returns.
# =============================================================================
