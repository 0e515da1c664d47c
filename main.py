# =============================================================================
# main.py - Entry Point for the Canvas MCP server
# =============================================================================
#
# HOW TO RUN:
#   CANVAS_ACCESS_TOKEN=... python main.py
#
# Register it with an MCP host (e.g. a desktop assistant's config) as a
# stdio server:
#
#   {"command": "python", "args": ["/path/to/main.py"],
#    "env": {"CANVAS_ACCESS_TOKEN": "..."}}
#
# WHAT HAPPENS:
#   1. .env is loaded so CANVAS_* variables can live in a local file
#   2. Settings are validated; a missing token exits with status 1 before
#      the server starts reading stdin
#   3. The FastMCP server serves the six Canvas tools on stdio
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Must run before canvas_core reads the environment.
load_dotenv()

from canvas_core.errors import CanvasConfigError
from canvas_core.settings import CanvasSettings
from canvas_tools.mcp_server import run

logger = logging.getLogger("canvas")


def main() -> None:
    try:
        settings = CanvasSettings.from_env()
    except CanvasConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info(f"Using Canvas instance {settings.base_url}")
    run()


if __name__ == "__main__":
    main()
