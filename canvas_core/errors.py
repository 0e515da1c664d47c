# =============================================================================
# canvas_core/errors.py - Exception hierarchy for the Canvas layer
# =============================================================================
#
#   CanvasError
#     ├── CanvasConfigError   missing/invalid settings (fatal at startup)
#     └── CanvasAPIError      non-2xx response or transport failure
#
# The tool layer converts any of these into an MCP internal error that
# carries the original message.
# =============================================================================

from typing import Optional


class CanvasError(Exception):
    """Base class for every error raised by canvas_core."""


class CanvasConfigError(CanvasError):
    """Raised when the server is started without usable settings."""


class CanvasAPIError(CanvasError):
    """Raised when a Canvas request fails.

    ``status_code`` is set for HTTP errors and ``None`` for transport
    failures (DNS, refused connection, timeout).
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
