# =============================================================================
# canvas_core/settings.py - Process configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the Canvas connection settings from the environment.  main.py
#   calls load_dotenv() first, so values in a local .env file are picked up
#   the same way as exported variables.
#
# VARIABLES:
#   CANVAS_ACCESS_TOKEN  (required)  Personal access token from
#                                    Account -> Settings -> Approved Integrations
#   CANVAS_BASE_URL      (optional)  Your Canvas instance, no /api suffix
#   CANVAS_TIMEOUT       (optional)  Per-request timeout in seconds
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from canvas_core.errors import CanvasConfigError

DEFAULT_BASE_URL = "https://bruinlearn.ucla.edu"  # change this to your Canvas instance
DEFAULT_TIMEOUT = 30.0
API_VERSION = "v1"


@dataclass(frozen=True)
class CanvasSettings:
    """Connection settings for one Canvas instance."""

    access_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def api_root(self) -> str:
        """Root every endpoint path is appended to, e.g. https://x/api/v1."""
        return f"{self.base_url.rstrip('/')}/api/{API_VERSION}"

    def require_token(self) -> None:
        """Raise CanvasConfigError if no access token is configured."""
        if not self.access_token or not self.access_token.strip():
            raise CanvasConfigError(
                "CANVAS_ACCESS_TOKEN environment variable is required"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CanvasSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from.  Defaults to os.environ.

        Returns:
            A validated CanvasSettings.

        Raises:
            CanvasConfigError: If the token is missing or the timeout is not
                a positive number.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("CANVAS_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise CanvasConfigError(
                    f"CANVAS_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                )
            if timeout <= 0:
                raise CanvasConfigError("CANVAS_TIMEOUT must be greater than zero")
        else:
            timeout = DEFAULT_TIMEOUT

        settings = cls(
            access_token=env.get("CANVAS_ACCESS_TOKEN", "").strip(),
            base_url=(env.get("CANVAS_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout,
        )
        settings.require_token()
        return settings
