# =============================================================================
# canvas_core/canvas_client.py - Async HTTP client for the Canvas REST API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues authenticated GET requests against {base}/api/v1 and decodes the
#   JSON body.  Every handler goes through CanvasClient.get(), so there is
#   exactly one place where the bearer token is attached and where HTTP and
#   transport failures are turned into CanvasAPIError.
#
# TRANSPORT INJECTION:
#   CanvasClient accepts any httpx transport.  Production uses the default
#   network transport; tests pass httpx.MockTransport with a handler that
#   routes on request.url.path.
#
# PAGE SIZE:
#   Every list endpoint is requested with per_page=100 and only the first
#   page is read.
# =============================================================================

import logging
from typing import Any, Iterable, Optional

import httpx

from canvas_core.errors import CanvasAPIError
from canvas_core.settings import CanvasSettings

logger = logging.getLogger(__name__)

PER_PAGE = 100


class CanvasClient:
    """Thin async wrapper around httpx.AsyncClient for one Canvas instance.

    Use as an async context manager so the connection pool is closed:

        async with CanvasClient(settings) as client:
            courses = await client.list_active_courses()
    """

    def __init__(
        self,
        settings: CanvasSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        # Fails before any socket is opened.
        settings.require_token()
        self.settings = settings
        self._http = httpx.AsyncClient(
            base_url=settings.api_root,
            headers={
                "Authorization": f"Bearer {settings.access_token}",
                "Content-Type": "application/json",
            },
            timeout=settings.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "CanvasClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -------------------------------------------------------------------------
    # Core request
    # -------------------------------------------------------------------------
    async def get(self, endpoint: str, params: Optional[Any] = None) -> Any:
        """GET a Canvas endpoint and return the decoded JSON body.

        Args:
            endpoint: Path relative to /api/v1, e.g. "/courses/42/assignments".
            params: Query parameters.  A list of (key, value) tuples is
                accepted so repeated keys like include[] survive.

        Raises:
            CanvasAPIError: On a non-2xx status or any transport failure.
        """
        path = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        logger.debug("GET %s params=%s", path, params)

        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as e:
            raise CanvasAPIError(f"Failed to fetch from Canvas: {e}") from e

        if not response.is_success:
            raise CanvasAPIError(
                f"Canvas API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise CanvasAPIError(
                f"Failed to fetch from Canvas: invalid JSON from {path}"
            ) from e

    # -------------------------------------------------------------------------
    # Named endpoints used by the handlers
    # -------------------------------------------------------------------------
    async def list_active_courses(self, include: Iterable[str] = ()) -> list[dict]:
        params = [("enrollment_state", "active")]
        params += [("include[]", item) for item in include]
        params.append(("per_page", PER_PAGE))
        return await self.get("/courses", params=params)

    async def get_course(self, course_id: int) -> dict:
        return await self.get(f"/courses/{course_id}")

    async def list_assignments(
        self, course_id: int, include_submission: bool = False
    ) -> list[dict]:
        params = []
        if include_submission:
            params.append(("include[]", "submission"))
        params.append(("per_page", PER_PAGE))
        return await self.get(f"/courses/{course_id}/assignments", params=params)

    async def get_own_enrollments(self, course_id: int) -> list[dict]:
        params = [("user_id", "self"), ("include[]", "grades")]
        return await self.get(f"/courses/{course_id}/enrollments", params=params)
