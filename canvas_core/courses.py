# =============================================================================
# canvas_core/courses.py - Active course listing
# =============================================================================

from canvas_core.canvas_client import CanvasClient
from canvas_core.models import Course


async def fetch_active_courses(client: CanvasClient) -> list[Course]:
    """Fetch the user's active courses as Course objects."""
    return [Course.from_api(c) for c in await client.list_active_courses()]


async def get_courses(client: CanvasClient) -> dict:
    """List all active courses.

    Returns:
        {"courses": [{"id", "name", "code"}, ...]}
    """
    courses = await fetch_active_courses(client)
    return {
        "courses": [
            {"id": course.id, "name": course.name, "code": course.course_code}
            for course in courses
        ],
    }
