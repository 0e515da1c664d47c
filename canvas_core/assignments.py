# =============================================================================
# canvas_core/assignments.py - Assignment listing, upcoming window, search
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Backs three tools: get_assignments, get_upcoming_assignments and
#   search_assignments.  Each one follows the same two steps:
#
#     1. FETCH   - pull assignments for one course, or for every active
#                  course one request at a time, tagging each with its
#                  course name.
#     2. SHAPE   - a pure function filters/sorts the list.  These take
#                  "now" as an argument, so they are tested without a
#                  client or a patched clock.
#
# DUE DATES:
#   Canvas sends due_at as a UTC timestamp or null.  Assignments without a
#   due date are never "past" and never "upcoming".
# =============================================================================

import logging
import math
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from canvas_core import clock
from canvas_core.canvas_client import CanvasClient
from canvas_core.courses import fetch_active_courses
from canvas_core.models import Assignment

logger = logging.getLogger(__name__)

DEFAULT_DAYS_AHEAD = 7
_SECONDS_PER_DAY = 24 * 60 * 60
_LATEST = datetime.max.replace(tzinfo=timezone.utc)


# =============================================================================
# FETCH
# =============================================================================
async def fetch_course_assignments(
    client: CanvasClient,
    course_id: int,
    course_name: Optional[str] = None,
    include_submission: bool = False,
) -> list[Assignment]:
    raw = await client.list_assignments(course_id, include_submission=include_submission)
    return [Assignment.from_api(a, course_name=course_name) for a in raw]


async def fetch_all_assignments(client: CanvasClient) -> list[Assignment]:
    """Fetch assignments for every active course, one course at a time.

    Each assignment is tagged with the name of the course it came from.
    """
    assignments: list[Assignment] = []
    for course in await fetch_active_courses(client):
        course_assignments = await fetch_course_assignments(
            client, course.id, course_name=course.name
        )
        logger.debug("%s: %d assignments", course.name, len(course_assignments))
        assignments.extend(course_assignments)
    return assignments


# =============================================================================
# SHAPE (pure)
# =============================================================================
def drop_past_due(assignments: list[Assignment], now: datetime) -> list[Assignment]:
    """Keep assignments that are due now or later, or have no due date."""
    kept = []
    for assignment in assignments:
        due = assignment.due_datetime
        if due is None or due >= now:
            kept.append(assignment)
    return kept


def days_until(due: datetime, now: datetime) -> int:
    """Whole days until ``due``, rounded up (due in 1 hour -> 1)."""
    return math.ceil((due - now).total_seconds() / _SECONDS_PER_DAY)


def select_upcoming(
    assignments: list[Assignment], now: datetime, days_ahead: float
) -> list[Assignment]:
    """Assignments due within [now, now + days_ahead], soonest first.

    Each returned assignment carries days_until_due.  Both window ends are
    inclusive.
    """
    try:
        cutoff = now + timedelta(days=days_ahead)
    except OverflowError:
        # past the calendar's end: every dated assignment from now on fits
        cutoff = _LATEST if days_ahead > 0 else now
    upcoming = []
    for assignment in assignments:
        due = assignment.due_datetime
        if due is None or not (now <= due <= cutoff):
            continue
        upcoming.append(replace(assignment, days_until_due=days_until(due, now)))

    upcoming.sort(key=lambda a: a.due_datetime)
    return upcoming


def match_query(assignments: list[Assignment], query: str) -> list[Assignment]:
    """Case-insensitive substring match on assignment name or course name."""
    needle = query.lower()
    return [
        a for a in assignments
        if needle in a.name.lower() or needle in (a.course_name or "").lower()
    ]


# =============================================================================
# HANDLERS
# =============================================================================
def _listing_entry(a: Assignment) -> dict:
    entry = {
        "id": a.id,
        "name": a.name,
        "due_date": a.due_at,
        "points": a.points_possible,
        "course_id": a.course_id,
        "course_name": a.course_name,
        "url": a.html_url,
    }
    # single-course listings carry no course name
    if entry["course_name"] is None:
        del entry["course_name"]
    return entry


async def get_assignments(
    client: CanvasClient,
    course_id: Optional[int] = None,
    include_completed: bool = False,
) -> dict:
    """List assignments for one course, or for all active courses.

    Args:
        course_id: Course to list.  None or 0 means every active course.
        include_completed: When False, assignments whose due date has
            already passed are dropped.  Undated assignments are kept.
    """
    if course_id:
        assignments = await fetch_course_assignments(client, course_id)
    else:
        assignments = await fetch_all_assignments(client)

    if not include_completed:
        assignments = drop_past_due(assignments, clock.utcnow())

    return {"assignments": [_listing_entry(a) for a in assignments]}


async def get_upcoming_assignments(
    client: CanvasClient, days_ahead: Optional[float] = None
) -> dict:
    """Assignments across all active courses due in the next ``days_ahead`` days.

    A missing or zero days_ahead means the default one-week window.
    """
    if not days_ahead:
        days_ahead = DEFAULT_DAYS_AHEAD

    now = clock.utcnow()
    upcoming = select_upcoming(await fetch_all_assignments(client), now, days_ahead)

    return {
        "upcoming_assignments": [
            {
                "name": a.name,
                "course": a.course_name,
                "due_date": a.due_at,
                "days_until_due": a.days_until_due,
                "points": a.points_possible,
                "url": a.html_url,
            }
            for a in upcoming
        ],
    }


async def search_assignments(client: CanvasClient, query: str) -> dict:
    """Search every active course's assignments by assignment or course name."""
    results = match_query(await fetch_all_assignments(client), query)
    return {
        "query": query,
        "results": [
            {
                "name": a.name,
                "course": a.course_name,
                "due_date": a.due_at,
                "points": a.points_possible,
                "url": a.html_url,
            }
            for a in results
        ],
    }
