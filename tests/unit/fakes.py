"""
An in-memory Canvas instance served through httpx.MockTransport.
"""

import re
from datetime import datetime, timezone

import httpx


NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
TOKEN = "test-token"
BASE_URL = "https://canvas.test"

_COURSE_PATH = re.compile(r"^/api/v1/courses/(\d+)(/assignments|/enrollments)?$")


class FakeCanvas:
    """Minimal Canvas API: courses, assignments, enrollments.

    Every request is recorded in ``requests``.  ``fail`` maps a request path
    to a status code to return instead of data.
    """

    def __init__(self):
        self.courses: list[dict] = []
        self.assignments: dict[int, list[dict]] = {}
        self.enrollments: dict[int, list[dict]] = {}
        self.fail: dict[str, int] = {}
        self.requests: list[httpx.Request] = []

    def add_course(self, course_id, name, code="", assignments=(), grade=None, score=None):
        self.courses.append({
            "id": course_id,
            "name": name,
            "course_code": code,
            "enrollment_term_id": 1,
        })
        self.assignments[course_id] = [dict(a, course_id=course_id) for a in assignments]
        self.enrollments[course_id] = [
            {"type": "StudentEnrollment",
             "grades": {"current_grade": grade, "current_score": score}}
        ]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.fail:
            return httpx.Response(self.fail[path])

        if path == "/api/v1/courses":
            return httpx.Response(200, json=self.courses)

        match = _COURSE_PATH.match(path)
        if not match:
            return httpx.Response(404, json={"errors": [{"message": "not found"}]})

        course_id, sub = int(match.group(1)), match.group(2)
        if sub == "/assignments":
            with_submission = "submission" in request.url.params.get_list("include[]")
            items = self.assignments.get(course_id, [])
            if not with_submission:
                items = [{k: v for k, v in a.items() if k != "submission"} for a in items]
            return httpx.Response(200, json=items)
        if sub == "/enrollments":
            return httpx.Response(200, json=self.enrollments.get(course_id, []))

        for course in self.courses:
            if course["id"] == course_id:
                return httpx.Response(200, json=course)
        return httpx.Response(404, json={"errors": [{"message": "not found"}]})

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


def assignment(assignment_id, name, due_at=None, points=10, submitted_at=None, score=None, grade=None):
    data = {
        "id": assignment_id,
        "name": name,
        "due_at": due_at,
        "points_possible": points,
        "submission_types": ["online_upload"],
        "html_url": f"{BASE_URL}/assignments/{assignment_id}",
        "submission": {"submitted_at": submitted_at, "score": score, "grade": grade},
    }
    return data




def iso(dt: datetime) -> str:
    """Format a datetime the way Canvas does: 2026-10-18T12:00:00Z."""
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
