import asyncio

import pytest

from canvas_core.errors import CanvasAPIError
from canvas_core.progress import completion_rate, get_course_progress
from tests.unit.fakes import assignment


@pytest.mark.unit
@pytest.mark.parametrize("completed, total, expected", [
    (0, 4, 0),
    (1, 3, 33),
    (2, 3, 67),
    (1, 8, 13),     # 12.5 rounds half up
    (4, 4, 100),
])
def test_completion_rate_rounds(completed, total, expected):
    assert completion_rate(completed, total) == expected


@pytest.mark.unit
def test_completion_rate_with_no_assignments_is_zero():
    assert completion_rate(0, 0) == 0


@pytest.mark.unit
def test_course_progress_partitions_by_submission(call_handler, fake_canvas):
    fake_canvas.add_course(5, "Chemistry", "CHEM 14A", grade="B+", score=88.0, assignments=[
        assignment(1, "Lab 1", due_at="2026-10-01T23:59:00Z", points=20,
                   submitted_at="2026-10-01T20:00:00Z", score=19),
        assignment(2, "Lab 2", due_at="2026-10-25T23:59:00Z", points=20),
        assignment(3, "Reading", due_at=None, points=0),
    ])
    # Canvas omits the submission object entirely for some assignment types.
    del fake_canvas.assignments[5][2]["submission"]

    result = call_handler(get_course_progress, course_id=5)

    assert result == {
        "course": {"name": "Chemistry", "code": "CHEM 14A"},
        "grade_info": {"current_grade": "B+", "current_score": 88.0},
        "progress": {
            "total_assignments": 3,
            "completed_assignments": 1,
            "pending_assignments": 2,
            "completion_rate": 33,
        },
        "pending_assignments": [
            {"name": "Lab 2", "due_date": "2026-10-25T23:59:00Z", "points_possible": 20},
            {"name": "Reading", "due_date": None, "points_possible": 0},
        ],
    }
    assert sorted(fake_canvas.paths()) == [
        "/api/v1/courses/5",
        "/api/v1/courses/5/assignments",
        "/api/v1/courses/5/enrollments",
    ]


@pytest.mark.unit
def test_course_progress_with_no_assignments(call_handler, fake_canvas):
    fake_canvas.add_course(6, "Empty Seminar", "SEM 1")

    result = call_handler(get_course_progress, course_id=6)

    assert result["progress"] == {
        "total_assignments": 0,
        "completed_assignments": 0,
        "pending_assignments": 0,
        "completion_rate": 0,
    }
    assert result["pending_assignments"] == []


@pytest.mark.unit
def test_course_progress_fails_if_any_request_fails(make_client, fake_canvas):
    fake_canvas.add_course(7, "Physics")
    fake_canvas.fail["/api/v1/courses/7/enrollments"] = 403

    async def go():
        async with make_client() as client:
            await get_course_progress(client, 7)

    with pytest.raises(CanvasAPIError, match="403"):
        asyncio.run(go())
