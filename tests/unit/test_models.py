from datetime import datetime, timezone

import pytest

from canvas_core.models import Assignment, EnrollmentGrades, parse_timestamp


@pytest.mark.unit
def test_parse_timestamp_handles_trailing_z():
    assert parse_timestamp("2026-10-20T23:59:00Z") == datetime(2026, 10, 20, 23, 59, tzinfo=timezone.utc)


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, ""])
def test_parse_timestamp_empty(value):
    assert parse_timestamp(value) is None


@pytest.mark.unit
def test_assignment_from_api_ignores_unknown_fields():
    a = Assignment.from_api(
        {
            "id": 3,
            "name": "Essay",
            "due_at": None,
            "points_possible": 50,
            "submission_types": ["online_text_entry"],
            "course_id": 9,
            "html_url": "https://canvas.test/courses/9/assignments/3",
            "description": "<p>long html</p>",
            "submission": {"submitted_at": "2026-10-01T00:00:00Z", "score": 45, "grade": "45"},
        },
        course_name="Writing",
    )

    assert a.course_name == "Writing"
    assert a.submission_types == ["online_text_entry"]
    assert a.is_submitted
    assert a.due_datetime is None


@pytest.mark.unit
def test_assignment_with_unsubmitted_submission_is_pending():
    a = Assignment.from_api({"id": 1, "name": "Quiz", "submission": {"submitted_at": None}})

    assert not a.is_submitted


@pytest.mark.unit
def test_enrollment_grades_from_empty_list():
    grades = EnrollmentGrades.from_enrollments([])

    assert grades.current_grade is None
    assert grades.current_score is None
