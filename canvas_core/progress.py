# =============================================================================
# canvas_core/progress.py - Per-course completion progress
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Combines three independent Canvas reads for one course:
#     - the course itself          (name, code)
#     - the user's own enrollment  (current grade and score)
#     - assignments + submissions  (what is done, what is still open)
#
#   The three requests are issued together with asyncio.gather.  If any one
#   fails, the whole call fails with that error.
#
# COMPLETED vs PENDING:
#   An assignment is completed when its submission has a submitted_at
#   timestamp.  Everything else, including assignments with no submission
#   object at all, is pending.
# =============================================================================

import asyncio
import math

from canvas_core.canvas_client import CanvasClient
from canvas_core.models import (
    Assignment,
    Course,
    CourseProgress,
    EnrollmentGrades,
    PendingAssignment,
    ProgressCounts,
)


def completion_rate(completed: int, total: int) -> int:
    """Percent of assignments completed, rounded half up.

    A course with no assignments has a completion rate of 0.
    """
    if total <= 0:
        return 0
    return math.floor(completed / total * 100 + 0.5)


def partition_by_submission(
    assignments: list[Assignment],
) -> tuple[list[Assignment], list[Assignment]]:
    """Split assignments into (completed, pending), preserving order."""
    completed, pending = [], []
    for assignment in assignments:
        (completed if assignment.is_submitted else pending).append(assignment)
    return completed, pending


def build_progress(
    course: Course,
    grades: EnrollmentGrades,
    assignments: list[Assignment],
) -> CourseProgress:
    completed, pending = partition_by_submission(assignments)
    return CourseProgress(
        course_name=course.name,
        course_code=course.course_code,
        grades=grades,
        progress=ProgressCounts(
            total_assignments=len(assignments),
            completed_assignments=len(completed),
            pending_assignments=len(pending),
            completion_rate=completion_rate(len(completed), len(assignments)),
        ),
        pending=[
            PendingAssignment(
                name=a.name, due_date=a.due_at, points_possible=a.points_possible
            )
            for a in pending
        ],
    )


async def get_course_progress(client: CanvasClient, course_id: int) -> dict:
    """Grade and completion breakdown for one course."""
    raw_course, enrollments, raw_assignments = await asyncio.gather(
        client.get_course(course_id),
        client.get_own_enrollments(course_id),
        client.list_assignments(course_id, include_submission=True),
    )

    progress = build_progress(
        Course.from_api(raw_course),
        EnrollmentGrades.from_enrollments(enrollments),
        [Assignment.from_api(a) for a in raw_assignments],
    )

    return {
        "course": {
            "name": progress.course_name,
            "code": progress.course_code,
        },
        "grade_info": {
            "current_grade": progress.grades.current_grade,
            "current_score": progress.grades.current_score,
        },
        "progress": {
            "total_assignments": progress.progress.total_assignments,
            "completed_assignments": progress.progress.completed_assignments,
            "pending_assignments": progress.progress.pending_assignments,
            "completion_rate": progress.progress.completion_rate,
        },
        "pending_assignments": [
            {
                "name": p.name,
                "due_date": p.due_date,
                "points_possible": p.points_possible,
            }
            for p in progress.pending
        ],
    }
