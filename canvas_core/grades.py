# =============================================================================
# canvas_core/grades.py - Grade summaries
# =============================================================================
#
# Two shapes, depending on whether a course was named:
#
#   course_id given     -> one entry with the enrollment grade AND a per-
#                          assignment score list (assignments are fetched with
#                          include[]=submission)
#   course_id absent/0  -> one entry per active course with just the
#                          enrollment grade; courses are walked sequentially
# =============================================================================

import logging
from dataclasses import asdict
from typing import Optional

from canvas_core.assignments import fetch_course_assignments
from canvas_core.canvas_client import CanvasClient
from canvas_core.models import (
    Assignment,
    AssignmentGrade,
    Course,
    CourseGrade,
    EnrollmentGrades,
)

logger = logging.getLogger(__name__)


async def fetch_enrollment_grades(client: CanvasClient, course_id: int) -> EnrollmentGrades:
    return EnrollmentGrades.from_enrollments(await client.get_own_enrollments(course_id))


def summarize_course(
    course_id: int,
    grades: EnrollmentGrades,
    assignments: list[Assignment],
) -> CourseGrade:
    """Grade summary for a single course, including each assignment's score."""
    return CourseGrade(
        course_id=course_id,
        current_grade=grades.current_grade,
        current_score=grades.current_score,
        assignments=[AssignmentGrade.from_assignment(a) for a in assignments],
    )


def _course_grade_dict(grade: CourseGrade) -> dict:
    if grade.assignments is not None:
        return {
            "course_id": grade.course_id,
            "current_grade": grade.current_grade,
            "current_score": grade.current_score,
            "assignments": [asdict(a) for a in grade.assignments],
        }
    return {
        "course_name": grade.course_name,
        "course_id": grade.course_id,
        "current_grade": grade.current_grade,
        "current_score": grade.current_score,
    }


async def get_grades(client: CanvasClient, course_id: Optional[int] = None) -> dict:
    """Current grades for one course (with assignment detail) or all courses."""
    grades: list[CourseGrade] = []

    if course_id:
        enrollment = await fetch_enrollment_grades(client, course_id)
        assignments = await fetch_course_assignments(
            client, course_id, include_submission=True
        )
        grades.append(summarize_course(course_id, enrollment, assignments))
    else:
        raw_courses = await client.list_active_courses(include=["total_scores"])
        for course in (Course.from_api(c) for c in raw_courses):
            enrollment = await fetch_enrollment_grades(client, course.id)
            logger.debug("%s: grade=%s", course.name, enrollment.current_grade)
            grades.append(CourseGrade(
                course_id=course.id,
                course_name=course.name,
                current_grade=enrollment.current_grade,
                current_score=enrollment.current_score,
            ))

    return {"grades": [_course_grade_dict(g) for g in grades]}
