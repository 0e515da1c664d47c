# =============================================================================
# canvas_core/models.py - Data Models (projections of Canvas responses)
# =============================================================================
#
# Every class here is a read-only view of one Canvas JSON object.  Canvas
# sends far more fields than we need; from_api() keeps only what the tools
# report and ignores the rest.
#
# The transient fields on Assignment (course_name, days_until_due) are
# filled in by the handlers while aggregating across courses.  They are
# attached with dataclasses.replace(), never by mutating an instance.
# =============================================================================

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a Canvas ISO-8601 timestamp ("2026-10-20T23:59:00Z").

    Returns None for missing or empty values.  Canvas always sends UTC with a
    trailing "Z", which datetime.fromisoformat() only accepts on 3.11+.
    """
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


# -----------------------------------------------------------------------------
# Course
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Course:
    """An active course the token's user is enrolled in."""

    id: int
    name: str
    course_code: str = ""
    enrollment_term_id: Optional[int] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Course":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            course_code=data.get("course_code") or "",
            enrollment_term_id=data.get("enrollment_term_id"),
        )


# -----------------------------------------------------------------------------
# Submission - only present when assignments are fetched with
# include[]=submission
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Submission:
    """The current user's submission for one assignment."""

    submitted_at: Optional[str] = None
    score: Optional[float] = None
    grade: Optional[str] = None

    @property
    def is_submitted(self) -> bool:
        return bool(self.submitted_at)

    @classmethod
    def from_api(cls, data: Optional[dict[str, Any]]) -> Optional["Submission"]:
        if not data:
            return None
        return cls(
            submitted_at=data.get("submitted_at"),
            score=data.get("score"),
            grade=data.get("grade"),
        )


# -----------------------------------------------------------------------------
# Assignment
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Assignment:
    """One assignment, optionally tagged with its course name."""

    id: int
    name: str
    due_at: Optional[str] = None                 # ISO timestamp or None (no due date)
    points_possible: Optional[float] = None
    submission_types: list[str] = field(default_factory=list)
    course_id: Optional[int] = None
    html_url: Optional[str] = None
    submission: Optional[Submission] = None

    # --- Transient, set during aggregation ---
    course_name: Optional[str] = None
    days_until_due: Optional[int] = None

    @property
    def due_datetime(self) -> Optional[datetime]:
        return parse_timestamp(self.due_at)

    @property
    def is_submitted(self) -> bool:
        return self.submission is not None and self.submission.is_submitted

    @classmethod
    def from_api(
        cls, data: dict[str, Any], course_name: Optional[str] = None
    ) -> "Assignment":
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            due_at=data.get("due_at"),
            points_possible=data.get("points_possible"),
            submission_types=list(data.get("submission_types") or []),
            course_id=data.get("course_id"),
            html_url=data.get("html_url"),
            submission=Submission.from_api(data.get("submission")),
            course_name=course_name,
        )


# -----------------------------------------------------------------------------
# Grades
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class EnrollmentGrades:
    """Current letter grade and score from the user's own enrollment."""

    current_grade: Optional[str] = None
    current_score: Optional[float] = None

    @classmethod
    def from_enrollments(cls, enrollments: list[dict[str, Any]]) -> "EnrollmentGrades":
        """Read grades from the first enrollment; empty list -> all None."""
        if not enrollments:
            return cls()
        grades = enrollments[0].get("grades") or {}
        return cls(
            current_grade=grades.get("current_grade"),
            current_score=grades.get("current_score"),
        )


@dataclass(frozen=True)
class AssignmentGrade:
    """Score and grade for one assignment."""

    name: str
    score: Optional[float]
    grade: Optional[str]
    points_possible: Optional[float]

    @classmethod
    def from_assignment(cls, assignment: Assignment) -> "AssignmentGrade":
        submission = assignment.submission or Submission()
        return cls(
            name=assignment.name,
            score=submission.score,
            grade=submission.grade,
            points_possible=assignment.points_possible,
        )


@dataclass(frozen=True)
class CourseGrade:
    """Grade summary for one course.

    ``course_name`` is only known when the summary comes from the active
    course list; ``assignments`` only when a single course was requested.
    """

    course_id: int
    current_grade: Optional[str] = None
    current_score: Optional[float] = None
    course_name: Optional[str] = None
    assignments: Optional[list[AssignmentGrade]] = None


# -----------------------------------------------------------------------------
# Course progress
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ProgressCounts:
    total_assignments: int
    completed_assignments: int
    pending_assignments: int
    completion_rate: int                         # whole percent, 0-100


@dataclass(frozen=True)
class PendingAssignment:
    name: str
    due_date: Optional[str]
    points_possible: Optional[float]


@dataclass(frozen=True)
class CourseProgress:
    """Everything get_course_progress reports for one course."""

    course_name: str
    course_code: str
    grades: EnrollmentGrades
    progress: ProgressCounts
    pending: list[PendingAssignment] = field(default_factory=list)
