"""
Core entities for the Registrar engine.
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Type

from .enums import Faculty, StudentStatus, CourseType, Semester, Grade
from .exceptions import ValidationError, TerminalStatusError


def _require_enum(value: Any, enum_cls: Type[Enum], field_name: str) -> Any:
    if not isinstance(value, enum_cls):
        raise ValidationError(
            f"{field_name} must be a {enum_cls.__name__}, got {value!r}",
            details={'field': field_name}
        )
    return value


def _require_int(value: Any, field_name: str, minimum: Optional[int] = None) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{field_name} must be an integer, got {value!r}",
            details={'field': field_name}
        )
    if minimum is not None and value < minimum:
        raise ValidationError(
            f"{field_name} must be >= {minimum}, got {value}",
            details={'field': field_name}
        )
    return value


def _require_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(
            f"{field_name} must be a string, got {value!r}",
            details={'field': field_name}
        )
    return value


class AbstractEntity(ABC):
    """Base entity with an integer identity, timestamps and versioning."""

    def __init__(self, entity_id: int):
        self._id = _require_int(entity_id, "id")
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> int:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record an in-place mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"


class Student(AbstractEntity):
    """Student entity. Status is the only field that changes after creation.

    Fields are checked for type only; names and group labels may be any string.
    """

    def __init__(self, student_id: int, full_name: str, faculty: Faculty, year: int,
                 status: StudentStatus, group_number: str,
                 enrollment_date: Optional[date] = None):
        super().__init__(student_id)
        self._full_name = _require_str(full_name, "full_name")
        self._faculty = _require_enum(faculty, Faculty, "faculty")
        self._year = _require_int(year, "year")
        self._status = _require_enum(status, StudentStatus, "status")
        self._group_number = _require_str(group_number, "group_number")
        if enrollment_date is None:
            enrollment_date = date.today()
        elif not isinstance(enrollment_date, date):
            raise ValidationError(
                f"enrollment_date must be a date, got {enrollment_date!r}",
                details={'field': 'enrollment_date'}
            )
        self._enrollment_date = enrollment_date

    @property
    def full_name(self) -> str:
        return self._full_name

    @property
    def faculty(self) -> Faculty:
        return self._faculty

    @property
    def year(self) -> int:
        return self._year

    @property
    def status(self) -> StudentStatus:
        return self._status

    @property
    def group_number(self) -> str:
        return self._group_number

    @property
    def enrollment_date(self) -> date:
        return self._enrollment_date

    def _change_status(self, new_status: StudentStatus) -> StudentStatus:
        """Move to a new status and return the previous one.

        Called by the records engine only, under its lock.

        Graduated and expelled students are frozen, even against re-setting
        the same status. Any other transition is allowed.
        """
        _require_enum(new_status, StudentStatus, "status")
        if self._status.is_terminal:
            raise TerminalStatusError(
                f"Cannot change status of student {self._id}: "
                f"status {self._status.value} is terminal",
                details={'student_id': self._id, 'status': self._status.value,
                         'requested': new_status.value}
            )
        previous = self._status
        self._status = new_status
        self.touch()
        return previous

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'full_name': self._full_name,
            'faculty': self._faculty.value,
            'year': self._year,
            'status': self._status.value,
            'enrollment_date': self._enrollment_date.isoformat(),
            'group_number': self._group_number,
        })
        return base_dict

    def __repr__(self) -> str:
        return (f"Student(id={self._id}, full_name={self._full_name!r}, "
                f"faculty={self._faculty.value}, status={self._status.value})")


class Course(AbstractEntity):
    """Course entity with an externally assigned id and a roster capacity."""

    def __init__(self, course_id: int, name: str, course_type: CourseType, credits: int,
                 semester: Semester, faculty: Faculty, max_students: int):
        super().__init__(course_id)
        self._name = _require_str(name, "name")
        self._course_type = _require_enum(course_type, CourseType, "course_type")
        self._credits = _require_int(credits, "credits", minimum=0)
        self._semester = _require_enum(semester, Semester, "semester")
        self._faculty = _require_enum(faculty, Faculty, "faculty")
        self._max_students = _require_int(max_students, "max_students", minimum=0)

    @property
    def name(self) -> str:
        return self._name

    @property
    def course_type(self) -> CourseType:
        return self._course_type

    @property
    def credits(self) -> int:
        return self._credits

    @property
    def semester(self) -> Semester:
        return self._semester

    @property
    def faculty(self) -> Faculty:
        return self._faculty

    @property
    def max_students(self) -> int:
        return self._max_students

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'name': self._name,
            'course_type': self._course_type.value,
            'credits': self._credits,
            'semester': self._semester.value,
            'faculty': self._faculty.value,
            'max_students': self._max_students,
        })
        return base_dict

    def __repr__(self) -> str:
        return (f"Course(id={self._id}, name={self._name!r}, "
                f"faculty={self._faculty.value}, max_students={self._max_students})")


@dataclass(frozen=True)
class GradeRecord:
    """Immutable record of one grade given to a student for a course."""
    student_id: int
    course_id: int
    grade: Grade
    semester: Semester
    recorded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        _require_int(self.student_id, "student_id")
        _require_int(self.course_id, "course_id")
        _require_enum(self.grade, Grade, "grade")
        _require_enum(self.semester, Semester, "semester")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'student_id': self.student_id,
            'course_id': self.course_id,
            'grade': int(self.grade),
            'semester': self.semester.value,
            'recorded_at': self.recorded_at.isoformat(),
        }
