"""
Enumerations and constants for the Registrar engine.
"""

from enum import Enum, IntEnum


# Minimum average grade for the honor roll
HONOR_ROLL_THRESHOLD = 4.5


class Faculty(Enum):
    """Faculties a student or course belongs to."""
    COMPUTER_SCIENCE = "computer_science"
    ECONOMICS = "economics"
    LAW = "law"
    ENGINEERING = "engineering"


class StudentStatus(Enum):
    """Lifecycle status of a student."""
    ACTIVE = "active"
    ACADEMIC_LEAVE = "academic_leave"
    GRADUATED = "graduated"
    EXPELLED = "expelled"

    @property
    def is_terminal(self) -> bool:
        """No transition is permitted out of a terminal status."""
        return self in (StudentStatus.GRADUATED, StudentStatus.EXPELLED)


class CourseType(Enum):
    """Kinds of courses."""
    MANDATORY = "mandatory"
    OPTIONAL = "optional"
    SPECIAL = "special"


class Semester(Enum):
    """Semesters a course can run in."""
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    FOURTH = "fourth"


class Grade(IntEnum):
    """Grade scale, ordered from best to worst."""
    EXCELLENT = 5
    GOOD = 4
    SATISFACTORY = 3
    UNSATISFACTORY = 2
