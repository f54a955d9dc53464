"""
Core module containing the entity model, enumerations and exceptions.
"""

from .entities import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Student",
    "Course",
    "GradeRecord",

    # Enums
    "Faculty",
    "StudentStatus",
    "CourseType",
    "Semester",
    "Grade",
    "HONOR_ROLL_THRESHOLD",

    # Exceptions
    "RegistrarException",
    "ValidationError",
    "ResourceNotFoundError",
    "CourseNotFoundError",
    "StudentNotFoundError",
    "DuplicateEntityError",
    "RegistrationError",
    "CourseFullError",
    "FacultyMismatchError",
    "AlreadyRegisteredError",
    "RegistrantNotFoundError",
    "NotRegisteredError",
    "TerminalStatusError",
]
