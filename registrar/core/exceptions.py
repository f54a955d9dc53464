"""
Custom exceptions for the Registrar engine.
"""

from typing import Optional, Any, Dict


class RegistrarException(Exception):
    """Base exception for all Registrar errors."""

    default_code: str = "REGISTRAR_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}


class ValidationError(RegistrarException):
    """Raised when entity data validation fails."""
    default_code = "VALIDATION_ERROR"


class ResourceNotFoundError(RegistrarException):
    """Raised when a requested resource is not found."""
    default_code = "NOT_FOUND"


class CourseNotFoundError(ResourceNotFoundError):
    """Raised when no course exists with the given id."""
    default_code = "COURSE_NOT_FOUND"


class StudentNotFoundError(ResourceNotFoundError):
    """Raised when no student exists with the given id."""
    default_code = "STUDENT_NOT_FOUND"


class DuplicateEntityError(RegistrarException):
    """Raised when attempting to create a duplicate entity."""
    default_code = "DUPLICATE_ENTITY"


class RegistrationError(RegistrarException):
    """Raised when a registration is rejected."""
    default_code = "REGISTRATION_REJECTED"


class CourseFullError(RegistrationError):
    """Raised when the course roster has reached its capacity."""
    default_code = "COURSE_FULL"


class FacultyMismatchError(RegistrationError):
    """Raised when the student's faculty differs from the course's faculty."""
    default_code = "FACULTY_MISMATCH"


class AlreadyRegisteredError(RegistrationError):
    """Raised when the student is already on the course roster."""
    default_code = "ALREADY_REGISTERED"


class RegistrantNotFoundError(StudentNotFoundError, RegistrationError):
    """Raised when registering a student id that does not exist.

    A rejected registration like a faculty mismatch, and still a StudentNotFoundError.
    """
    default_code = "STUDENT_NOT_FOUND"


class NotRegisteredError(RegistrarException):
    """Raised when grading a student who is not on the course roster."""
    default_code = "NOT_REGISTERED"


class TerminalStatusError(RegistrarException):
    """Raised when changing the status of a graduated or expelled student."""
    default_code = "TERMINAL_STATUS"
