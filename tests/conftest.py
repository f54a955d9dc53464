"""Shared fixtures for the Registrar test suite."""

import pytest

from registrar.core.entities import Course
from registrar.core.enums import Faculty, StudentStatus, CourseType, Semester
from registrar.main import setup_logging
from registrar.services import AcademicRecordsEngine


def make_course(course_id=1, faculty=Faculty.COMPUTER_SCIENCE, max_students=2,
                semester=Semester.FIRST, name=None, course_type=CourseType.MANDATORY, credits=5):
    return Course(
        course_id=course_id,
        name=name or f"Course {course_id}",
        course_type=course_type,
        credits=credits,
        semester=semester,
        faculty=faculty,
        max_students=max_students,
    )


def enroll(engine, name, faculty=Faculty.COMPUTER_SCIENCE, status=StudentStatus.ACTIVE):
    return engine.enroll_student(name, faculty, 1, status, "G-1")


@pytest.fixture
def engine():
    """A fresh, empty engine."""
    return AcademicRecordsEngine()


@pytest.fixture
def campus(engine):
    """Two Computer Science students, one Economics student, one CS course of capacity 2."""
    cs1 = enroll(engine, "Oleh Syniy")
    cs2 = enroll(engine, "Stepan Zeleniy")
    econ = enroll(engine, "Anna Zhovta", faculty=Faculty.ECONOMICS)
    course = engine.add_course(make_course(course_id=1, max_students=2))
    return {"engine": engine, "cs1": cs1, "cs2": cs2, "econ": econ, "course": course}


@pytest.fixture(autouse=True, scope="session")
def _configure_logging():
    """Install the log handler once, before any test captures stderr."""
    setup_logging("WARNING")
