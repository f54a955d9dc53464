"""Grade recording."""

from datetime import datetime, timezone

import pytest

from registrar.core.enums import Grade, Semester
from registrar.core.exceptions import CourseNotFoundError, NotRegisteredError

from conftest import make_course, enroll


def test_grade_unknown_course(campus):
    with pytest.raises(CourseNotFoundError):
        campus["engine"].set_grade(campus["cs1"].id, 99, Grade.GOOD)


def test_grade_unregistered_student(campus):
    engine = campus["engine"]
    with pytest.raises(NotRegisteredError):
        engine.set_grade(campus["cs1"].id, campus["course"].id, Grade.GOOD)
    assert engine.get_student_grades(campus["cs1"].id) == []


def test_grade_student_registered_elsewhere(engine):
    student = enroll(engine, "Elsewhere")
    first = engine.add_course(make_course(course_id=1))
    second = engine.add_course(make_course(course_id=2))
    engine.register_for_course(student.id, first.id)
    with pytest.raises(NotRegisteredError):
        engine.set_grade(student.id, second.id, Grade.EXCELLENT)


def test_grade_copies_course_semester(engine):
    student = enroll(engine, "Third")
    course = engine.add_course(make_course(semester=Semester.THIRD))
    engine.register_for_course(student.id, course.id)
    when = datetime(2025, 1, 20, 10, 0, tzinfo=timezone.utc)
    record = engine.set_grade(student.id, course.id, Grade.GOOD, recorded_at=when)
    assert record.semester is Semester.THIRD
    assert record.recorded_at == when


def test_repeated_grades_accumulate(campus):
    engine, student, course = campus["engine"], campus["cs1"], campus["course"]
    engine.register_for_course(student.id, course.id)
    for grade in (Grade.EXCELLENT, Grade.EXCELLENT, Grade.GOOD):
        engine.set_grade(student.id, course.id, grade)
    assert [g.grade for g in engine.get_student_grades(student.id)] == [
        Grade.EXCELLENT, Grade.EXCELLENT, Grade.GOOD,
    ]
