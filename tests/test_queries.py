"""Derived queries: faculty rosters, averages and the honor roll."""

import pytest

from registrar.core.enums import Faculty, Grade, Semester

from conftest import make_course, enroll


def graded_student(engine, course, name, grades, faculty=Faculty.COMPUTER_SCIENCE):
    student = enroll(engine, name, faculty=faculty)
    engine.register_for_course(student.id, course.id)
    for grade in grades:
        engine.set_grade(student.id, course.id, grade)
    return student


@pytest.fixture
def big_course(engine):
    return engine.add_course(make_course(max_students=50))


def test_students_by_faculty_ignores_registrations(campus):
    engine = campus["engine"]
    cs = engine.get_students_by_faculty(Faculty.COMPUTER_SCIENCE)
    assert cs == [campus["cs1"], campus["cs2"]]
    assert engine.get_students_by_faculty(Faculty.LAW) == []


def test_available_courses_filters_both(engine):
    engine.add_course(make_course(course_id=1, semester=Semester.FIRST))
    engine.add_course(make_course(course_id=2, semester=Semester.SECOND))
    engine.add_course(make_course(course_id=3, faculty=Faculty.ECONOMICS))
    engine.add_course(make_course(course_id=4, semester=Semester.FIRST))
    courses = engine.get_available_courses(Faculty.COMPUTER_SCIENCE, Semester.FIRST)
    assert [c.id for c in courses] == [1, 4]


def test_average_of_five_and_four(engine, big_course):
    student = graded_student(engine, big_course, "A", [Grade.EXCELLENT, Grade.GOOD])
    assert engine.calculate_average_grade(student.id) == 4.5


def test_average_without_grades_is_zero(engine):
    student = enroll(engine, "Ungraded")
    assert engine.calculate_average_grade(student.id) == 0
    assert engine.calculate_average_grade(404) == 0


def test_average_rounds_to_two_places(engine, big_course):
    student = graded_student(engine, big_course, "B",
                             [Grade.EXCELLENT, Grade.EXCELLENT, Grade.SATISFACTORY])
    assert engine.calculate_average_grade(student.id) == 4.33


def test_average_rounds_half_up(engine, big_course):
    # 33 / 8 = 4.125
    grades = [Grade.EXCELLENT] * 3 + [Grade.GOOD] * 3 + [Grade.SATISFACTORY] * 2
    student = graded_student(engine, big_course, "C", grades)
    assert engine.calculate_average_grade(student.id) == 4.13


def test_top_students_threshold(engine, big_course):
    excluded = graded_student(engine, big_course, "Close",
                              [Grade.EXCELLENT, Grade.EXCELLENT, Grade.SATISFACTORY])
    included = graded_student(engine, big_course, "Honors", [Grade.EXCELLENT, Grade.GOOD])
    enroll(engine, "No grades")
    top = engine.get_top_students_by_faculty(Faculty.COMPUTER_SCIENCE)
    assert included in top
    assert excluded not in top
    assert len(top) == 1


def test_top_students_scoped_to_faculty(engine, big_course):
    graded_student(engine, big_course, "CS star", [Grade.EXCELLENT])
    econ_course = engine.add_course(make_course(course_id=2, faculty=Faculty.ECONOMICS, max_students=5))
    econ = graded_student(engine, econ_course, "Econ star", [Grade.EXCELLENT],
                          faculty=Faculty.ECONOMICS)
    assert engine.get_top_students_by_faculty(Faculty.ECONOMICS) == [econ]


def test_statistics(campus):
    engine = campus["engine"]
    engine.register_for_course(campus["cs1"].id, campus["course"].id)
    engine.set_grade(campus["cs1"].id, campus["course"].id, Grade.GOOD)
    stats = engine.get_statistics()
    assert stats["total_students"] == 3
    assert stats["total_courses"] == 1
    assert stats["total_grades"] == 1
    assert stats["total_registrations"] == 1
    assert stats["students_by_status"]["active"] == 3
