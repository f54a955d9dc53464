"""Entity model: closed enumerations, validation and the status lifecycle."""

from datetime import date

import pytest

from registrar.core.entities import Student, GradeRecord
from registrar.core.enums import Faculty, StudentStatus, Semester, Grade
from registrar.core.exceptions import ValidationError, TerminalStatusError

from conftest import make_course


def make_student(**overrides):
    fields = dict(student_id=1, full_name="Oleh Syniy", faculty=Faculty.COMPUTER_SCIENCE,
                  year=1, status=StudentStatus.ACTIVE, group_number="CS101")
    fields.update(overrides)
    return Student(**fields)


def test_student_fields():
    s = make_student(enrollment_date=date(2024, 9, 1))
    assert s.id == 1
    assert s.full_name == "Oleh Syniy"
    assert s.faculty is Faculty.COMPUTER_SCIENCE
    assert s.enrollment_date == date(2024, 9, 1)
    assert s.to_dict()["faculty"] == "computer_science"


def test_student_id_is_read_only():
    s = make_student()
    with pytest.raises(AttributeError):
        s.id = 2


def test_student_defaults_enrollment_date_to_today():
    assert make_student().enrollment_date == date.today()


@pytest.mark.parametrize("overrides", [
    {"faculty": "computer_science"},
    {"status": "active"},
    {"year": "1"},
    {"year": True},
    {"full_name": None},
    {"group_number": 101},
    {"student_id": "1"},
    {"enrollment_date": "2024-09-01"},
])
def test_student_rejects_invalid_fields(overrides):
    with pytest.raises(ValidationError):
        make_student(**overrides)


def test_course_rejects_negative_capacity():
    with pytest.raises(ValidationError) as exc_info:
        make_course(max_students=-1)
    assert exc_info.value.details["field"] == "max_students"


def test_course_allows_zero_capacity():
    assert make_course(max_students=0).max_students == 0


def test_student_accepts_any_string_and_integer_id():
    s = make_student(student_id=0, full_name="", group_number="  ")
    assert (s.id, s.full_name, s.group_number) == (0, "", "  ")
    assert make_course(course_id=0).id == 0


def test_status_has_no_public_setter():
    s = make_student()
    assert not hasattr(s, "change_status")
    with pytest.raises(AttributeError):
        s.status = StudentStatus.EXPELLED


def test_change_status_bumps_version():
    s = make_student()
    previous = s._change_status(StudentStatus.ACADEMIC_LEAVE)
    assert previous is StudentStatus.ACTIVE
    assert s.status is StudentStatus.ACADEMIC_LEAVE
    assert s.version == 2


@pytest.mark.parametrize("terminal", [StudentStatus.GRADUATED, StudentStatus.EXPELLED])
def test_terminal_status_is_frozen(terminal):
    s = make_student(status=terminal)
    with pytest.raises(TerminalStatusError) as exc_info:
        s._change_status(terminal)
    assert exc_info.value.error_code == "TERMINAL_STATUS"
    assert s.status is terminal


def test_status_terminal_flags():
    assert {s for s in StudentStatus if s.is_terminal} == {
        StudentStatus.GRADUATED, StudentStatus.EXPELLED,
    }


def test_grade_scale_is_ordered():
    assert Grade.UNSATISFACTORY < Grade.SATISFACTORY < Grade.GOOD < Grade.EXCELLENT
    assert [int(g) for g in Grade] == [5, 4, 3, 2]


def test_grade_record_is_immutable_and_validated():
    record = GradeRecord(student_id=1, course_id=1, grade=Grade.GOOD, semester=Semester.FIRST)
    with pytest.raises(AttributeError):
        record.grade = Grade.EXCELLENT
    with pytest.raises(ValidationError):
        GradeRecord(student_id=1, course_id=1, grade=4, semester=Semester.FIRST)
    assert record.to_dict()["grade"] == 4
