"""Student status transitions through the engine."""

import pytest

from registrar.core.enums import StudentStatus
from registrar.core.exceptions import StudentNotFoundError, TerminalStatusError

from conftest import enroll


def test_unknown_student(engine):
    with pytest.raises(StudentNotFoundError):
        engine.update_student_status(5, StudentStatus.ACTIVE)


def test_non_terminal_round_trip(engine):
    student = enroll(engine, "Leave and back")
    engine.update_student_status(student.id, StudentStatus.ACADEMIC_LEAVE)
    engine.update_student_status(student.id, StudentStatus.ACTIVE)
    assert engine.get_student(student.id).status is StudentStatus.ACTIVE


def test_same_non_terminal_status_is_allowed(engine):
    student = enroll(engine, "Still active")
    engine.update_student_status(student.id, StudentStatus.ACTIVE)
    assert student.status is StudentStatus.ACTIVE


@pytest.mark.parametrize("terminal", [StudentStatus.GRADUATED, StudentStatus.EXPELLED])
@pytest.mark.parametrize("target", list(StudentStatus))
def test_no_transition_out_of_terminal(engine, terminal, target):
    student = enroll(engine, "Done")
    engine.update_student_status(student.id, terminal)
    with pytest.raises(TerminalStatusError):
        engine.update_student_status(student.id, target)
    assert student.status is terminal


def test_enrolled_directly_as_graduated_is_frozen(engine):
    student = enroll(engine, "Alumnus", status=StudentStatus.GRADUATED)
    with pytest.raises(TerminalStatusError):
        engine.update_student_status(student.id, StudentStatus.ACTIVE)
