"""
Academic records engine: enrollment, course registration, grading and
status lifecycle, plus the derived roster and grade queries.
"""

import logging
import threading
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from ..core.entities import Student, Course, GradeRecord
from ..core.enums import Faculty, StudentStatus, Semester, Grade, HONOR_ROLL_THRESHOLD
from ..core.exceptions import (
    CourseNotFoundError, StudentNotFoundError, DuplicateEntityError, CourseFullError,
    FacultyMismatchError, AlreadyRegisteredError, RegistrantNotFoundError, NotRegisteredError,
    ValidationError
)


logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


class AcademicRecordsEngine:
    """Owns students, courses, grade records and the per-course rosters.

    Entities are only created through the engine and never deleted. Every
    operation runs under one re-entrant lock, so the capacity check and the
    roster append in ``register_for_course`` are atomic even when the engine
    is shared between request threads.
    """

    def __init__(self):
        self._students: Dict[int, Student] = {}  # insertion order = enrollment order
        self._courses: Dict[int, Course] = {}
        self._grades: List[GradeRecord] = []
        self._registrations: Dict[int, List[int]] = {}  # course_id -> [student_ids]
        self._next_student_id = 1
        self._lock = threading.RLock()

    # Enrollment and catalog

    def enroll_student(self, full_name: str, faculty: Faculty, year: int,
                       status: StudentStatus, group_number: str,
                       enrollment_date: Optional[date] = None) -> Student:
        """Create a student with the next sequential id."""
        with self._lock:
            student = Student(
                student_id=self._next_student_id,
                full_name=full_name,
                faculty=faculty,
                year=year,
                status=status,
                group_number=group_number,
                enrollment_date=enrollment_date
            )
            # Counter only advances once the student is valid; ids are never reused
            self._next_student_id += 1
            self._students[student.id] = student
            logger.info("Enrolled student %s (%s, %s)", student.id, student.full_name,
                        student.faculty.value)
            return student

    def add_course(self, course: Course) -> Course:
        """Add a course to the catalog."""
        if not isinstance(course, Course):
            raise ValidationError(f"Expected a Course, got {course!r}")
        with self._lock:
            if course.id in self._courses:
                raise DuplicateEntityError(
                    f"Course {course.id} already exists",
                    error_code="DUPLICATE_COURSE",
                    details={'course_id': course.id}
                )
            self._courses[course.id] = course
            logger.info("Added course %s (%s)", course.id, course.name)
            return course

    # Registration

    def register_for_course(self, student_id: int, course_id: int) -> List[int]:
        """Register a student for a course and return the updated roster.

        Checks run in order: course exists, capacity, student exists,
        faculty match, duplicate registration. Every rejection after the
        course lookup is a RegistrationError, an unknown student included.
        """
        with self._lock:
            course = self._find_course(course_id)
            roster = self._registrations.setdefault(course_id, [])

            if len(roster) >= course.max_students:
                logger.warning("Course %s is full; student %s cannot be registered",
                               course.name, student_id)
                raise CourseFullError(
                    f"Course {course.name} is full ({course.max_students} students)",
                    details={'student_id': student_id, 'course_id': course_id,
                             'max_students': course.max_students}
                )

            student = self._students.get(student_id)
            if student is None:
                logger.warning("Student %s is not eligible for course %s: unknown student",
                               student_id, course.name)
                raise RegistrantNotFoundError(
                    f"Student {student_id} not found",
                    details={'student_id': student_id, 'course_id': course_id}
                )

            if student.faculty != course.faculty:
                logger.warning("Student %s is not eligible for course %s: faculty %s != %s",
                               student_id, course.name, student.faculty.value, course.faculty.value)
                raise FacultyMismatchError(
                    f"Student {student_id} ({student.faculty.value}) cannot register for "
                    f"course {course.name} ({course.faculty.value})",
                    details={'student_id': student_id, 'course_id': course_id,
                             'student_faculty': student.faculty.value,
                             'course_faculty': course.faculty.value}
                )

            if student_id in roster:
                logger.warning("Student %s is already registered for course %s",
                               student_id, course.name)
                raise AlreadyRegisteredError(
                    f"Student {student_id} is already registered for course {course.name}",
                    details={'student_id': student_id, 'course_id': course_id}
                )

            roster.append(student_id)
            logger.info("Student %s registered for course %s", student_id, course.name)
            return list(roster)

    # Grading

    def set_grade(self, student_id: int, course_id: int, grade: Grade,
                  recorded_at: Optional[datetime] = None) -> GradeRecord:
        """Append a grade record for a registered student."""
        with self._lock:
            course = self._find_course(course_id)

            if student_id not in self._registrations.get(course_id, []):
                logger.warning("Student %s is not registered for course %s", student_id, course.name)
                raise NotRegisteredError(
                    f"Student {student_id} is not registered for course {course.name}",
                    details={'student_id': student_id, 'course_id': course_id}
                )

            record = GradeRecord(
                student_id=student_id,
                course_id=course_id,
                grade=grade,
                semester=course.semester,
                recorded_at=recorded_at or datetime.now(timezone.utc)
            )
            self._grades.append(record)
            logger.info("Grade %d recorded for student %s in course %s",
                        record.grade, student_id, course.name)
            return record

    # Status lifecycle

    def update_student_status(self, student_id: int, new_status: StudentStatus) -> Student:
        """Change a student's status unless it is already terminal."""
        with self._lock:
            student = self.get_student(student_id)
            previous = student._change_status(new_status)
            logger.info("Student %s status changed %s -> %s", student_id,
                        previous.value, new_status.value)
            return student

    # Lookups

    def get_student(self, student_id: int) -> Student:
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                raise StudentNotFoundError(
                    f"Student {student_id} not found",
                    details={'student_id': student_id}
                )
            return student

    def get_course(self, course_id: int) -> Course:
        with self._lock:
            return self._find_course(course_id)

    def list_students(self) -> List[Student]:
        with self._lock:
            return list(self._students.values())

    def list_courses(self) -> List[Course]:
        with self._lock:
            return list(self._courses.values())

    def get_course_roster(self, course_id: int) -> List[int]:
        """Get registered student ids in registration order."""
        with self._lock:
            self._find_course(course_id)
            return list(self._registrations.get(course_id, []))

    # Queries

    def get_students_by_faculty(self, faculty: Faculty) -> List[Student]:
        with self._lock:
            return [s for s in self._students.values() if s.faculty == faculty]

    def get_student_grades(self, student_id: int) -> List[GradeRecord]:
        with self._lock:
            return [g for g in self._grades if g.student_id == student_id]

    def get_available_courses(self, faculty: Faculty, semester: Semester) -> List[Course]:
        with self._lock:
            return [c for c in self._courses.values()
                    if c.faculty == faculty and c.semester == semester]

    def calculate_average_grade(self, student_id: int) -> float:
        """Mean grade rounded half-up to 2 places.

        Returns 0 for a student without grades, so callers that need to tell
        "no grades" from a real score must check ``get_student_grades`` first.
        """
        with self._lock:
            grades = self.get_student_grades(student_id)
            if not grades:
                return 0
            mean = Decimal(sum(int(g.grade) for g in grades)) / Decimal(len(grades))
            return float(mean.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))

    def get_top_students_by_faculty(self, faculty: Faculty) -> List[Student]:
        """Students of a faculty whose average is at or above the honor-roll threshold."""
        with self._lock:
            return [s for s in self.get_students_by_faculty(faculty)
                    if self.calculate_average_grade(s.id) >= HONOR_ROLL_THRESHOLD]

    def get_statistics(self) -> Dict[str, Any]:
        """Get engine statistics."""
        with self._lock:
            by_status = {status.value: 0 for status in StudentStatus}
            for student in self._students.values():
                by_status[student.status.value] += 1

            return {
                'total_students': len(self._students),
                'total_courses': len(self._courses),
                'total_grades': len(self._grades),
                'total_registrations': sum(len(r) for r in self._registrations.values()),
                'students_by_status': by_status,
            }

    def _find_course(self, course_id: int) -> Course:
        course = self._courses.get(course_id)
        if course is None:
            raise CourseNotFoundError(
                f"Course {course_id} not found",
                details={'course_id': course_id}
            )
        return course
