"""
Demonstration walkthrough: four students, two courses of capacity 2,
expected rejections printed and skipped.
"""

from .core.entities import Course
from .core.enums import Faculty, StudentStatus, CourseType, Semester, Grade
from .core.exceptions import RegistrarException


def run_walkthrough(engine):
    """Run the full scenario against an empty engine."""
    students = create_sample_data(engine)

    print("\n1. Registering students for courses")
    demonstrate_registration(engine, students)

    print("\n2. Recording grades")
    demonstrate_grading(engine, students)

    print("\n3. Status lifecycle")
    demonstrate_status_lifecycle(engine, students)

    print("\n4. Queries")
    demonstrate_queries(engine, students)


def create_sample_data(engine):
    """Enroll four students and add two courses of capacity 2."""
    students = [
        engine.enroll_student("Oleh Syniy", Faculty.COMPUTER_SCIENCE, 1, StudentStatus.ACTIVE, "CS101"),
        engine.enroll_student("Anna Zhovta", Faculty.ECONOMICS, 4, StudentStatus.ACTIVE, "E102"),
        engine.enroll_student("Stepan Zeleniy", Faculty.COMPUTER_SCIENCE, 1, StudentStatus.ACTIVE, "CS103"),
        engine.enroll_student("Kateryna Ruda", Faculty.COMPUTER_SCIENCE, 1, StudentStatus.ACTIVE, "CS101"),
    ]

    engine.add_course(Course(1, "Programming Fundamentals", CourseType.MANDATORY, 5,
                             Semester.FIRST, Faculty.COMPUTER_SCIENCE, 2))
    engine.add_course(Course(2, "Economic Analysis", CourseType.MANDATORY, 4,
                             Semester.FOURTH, Faculty.ECONOMICS, 2))
    return students


def attempt(label, func, *args):
    """Run one engine call, printing the outcome instead of aborting."""
    try:
        result = func(*args)
        print(f"  ✓ {label}")
        return result
    except RegistrarException as e:
        print(f"  ✗ {label}: {e.message} [{e.error_code}]")
        return None


def demonstrate_registration(engine, students):
    s1, s2, s3, s4 = students
    attempt(f"student {s1.id} -> course 1", engine.register_for_course, s1.id, 1)
    attempt(f"student {s2.id} -> course 2", engine.register_for_course, s2.id, 2)
    attempt(f"student {s3.id} -> course 1", engine.register_for_course, s3.id, 1)
    attempt(f"student {s4.id} -> course 1", engine.register_for_course, s4.id, 1)
    attempt(f"student {s1.id} -> course 2", engine.register_for_course, s1.id, 2)


def demonstrate_grading(engine, students):
    s1, _, s3, s4 = students
    attempt(f"student {s1.id}: {int(Grade.EXCELLENT)}", engine.set_grade, s1.id, 1, Grade.EXCELLENT)
    attempt(f"student {s1.id}: {int(Grade.EXCELLENT)}", engine.set_grade, s1.id, 1, Grade.EXCELLENT)
    attempt(f"student {s1.id}: {int(Grade.GOOD)}", engine.set_grade, s1.id, 1, Grade.GOOD)
    attempt(f"student {s3.id}: {int(Grade.SATISFACTORY)}", engine.set_grade, s3.id, 1, Grade.SATISFACTORY)
    attempt(f"student {s4.id}: {int(Grade.GOOD)}", engine.set_grade, s4.id, 1, Grade.GOOD)


def demonstrate_status_lifecycle(engine, students):
    s2 = students[1]
    attempt(f"student {s2.id} -> academic leave", engine.update_student_status,
            s2.id, StudentStatus.ACADEMIC_LEAVE)
    attempt(f"student {s2.id} -> graduated", engine.update_student_status,
            s2.id, StudentStatus.GRADUATED)
    attempt(f"student {s2.id} -> active", engine.update_student_status,
            s2.id, StudentStatus.ACTIVE)


def demonstrate_queries(engine, students):
    s1, s2 = students[0], students[1]

    print("  Computer Science students:")
    for student in engine.get_students_by_faculty(Faculty.COMPUTER_SCIENCE):
        print(f"    {student!r}")

    print(f"  Grades of student {s1.id}:")
    for record in engine.get_student_grades(s1.id):
        print(f"    course {record.course_id}: {int(record.grade)} ({record.semester.value})")

    print("  Computer Science courses in the first semester:")
    for course in engine.get_available_courses(Faculty.COMPUTER_SCIENCE, Semester.FIRST):
        print(f"    {course!r}")

    print(f"  Average of student {s1.id}: {engine.calculate_average_grade(s1.id)}")
    print(f"  Average of student {s2.id}: {engine.calculate_average_grade(s2.id)}")

    print("  Computer Science honor roll:")
    for student in engine.get_top_students_by_faculty(Faculty.COMPUTER_SCIENCE):
        print(f"    {student!r}")

    print(f"  Statistics: {engine.get_statistics()}")
