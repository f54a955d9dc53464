"""
Script to add sample data to a running Registrar server via the REST API.
Make sure the server is running before executing this script.

Usage:
    python add_data.py
"""

import json
import os
import sys

import requests


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"
_WARN_CHAR = "⚠" if _console_supports_utf8() else "[WARN]"


def _detect_base_url() -> str:
    """Determine a reachable BASE_URL.

    Priority: environment variable `REGISTRAR_BASE_URL`, then common local ports.
    If nothing responds, fall back to http://127.0.0.1:8000.
    """
    env = os.environ.get("REGISTRAR_BASE_URL")
    if env:
        return env

    candidates = [
        "http://127.0.0.1:8000",
        "http://127.0.0.1:8888",
        "http://localhost:8000",
        "http://localhost:8888",
    ]

    for c in candidates:
        try:
            resp = requests.get(f"{c}/health", timeout=0.5)
            if resp.status_code == 200:
                return c
        except requests.exceptions.RequestException:
            continue

    return candidates[0]


BASE_URL = _detect_base_url()


def check_server():
    """Check if the server is running."""
    try:
        response = requests.get(f"{BASE_URL}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running")
            return True
    except requests.exceptions.RequestException:
        pass
    print(f"{_FAIL_CHAR} Server is not running at {BASE_URL}!")
    print("\nPlease start the server first:")
    print("  python -m registrar.main --rest-port 8000")
    return False


def _post(path, data):
    """POST JSON and return (status_code, body) or (None, None) on a transport error."""
    try:
        response = requests.post(f"{BASE_URL}{path}", json=data, timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error calling {path}: {e}")
        return None, None
    return response.status_code, response.json()


def create_student(full_name, faculty, year, group_number):
    """Enroll a new student."""
    code, body = _post("/students", {
        "full_name": full_name,
        "faculty": faculty,
        "year": year,
        "group_number": group_number
    })
    if code == 201:
        print(f"{_OK_CHAR} Enrolled student {body['id']}: {full_name} ({faculty})")
        return body
    if code is not None:
        print(f"{_FAIL_CHAR} Failed to enroll student: {body}")
    return None


def create_course(course_id, name, course_type, credits, semester, faculty, max_students):
    """Add a course to the catalog."""
    code, body = _post("/courses", {
        "id": course_id,
        "name": name,
        "course_type": course_type,
        "credits": credits,
        "semester": semester,
        "faculty": faculty,
        "max_students": max_students
    })
    if code == 201:
        print(f"{_OK_CHAR} Created course {course_id}: {name} (capacity {max_students})")
        return body
    if code is not None:
        print(f"{_FAIL_CHAR} Failed to create course: {body.get('detail', body)}")
    return None


def register(student_id, course_id):
    """Register a student for a course. Rejections are expected outcomes."""
    code, body = _post("/registrations", {"student_id": student_id, "course_id": course_id})
    if code == 201:
        print(f"{_OK_CHAR} Student {student_id} registered for course {course_id}")
        return body
    if code is not None:
        print(f"{_WARN_CHAR} Student {student_id} not registered for course {course_id}: "
              f"{body.get('detail')} [{body.get('error_code')}]")
    return None


def set_grade(student_id, course_id, grade):
    """Record a grade."""
    code, body = _post("/grades", {"student_id": student_id, "course_id": course_id, "grade": grade})
    if code == 201:
        print(f"{_OK_CHAR} Grade {grade} recorded for student {student_id} in course {course_id}")
        return body
    if code is not None:
        print(f"{_WARN_CHAR} Grade not recorded: {body.get('detail')} [{body.get('error_code')}]")
    return None


def list_students():
    """List all students."""
    try:
        response = requests.get(f"{BASE_URL}/students", timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error listing students: {e}")
        return []
    students = response.json()
    print(f"\n{'='*60}")
    print(f"Students ({len(students)})")
    print(f"{'='*60}")
    for student in students:
        print(f"  {student['id']:4} | {student['full_name']:20} | {student['faculty']:16} | {student['status']}")
    return students


def get_statistics():
    """Get engine statistics."""
    try:
        response = requests.get(f"{BASE_URL}/statistics", timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error getting statistics: {e}")
        return None
    stats = response.json()
    print(f"\n{'='*60}")
    print("Engine Statistics")
    print(f"{'='*60}")
    print(json.dumps(stats['statistics'], indent=2))
    return stats


def main():
    """Main execution."""
    print("="*60)
    print("Registrar - Data Addition Script")
    print("="*60)
    print()

    if not check_server():
        sys.exit(1)

    print("\nCreating courses...")
    create_course(101, "Programming Fundamentals", "mandatory", 5, "first", "computer_science", 2)
    create_course(102, "Databases", "optional", 3, "second", "computer_science", 25)
    create_course(201, "Economic Analysis", "mandatory", 4, "fourth", "economics", 2)

    print("\nEnrolling students...")
    students = [
        create_student("Oleh Syniy", "computer_science", 1, "CS101"),
        create_student("Anna Zhovta", "economics", 4, "E102"),
        create_student("Stepan Zeleniy", "computer_science", 1, "CS103"),
        create_student("Kateryna Ruda", "computer_science", 1, "CS101"),
    ]
    ids = [s['id'] if s else None for s in students]

    print("\nRegistering students...")
    if ids[0]:
        register(ids[0], 101)
    if ids[2]:
        register(ids[2], 101)
    if ids[3]:
        register(ids[3], 101)  # course is full by now
    if ids[1]:
        register(ids[1], 102)  # wrong faculty
        register(ids[1], 201)

    print("\nRecording grades...")
    if ids[0]:
        set_grade(ids[0], 101, 5)
        set_grade(ids[0], 101, 4)
    if ids[2]:
        set_grade(ids[2], 101, 3)

    list_students()
    get_statistics()

    print("\n" + "="*60)
    print(f"{_OK_CHAR} Sample data added successfully!")
    print("="*60)
    print("\nYou can now:")
    print(f"  - View API docs: {BASE_URL}/docs")
    print(f"  - Honor roll: curl {BASE_URL}/faculties/computer_science/top-students")
    print(f"  - Roster: curl {BASE_URL}/courses/101/roster")
    print()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)
