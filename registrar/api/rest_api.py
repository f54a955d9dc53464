"""
REST API for the Registrar engine using FastAPI.
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional, Dict, Any, List

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..core.entities import Student, Course, GradeRecord
from ..core.enums import Faculty, StudentStatus, CourseType, Semester, Grade
from ..core.exceptions import RegistrarException, RegistrationError, ResourceNotFoundError, ValidationError
from ..services import AcademicRecordsEngine


logger = logging.getLogger(__name__)


# Pydantic models for API
class StudentCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=200)
    faculty: Faculty
    year: int = Field(..., ge=1, le=10)
    status: StudentStatus = StudentStatus.ACTIVE
    group_number: str = Field(..., min_length=1, max_length=20)
    enrollment_date: Optional[date] = None


class StudentResponse(BaseModel):
    id: int
    full_name: str
    faculty: Faculty
    year: int
    status: StudentStatus
    enrollment_date: date
    group_number: str
    version: int


class StatusUpdate(BaseModel):
    status: StudentStatus


class CourseCreate(BaseModel):
    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=200)
    course_type: CourseType
    credits: int = Field(..., ge=0, le=30)
    semester: Semester
    faculty: Faculty
    max_students: int = Field(..., ge=0)


class CourseResponse(BaseModel):
    id: int
    name: str
    course_type: CourseType
    credits: int
    semester: Semester
    faculty: Faculty
    max_students: int
    registered_count: int


class RegistrationRequest(BaseModel):
    student_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)


class RosterResponse(BaseModel):
    course_id: int
    student_ids: List[int]
    max_students: int


class GradeCreate(BaseModel):
    student_id: int = Field(..., ge=1)
    course_id: int = Field(..., ge=1)
    grade: Grade


class GradeResponse(BaseModel):
    student_id: int
    course_id: int
    grade: int
    semester: Semester
    recorded_at: datetime


class AverageResponse(BaseModel):
    student_id: int
    average: float
    grade_count: int


class StatisticsResponse(BaseModel):
    success: bool
    message: str
    statistics: Dict[str, Any]


class RegistrarRestAPI:
    """REST API exposing one AcademicRecordsEngine."""

    def __init__(self, engine: AcademicRecordsEngine):
        self._engine = engine

        self.app = FastAPI(
            title="Registrar Academic Records API",
            description="Student enrollment, course registration, grading and status lifecycle",
            version=__version__,
            docs_url="/docs",
            redoc_url="/redoc"
        )

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        self._setup_error_handlers()
        self._setup_routes()

    @property
    def engine(self) -> AcademicRecordsEngine:
        return self._engine

    def _setup_error_handlers(self):
        """Translate engine errors into HTTP responses."""

        @self.app.exception_handler(RegistrarException)
        async def registrar_error_handler(request: Request, exc: RegistrarException):
            if isinstance(exc, RegistrationError):
                status_code = status.HTTP_409_CONFLICT
            elif isinstance(exc, ResourceNotFoundError):
                status_code = status.HTTP_404_NOT_FOUND
            elif isinstance(exc, ValidationError):
                status_code = status.HTTP_400_BAD_REQUEST
            else:
                status_code = status.HTTP_409_CONFLICT
            logger.info("%s %s rejected: %s (%s)", request.method, request.url.path,
                        exc.message, exc.error_code)
            return JSONResponse(
                status_code=status_code,
                content={"detail": exc.message, "error_code": exc.error_code, "details": exc.details}
            )

    def _setup_routes(self):
        """Setup API routes."""
        engine = self._engine

        @self.app.get("/", response_model=Dict[str, str])
        async def root():
            """Root endpoint."""
            return {
                "message": "Registrar Academic Records API",
                "version": __version__,
                "docs": "/docs"
            }

        @self.app.get("/health", response_model=Dict[str, str])
        async def health_check():
            """Health check endpoint."""
            return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

        # Student endpoints
        @self.app.post("/students", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
        async def create_student(student_data: StudentCreate):
            """Enroll a new student."""
            student = engine.enroll_student(
                full_name=student_data.full_name,
                faculty=student_data.faculty,
                year=student_data.year,
                status=student_data.status,
                group_number=student_data.group_number,
                enrollment_date=student_data.enrollment_date
            )
            return self._student_to_response(student)

        @self.app.get("/students", response_model=List[StudentResponse])
        async def list_students(skip: int = 0, limit: int = 100):
            """List students in enrollment order."""
            students = engine.list_students()[skip:skip + limit]
            return [self._student_to_response(student) for student in students]

        @self.app.get("/students/{student_id}", response_model=StudentResponse)
        async def get_student(student_id: int):
            """Get a student by ID."""
            return self._student_to_response(engine.get_student(student_id))

        @self.app.patch("/students/{student_id}/status", response_model=StudentResponse)
        async def update_student_status(student_id: int, update: StatusUpdate):
            """Change a student's lifecycle status."""
            student = engine.update_student_status(student_id, update.status)
            return self._student_to_response(student)

        @self.app.get("/students/{student_id}/grades", response_model=List[GradeResponse])
        async def get_student_grades(student_id: int):
            """Get a student's grade records in recording order."""
            engine.get_student(student_id)
            return [self._grade_to_response(g) for g in engine.get_student_grades(student_id)]

        @self.app.get("/students/{student_id}/average", response_model=AverageResponse)
        async def get_student_average(student_id: int):
            """Get a student's average grade (0 when no grades are recorded)."""
            engine.get_student(student_id)
            return AverageResponse(
                student_id=student_id,
                average=engine.calculate_average_grade(student_id),
                grade_count=len(engine.get_student_grades(student_id))
            )

        # Course endpoints
        @self.app.post("/courses", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
        async def create_course(course_data: CourseCreate):
            """Add a course to the catalog."""
            course = engine.add_course(Course(
                course_id=course_data.id,
                name=course_data.name,
                course_type=course_data.course_type,
                credits=course_data.credits,
                semester=course_data.semester,
                faculty=course_data.faculty,
                max_students=course_data.max_students
            ))
            return self._course_to_response(course)

        @self.app.get("/courses", response_model=List[CourseResponse])
        async def list_courses(faculty: Optional[Faculty] = None, semester: Optional[Semester] = None):
            """List courses, optionally filtered by faculty and semester."""
            if faculty is not None and semester is not None:
                courses = engine.get_available_courses(faculty, semester)
            else:
                courses = [c for c in engine.list_courses()
                           if (faculty is None or c.faculty == faculty)
                           and (semester is None or c.semester == semester)]
            return [self._course_to_response(course) for course in courses]

        @self.app.get("/courses/{course_id}", response_model=CourseResponse)
        async def get_course(course_id: int):
            """Get a course by ID."""
            return self._course_to_response(engine.get_course(course_id))

        @self.app.get("/courses/{course_id}/roster", response_model=RosterResponse)
        async def get_course_roster(course_id: int):
            """Get the registered students of a course in registration order."""
            course = engine.get_course(course_id)
            return RosterResponse(
                course_id=course_id,
                student_ids=engine.get_course_roster(course_id),
                max_students=course.max_students
            )

        # Registration and grading endpoints
        @self.app.post("/registrations", response_model=RosterResponse, status_code=status.HTTP_201_CREATED)
        async def register_for_course(registration: RegistrationRequest):
            """Register a student for a course."""
            roster = engine.register_for_course(registration.student_id, registration.course_id)
            return RosterResponse(
                course_id=registration.course_id,
                student_ids=roster,
                max_students=engine.get_course(registration.course_id).max_students
            )

        @self.app.post("/grades", response_model=GradeResponse, status_code=status.HTTP_201_CREATED)
        async def set_grade(grade_data: GradeCreate):
            """Record a grade for a registered student."""
            record = engine.set_grade(grade_data.student_id, grade_data.course_id, grade_data.grade)
            return self._grade_to_response(record)

        # Faculty queries
        @self.app.get("/faculties/{faculty}/students", response_model=List[StudentResponse])
        async def get_students_by_faculty(faculty: Faculty):
            """Get all students of a faculty."""
            return [self._student_to_response(s) for s in engine.get_students_by_faculty(faculty)]

        @self.app.get("/faculties/{faculty}/top-students", response_model=List[StudentResponse])
        async def get_top_students_by_faculty(faculty: Faculty):
            """Get the honor roll of a faculty."""
            return [self._student_to_response(s) for s in engine.get_top_students_by_faculty(faculty)]

        # Statistics endpoints
        @self.app.get("/statistics", response_model=StatisticsResponse)
        async def get_statistics():
            """Get engine statistics."""
            return StatisticsResponse(
                success=True,
                message="Statistics retrieved successfully",
                statistics=engine.get_statistics()
            )

    def _student_to_response(self, student: Student) -> StudentResponse:
        """Convert Student entity to response model."""
        return StudentResponse(
            id=student.id,
            full_name=student.full_name,
            faculty=student.faculty,
            year=student.year,
            status=student.status,
            enrollment_date=student.enrollment_date,
            group_number=student.group_number,
            version=student.version
        )

    def _course_to_response(self, course: Course) -> CourseResponse:
        """Convert Course entity to response model."""
        return CourseResponse(
            id=course.id,
            name=course.name,
            course_type=course.course_type,
            credits=course.credits,
            semester=course.semester,
            faculty=course.faculty,
            max_students=course.max_students,
            registered_count=len(self._engine.get_course_roster(course.id))
        )

    def _grade_to_response(self, record: GradeRecord) -> GradeResponse:
        """Convert GradeRecord to response model."""
        return GradeResponse(
            student_id=record.student_id,
            course_id=record.course_id,
            grade=int(record.grade),
            semester=record.semester,
            recorded_at=record.recorded_at
        )
