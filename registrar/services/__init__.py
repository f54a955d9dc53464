"""
Services module containing the academic records engine.
"""

from .records_engine import AcademicRecordsEngine

__all__ = [
    "AcademicRecordsEngine",
]
