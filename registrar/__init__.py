"""
Registrar: an in-memory academic records engine.

Tracks student enrollment, capacity-bounded course registration, grade
recording and student status lifecycle, with derived faculty rosters,
averages and honor-roll queries.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "In-memory academic records engine"
