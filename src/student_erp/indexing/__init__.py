"""
Course Index Module.

Provides grade-bucketed course lookups for threshold queries.
"""

from .course_index import CourseIndexDB
from .models import CourseIndexEntry

__all__ = ["CourseIndexDB", "CourseIndexEntry"]
