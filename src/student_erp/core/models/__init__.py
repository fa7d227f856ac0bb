"""
Core Models Package

Student record variants, the owning collection and grade-range helpers.

**DESIGN RATIONALE:**

Records are the only mutable models, and only while the loader fills them.
Once the collection is frozen every derived structure (course index, sort
views) treats it as read-only, which is what makes the concurrent sort safe
without locks.

| Variant | Roll type | Course code type | Institute tag |
|---------|-----------|------------------|---------------|
| `IIITStudent` | `str` | `str` | `"IIIT"` |
| `IITStudent` | `int` | `int` | `"IIT"` |
"""

from .grades import (
    DEFAULT_THRESHOLD,
    GRADE_BUCKETS,
    MAX_GRADE,
    MIN_GRADE,
    clamp_threshold,
    is_valid_grade,
)
from .students import (
    IIITStudent,
    IITStudent,
    PastCourse,
    StudentRecord,
    TypedStudent,
    VARIANTS,
    variant_for,
)
from .collection import StudentCollection

__all__ = [
    "DEFAULT_THRESHOLD",
    "GRADE_BUCKETS",
    "MAX_GRADE",
    "MIN_GRADE",
    "clamp_threshold",
    "is_valid_grade",
    "IIITStudent",
    "IITStudent",
    "PastCourse",
    "StudentRecord",
    "TypedStudent",
    "VARIANTS",
    "variant_for",
    "StudentCollection",
]
