"""
Module: students

Purpose:
    Uniform student record contract and its two institution variants.
    Each variant fixes the concrete roll-number and course-code types;
    callers only ever see text renderings through StudentRecord.

Key Classes:
    - StudentRecord: Abstract capability set shared by every variant
    - PastCourse: One graded past-course entry
    - IIITStudent: Text roll number, text course codes ("IIIT")
    - IITStudent: Integer roll number, integer course codes ("IIT")

Key Functions:
    - variant_for(): Resolve an institute tag to its record class

Dependencies:
    - abc (std)
    - dataclasses (std)
    - .grades: Threshold clamping

Used By:
    - loading.parser: Record construction during ingestion
    - indexing.course_index: Past-course traversal
    - views.sorting: Name/roll keys
    - output.printer: Record rendering
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Generic, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from .grades import MIN_GRADE

RollT = TypeVar("RollT", str, int)
CourseT = TypeVar("CourseT", str, int)

CourseCode = Union[str, int]
PastCourseVisitor = Callable[[str, int], None]


@dataclass(frozen=True, slots=True)
class PastCourse:
    """
    A completed course and the grade earned in it.

    Attributes:
        code: Course code in the variant's concrete type
        grade: Integer grade (the loader only stores values in [0, 10])
    """
    code: CourseCode
    grade: int

    @property
    def code_text(self) -> str:
        """Course code rendered as text."""
        return str(self.code)


class StudentRecord(ABC):
    """
    Uniform, read-only view of one student.

    Every variant renders its roll number and course codes as text here, so
    sorting, printing and indexing never need to know which institution a
    record came from.

    Example:
        >>> s = IITStudent("Ann", 2025432, "CSE", 2025)
        >>> s.add_past_course(615, 9)
        >>> s.roll_text
        '2025432'
        >>> s.has_grade_at_least("615", 8)
        True
    """

    institute: ClassVar[str]

    __slots__ = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name."""

    @property
    @abstractmethod
    def roll_text(self) -> str:
        """Roll number rendered as text."""

    @property
    @abstractmethod
    def branch(self) -> str:
        """Branch / department."""

    @property
    @abstractmethod
    def starting_year(self) -> int:
        """Year of admission (non-negative)."""

    @abstractmethod
    def iter_past_courses(self) -> Iterator[Tuple[str, int]]:
        """Yield (course_text, grade) for each past course, in insertion order."""

    @abstractmethod
    def current_course_codes(self) -> List[str]:
        """Current course codes rendered as text."""

    def for_each_past_course(self, visit: PastCourseVisitor) -> None:
        """Call ``visit(course_text, grade)`` for every past course."""
        for course, grade in self.iter_past_courses():
            visit(course, grade)

    def has_grade_at_least(self, course: str, threshold: int) -> bool:
        """
        Check whether any past course ``course`` was graded >= threshold.

        Negative thresholds are treated as 0. This is the brute-force answer
        the course index must agree with.
        """
        threshold = max(threshold, MIN_GRADE)
        return any(
            code == course and grade >= threshold
            for code, grade in self.iter_past_courses()
        )


class TypedStudent(StudentRecord, Generic[RollT, CourseT]):
    """Shared storage for variants parameterised by roll and course-code types."""

    roll_type: ClassVar[type]
    course_code_type: ClassVar[type]

    __slots__ = ("_name", "_roll", "_branch", "_starting_year", "_current", "_past")

    def __init__(self, name: str, roll: RollT, branch: str, starting_year: int) -> None:
        _check_type(roll, self.roll_type, "roll")
        if starting_year < 0:
            raise ValueError(f"starting_year must be non-negative: {starting_year}")
        self._name = name
        self._roll = roll
        self._branch = branch
        self._starting_year = starting_year
        self._current: List[CourseT] = []
        self._past: List[PastCourse] = []

    # ─────────────────────────────────────────────────────────────────────────
    # Text parsing (variant-specific)
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    @abstractmethod
    def parse_roll(cls, text: str) -> RollT:
        """Parse a roll number field; raises ValueError if unparsable."""

    @classmethod
    @abstractmethod
    def parse_course_code(cls, text: str) -> CourseT:
        """Parse a course code; raises ValueError if unparsable."""

    # ─────────────────────────────────────────────────────────────────────────
    # Ingestion-time mutators
    # ─────────────────────────────────────────────────────────────────────────

    def add_current_course(self, code: CourseT) -> None:
        _check_type(code, self.course_code_type, "course code")
        self._current.append(code)

    def add_past_course(self, code: CourseT, grade: int) -> None:
        """Append a graded past course. Grade range is checked by the loader."""
        _check_type(code, self.course_code_type, "course code")
        self._past.append(PastCourse(code=code, grade=grade))

    # ─────────────────────────────────────────────────────────────────────────
    # StudentRecord
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def roll(self) -> RollT:
        return self._roll

    @property
    def roll_text(self) -> str:
        return str(self._roll)

    @property
    def branch(self) -> str:
        return self._branch

    @property
    def starting_year(self) -> int:
        return self._starting_year

    @property
    def current_courses(self) -> Tuple[CourseT, ...]:
        return tuple(self._current)

    @property
    def past_courses(self) -> Tuple[PastCourse, ...]:
        return tuple(self._past)

    @property
    def past_course_count(self) -> int:
        return len(self._past)

    def current_course_codes(self) -> List[str]:
        return [str(code) for code in self._current]

    def iter_past_courses(self) -> Iterator[Tuple[str, int]]:
        for entry in self._past:
            yield entry.code_text, entry.grade

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, roll={self._roll!r}, "
            f"branch={self._branch!r}, starting_year={self._starting_year})"
        )


class IIITStudent(TypedStudent[str, str]):
    """IIIT-Delhi record: roll numbers like "MT25003", course codes like "OOPD"."""

    institute = "IIIT"
    roll_type = str
    course_code_type = str

    __slots__ = ()

    @classmethod
    def parse_roll(cls, text: str) -> str:
        roll = text.strip()
        if not roll:
            raise ValueError("empty roll number")
        return roll

    @classmethod
    def parse_course_code(cls, text: str) -> str:
        code = text.strip()
        if not code:
            raise ValueError("empty course code")
        return code


class IITStudent(TypedStudent[int, int]):
    """IIT-Delhi record: numeric roll numbers, numeric course codes (615, 801)."""

    institute = "IIT"
    roll_type = int
    course_code_type = int

    __slots__ = ()

    @classmethod
    def parse_roll(cls, text: str) -> int:
        roll = text.strip()
        # Roll numbers are unsigned
        if not (roll.isascii() and roll.isdigit()):
            raise ValueError(f"roll number is not an unsigned integer: {text!r}")
        return int(roll)

    @classmethod
    def parse_course_code(cls, text: str) -> int:
        code = text.strip()
        if not (code.isascii() and code.isdigit()):
            raise ValueError(f"course code is not an unsigned integer: {text!r}")
        return int(code)


VARIANTS: Dict[str, Type[TypedStudent]] = {
    IIITStudent.institute: IIITStudent,
    IITStudent.institute: IITStudent,
}


def variant_for(institute: str) -> Optional[Type[TypedStudent]]:
    """Return the record class for an institute tag, or None if unrecognised."""
    return VARIANTS.get(institute)


def _check_type(value: object, expected: type, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, expected):
        raise TypeError(
            f"{what} must be {expected.__name__}, got {type(value).__name__}: {value!r}"
        )
