import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import student_erp
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from student_erp.core.models import IIITStudent, IITStudent, StudentCollection


SAMPLE_CSV = """Institute,Name,RollNumber,Branch,StartingYear,CurrentCourses,PastCoursesGrades
IIIT,Riya Sharma,MT25003,CSE,2025,OOPD;DSA,801:9;OOPD:8
IIT,Arjun Mehta,2025432,EE,2025,615;601,701:10;802:7
IIIT,Kabir Rao,PhD25033,ECE,2024,DSA,801:6;DSA:10
NIT,Unknown Person,X1,ME,2024,ABC,ABC:9
IIT,Meera Iyer,2025111,CSE,2023,601,701:9;615:15
"""


# Common test fixtures
@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """Write the sample student file and return its path."""
    path = tmp_path / "students_sample.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def scenario_students() -> StudentCollection:
    """Bob (roll 2, X:9) then Ann (roll 1, X:7)."""
    bob = IIITStudent("Bob", "2", "CSE", 2024)
    bob.add_past_course("X", 9)
    ann = IIITStudent("Ann", "1", "CSE", 2024)
    ann.add_past_course("X", 7)
    return StudentCollection([bob, ann]).freeze()


@pytest.fixture
def mixed_students() -> StudentCollection:
    """Records from both institutes with overlapping course codes."""
    riya = IIITStudent("Riya", "MT25003", "CSE", 2025)
    riya.add_current_course("OOPD")
    riya.add_past_course("801", 9)
    riya.add_past_course("OOPD", 8)

    arjun = IITStudent("Arjun", 2025432, "EE", 2025)
    arjun.add_current_course(615)
    arjun.add_past_course(801, 10)
    arjun.add_past_course(802, 4)

    kabir = IIITStudent("Kabir", "PhD25033", "ECE", 2024)
    kabir.add_past_course("801", 6)
    kabir.add_past_course("DSA", 10)

    meera = IITStudent("Meera", 2025111, "CSE", 2023)
    meera.add_past_course(801, 9)
    meera.add_past_course(701, 0)

    return StudentCollection([riya, arjun, kabir, meera]).freeze()
