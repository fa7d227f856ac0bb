"""Top-level package for the Student ERP toolkit.

Provides subpackages:
- student_erp.core – student record variants and the owning collection
- student_erp.loading – delimited-text ingestion
- student_erp.indexing – course → grade bucket index
- student_erp.views – concurrently built sort views
- student_erp.query – threshold queries over the course index
- student_erp.cli – interactive menu
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("student-erp")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
