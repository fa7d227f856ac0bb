"""
Query Module.

Provides threshold queries over the course index.
"""

from .engine import QueryEngine
from .models import QueryResult

__all__ = ["QueryEngine", "QueryResult"]
