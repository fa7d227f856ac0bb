"""
Sort Views Module.

Provides index-permutation views (by name, by roll) built in parallel.
"""

from .sorting import SortViews, build_sort_views, sort_indices

__all__ = ["SortViews", "build_sort_views", "sort_indices"]
