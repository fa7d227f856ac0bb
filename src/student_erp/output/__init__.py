"""Console output for student records."""

from .printer import format_student, print_by_index, print_insertion_order, print_student

__all__ = ["format_student", "print_by_index", "print_insertion_order", "print_student"]
