"""Interactive command-line menu."""

from .menu import handle_choice, run_menu

__all__ = ["handle_choice", "run_menu"]
