"""Internal application services (pure helpers, no I/O)."""

from .validation import ValidationError, parse_roll, validate_roll_sequence
from .board import render_board

__all__ = [
    "validate_roll_sequence",
    "parse_roll",
    "ValidationError",
    "render_board",
]
