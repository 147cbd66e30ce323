"""
Module: generation

Purpose:
    Problem generation algorithm. Builds the signed term sequence of a
    drill problem that meets the digit-length, subtraction-count and
    answer-sign constraints of a GenerationConfig.

Key Functions:
    - generate(): Main entry point for generation

Used By:
    - yomiage.problem: Problem facade
"""

from .arrangement import (
    GenerationError,
    exclude_negative,
    set_subtractions,
    shuffle_problem,
)
from .digits import make_digit_pattern, make_number, shuffle_digit_set
from .generator import generate

__all__ = [
    "generate",
    "GenerationError",
    "make_digit_pattern",
    "make_number",
    "shuffle_digit_set",
    "set_subtractions",
    "shuffle_problem",
    "exclude_negative",
]
