"""
Module: generation.generator

Purpose:
    Main problem generation algorithm. Produces the ordered list of
    signed terms for one drill problem from a validated config.

Key Functions:
    - generate(): Main entry point for generation

Algorithm:
    1. Assign a digit-length to every term (round-robin)
    2. Build a magnitude for every term
    3. Negate exactly config.subtractions terms
    4. Shuffle into presentation order, never leading with a subtraction
    5. Repair negative prefix sums (only when negatives are disallowed)

Dependencies:
    - generation.digits: Digit-lengths and magnitudes
    - generation.arrangement: Sign placement and ordering

Used By:
    - yomiage.problem: Problem.from_config()
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from yomiage.config import GenerationConfig

from .arrangement import exclude_negative, set_subtractions, shuffle_problem
from .digits import make_digit_pattern, make_number

logger = logging.getLogger(__name__)


def generate(
    config: GenerationConfig,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Generate the terms of one drill problem.

    The config must already have passed validate_config(); generation
    itself does not fail for a valid config.

    Args:
        config: Validated generation config
        rng: Random source. A fresh, unseeded one is used if omitted.
            Pass a seeded random.Random for reproducible output.

    Returns:
        List of config.length signed integers in dictation order

    Invariants:
        - min_digit <= digit-length of abs(term) <= max_digit
        - exactly config.subtractions terms are negative
        - terms[0] >= 0
        - every prefix sum >= 0 unless config.allow_negative

    Example:
        >>> config = GenerationConfig(min_digit=1, max_digit=2, length=7)
        >>> terms = generate(config, random.Random(42))
        >>> len(terms)
        7
    """
    if rng is None:
        rng = random.Random()

    # Step 1-2: Magnitudes
    digit_pattern = make_digit_pattern(config, rng)
    terms = [make_number(digit, rng) for digit in digit_pattern]
    logger.debug(f"Digit pattern {digit_pattern} -> magnitudes {terms}")

    # Step 3: Subtractions
    set_subtractions(terms, config, rng)

    # Step 4: Presentation order
    shuffle_problem(terms, rng)

    # Step 5: Non-negative running sum
    if not config.allow_negative:
        exclude_negative(terms)

    logger.debug(f"Generated terms {terms} (sum {sum(terms)})")
    return terms
