"""
Module: generation.arrangement

Purpose:
    Turn a list of magnitudes into the dictated sequence: choose which
    terms are subtracted, shuffle into presentation order and repair
    the order so the drill never opens with a subtraction and, when
    negatives are disallowed, no running sum drops below zero.

Key Functions:
    - set_subtractions(): Negate exactly config.subtractions terms
    - shuffle_problem(): Final shuffle with a non-negative first term
    - exclude_negative(): Keep every prefix sum non-negative

Dependencies:
    - random (std)

Invariants:
    - Terms are only swapped or negated; magnitudes never change
    - After set_subtractions(), exactly config.subtractions terms are negative
"""

from __future__ import annotations

import logging
import random
from typing import List

from yomiage.config import GenerationConfig

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Internal invariant broken during generation (unreachable for validated configs)."""
    pass


def set_subtractions(
    terms: List[int],
    config: GenerationConfig,
    rng: random.Random,
) -> None:
    """
    Shuffle terms in place and negate exactly config.subtractions of them.

    When negatives are disallowed the halves are arranged so the former
    half sums no higher than the latter half, and only former-half
    positions may be negated. That keeps the total non-negative.

    Positions are walked left to right and each is negated with
    probability remaining / positions_left, so the count is exact.
    """
    rng.shuffle(terms)

    half = config.length // 2
    if not config.allow_negative:
        if sum(terms[:half]) > sum(terms[half:]):
            for i in range(half):
                terms[i], terms[half + i] = terms[half + i], terms[i]

    remaining = config.subtractions
    eligible = config.length if config.allow_negative else half
    for i in range(eligible):
        if rng.random() < remaining / (eligible - i):
            terms[i] = -terms[i]
            remaining -= 1

    if remaining:
        raise GenerationError(
            f"{remaining} subtractions left unplaced over {eligible} positions"
        )


def shuffle_problem(terms: List[int], rng: random.Random) -> None:
    """
    Shuffle terms in place into presentation order.

    A drill never opens with a subtraction: if the first term is
    negative, a non-negative term found by a cyclic scan from a random
    start is swapped to the front.
    """
    rng.shuffle(terms)

    if terms[0] >= 0:
        return

    n = len(terms)
    target = rng.randrange(1, n) if n > 1 else 0
    for _ in range(n):
        if terms[target] >= 0:
            break
        target = (target + 1) % n
    else:
        raise GenerationError("no non-negative term available to lead the problem")

    terms[0], terms[target] = terms[target], terms[0]


def exclude_negative(terms: List[int]) -> None:
    """
    Reorder terms in place so that no prefix sum is negative.

    Whenever term i would take the running sum below zero, the nearest
    following term that keeps it non-negative is swapped into position i.
    The scan is cyclic but a wrapped-around target (j <= i) would break
    an already accepted prefix, so reaching one is an error. With a
    non-negative total a later target always exists.
    """
    n = len(terms)
    running = 0
    for i in range(n):
        if running + terms[i] < 0:
            j = (i + 1) % n
            for _ in range(n - 1):
                if running + terms[j] >= 0:
                    break
                j = (j + 1) % n
            if j <= i or running + terms[j] < 0:
                raise GenerationError(
                    f"no term keeps the running sum {running} non-negative at position {i}"
                )
            logger.debug(f"Swapping term {i} ({terms[i]}) with term {j} ({terms[j]})")
            terms[i], terms[j] = terms[j], terms[i]
        running += terms[i]
