"""
Module: generation.digits

Purpose:
    Decide how many digits each term gets and build the magnitudes.

Key Functions:
    - make_digit_pattern(): Round-robin digit-length per term
    - shuffle_digit_set(): One shuffled group of the digits 0-9
    - make_number(): A magnitude with an exact digit-length

Dependencies:
    - random (std)
"""

from __future__ import annotations

import random
from typing import List

from yomiage.config import GenerationConfig


def make_digit_pattern(config: GenerationConfig, rng: random.Random) -> List[int]:
    """
    Assign a digit-length to every term.

    The digit-lengths min_digit..max_digit are shuffled, then max_digit is
    swapped to the front and min_digit to the second slot, so that both
    extremes appear even when length is shorter than the range. Terms take
    lengths from that list round-robin.

    Args:
        config: Validated generation config
        rng: Random source

    Returns:
        List of config.length digit-lengths
    """
    digit_list = list(config.digit_range)
    rng.shuffle(digit_list)

    idx = digit_list.index(config.max_digit)
    digit_list[0], digit_list[idx] = digit_list[idx], digit_list[0]
    if len(digit_list) > 1:
        idx = digit_list.index(config.min_digit)
        digit_list[1], digit_list[idx] = digit_list[idx], digit_list[1]

    return [digit_list[i % len(digit_list)] for i in range(config.length)]


def shuffle_digit_set(forbidden_start: int, rng: random.Random) -> str:
    """
    Shuffle the digits 0-9 into a string that does not start with forbidden_start.

    If the shuffle puts forbidden_start first, it is swapped with a
    random later position.
    """
    digits = list(range(10))
    rng.shuffle(digits)

    if digits[0] == forbidden_start:
        target = rng.randint(1, 9)
        digits[0], digits[target] = digits[target], digits[0]

    return "".join(str(d) for d in digits)


def make_number(digit: int, rng: random.Random) -> int:
    """
    Build a magnitude with exactly ``digit`` decimal digits.

    Digits come from shuffled 0-9 groups. The first group never starts
    with 0; each following group never starts with the digit that ended
    the previous one.

    Args:
        digit: Target digit-length (>= 1)
        rng: Random source

    Returns:
        Positive integer in [10**(digit-1), 10**digit - 1]
    """
    number_str = shuffle_digit_set(0, rng)
    for _ in range((digit - 1) // 10):
        last = int(number_str[-1])
        number_str += shuffle_digit_set(last, rng)

    return int(number_str[:digit])
