"""
Module: script

Purpose:
    Announcer script for a drill problem. The announcer reads the
    problem aloud in the traditional Japanese yomiage-zan phrasing:
    a meta line, the terms with add/subtract markers, then the answer.

Key Functions:
    - meta_script(): Digit range, term count and operation kind
    - problem_script(): Term-by-term dictation
    - answer_script(): Signed answer announcement

Dependencies:
    - yomiage.config: GenerationConfig
"""

from __future__ import annotations

from typing import Sequence

from yomiage.config import GenerationConfig

# Phrases
UNIT = "円"
OPENING = "ねがいましては。"
KIND_ADDITION = "加算"
KIND_MIXED = "加減算"
MARK_ADD = "加えて"
MARK_SUBTRACT = "引いては"
TERM_CONTINUE = "なり、"
TERM_FINAL = "では。"
MINUS = "マイナス"


def meta_script(config: GenerationConfig) -> str:
    """Announce digit range, term count and operation kind."""
    kind = KIND_ADDITION if config.subtractions == 0 else KIND_MIXED
    return (
        f"{config.min_digit}桁から{config.max_digit}桁、"
        f"{config.length}口、{kind}です。{OPENING}"
    )


def problem_script(terms: Sequence[int]) -> str:
    """
    Dictate the terms in order.

    A marker is read whenever the sign changes from the previous term;
    the first term is preceded by an implicit addition. Every term
    carries the unit word and ends with a continuation phrase, except
    the last one, which closes the problem.

    Example:
        >>> problem_script([382, -154, 38])
        '382円なり、引いては154円なり、加えて38円では。'
    """
    parts = []
    prev_subtract = False
    last = len(terms) - 1

    for i, term in enumerate(terms):
        subtract = term < 0
        if subtract != prev_subtract:
            parts.append(MARK_SUBTRACT if subtract else MARK_ADD)
        parts.append(f"{abs(term)}{UNIT}")
        parts.append(TERM_FINAL if i == last else TERM_CONTINUE)
        prev_subtract = subtract

    return "".join(parts)


def answer_script(answer: int) -> str:
    """Announce the answer, reading negatives with a minus prefix."""
    sign = MINUS if answer < 0 else ""
    return f"その答え、{sign}{abs(answer)}{UNIT}です。"
