"""
Module: problem

Purpose:
    Problem dataclass: a generated drill problem, its answer and the
    config it came from, with accessors for the announcer script.

Key Classes:
    - Problem: Immutable generated problem

Dependencies:
    - dataclasses (std)
    - functools (std)
    - yomiage.generation: generate()
    - yomiage.script: Script formatting

Used By:
    - yomiage.drill: Drill builder
    - yomiage.output.worksheet: PDF worksheet
    - yomiage.cli: Command line
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Optional, Tuple

from .config import GenerationConfig, validate_config
from .generation import generate
from .script import answer_script, meta_script, problem_script


@dataclass(frozen=True)
class Problem:
    """
    A generated drill problem (immutable).

    Attributes:
        terms: Signed terms in dictation order
        config: Config the problem was generated from

    Invariants:
        - len(terms) == config.length
        - answer == sum(terms), calculated and never stored separately

    Example:
        >>> problem = Problem.from_config(
        ...     GenerationConfig(min_digit=3, max_digit=6, length=10, subtractions=3),
        ...     seed=1,
        ... )
        >>> problem.answer == sum(problem.terms)
        True
    """

    terms: Tuple[int, ...]
    config: GenerationConfig

    def __post_init__(self) -> None:
        """Freeze terms and check them against the config."""
        object.__setattr__(self, "terms", tuple(self.terms))
        if len(self.terms) != self.config.length:
            raise ValueError(
                f"Problem has {len(self.terms)} terms, config expects {self.config.length}"
            )

    @classmethod
    def from_config(
        cls,
        config: GenerationConfig,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Problem":
        """
        Validate config, generate terms and wrap them.

        Args:
            config: Generation config
            seed: Seed for a dedicated random stream (ignored if rng given)
            rng: Random source to draw from

        Raises:
            ConfigurationError: If config fails validation; nothing is generated
        """
        validate_config(config)
        if rng is None:
            rng = random.Random(seed)
        return cls(terms=tuple(generate(config, rng)), config=config)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def answer(self) -> int:
        """Sum of all terms."""
        return sum(self.terms)

    @property
    def subtraction_count(self) -> int:
        """Number of negative terms."""
        return sum(1 for term in self.terms if term < 0)

    # ─────────────────────────────────────────────────────────────────────────
    # Script
    # ─────────────────────────────────────────────────────────────────────────

    def meta_script(self) -> str:
        """Opening announcement describing the config."""
        return meta_script(self.config)

    def problem_script(self) -> str:
        """Dictation of the terms in order."""
        return problem_script(self.terms)

    def answer_script(self) -> str:
        """Closing announcement of the answer."""
        return answer_script(self.answer)

    def full_script(self) -> str:
        """Meta, problem and answer announcements read back to back."""
        return self.meta_script() + self.problem_script() + self.answer_script()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a dictionary (answer included for convenience)."""
        return {
            "terms": list(self.terms),
            "answer": self.answer,
            "config": self.config.to_dict(),
        }
