"""
Module: drill

Purpose:
    Build a drill: a reproducible batch of problems generated from one
    config and one seed, optionally rendered to a PDF worksheet.
    Validate → Generate → Render

Key Functions:
    - build_drill(): Main entry point for building a drill

Key Classes:
    - DrillConfig: Drill configuration
    - DrillResult: Complete drill result

Dependencies:
    - yomiage.problem: Problem generation
    - yomiage.output: PDF rendering

Used By:
    - yomiage.cli: Command line
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .config import GenerationConfig, validate_config
from .problem import Problem

logger = logging.getLogger(__name__)

WORKSHEET_FILENAME = "drill.pdf"
MAX_SEED = 99999


@dataclass(frozen=True)
class DrillConfig:
    """
    Configuration for building a drill (immutable).

    Attributes:
        generation: Config every problem is generated from
        count: Number of problems
        seed: Seed for reproducibility (random if None)
        output_dir: Directory for the worksheet PDF (no PDF if None)
        worksheet_name: File name of the worksheet PDF
        include_answer_key: Whether the worksheet ends with answers
        title: Worksheet heading

    Example:
        >>> config = DrillConfig(
        ...     generation=GenerationConfig(min_digit=2, max_digit=3, length=5),
        ...     count=20,
        ...     seed=7,
        ... )
    """

    generation: GenerationConfig
    count: int = 10
    seed: Optional[int] = None
    output_dir: Optional[Path] = None
    worksheet_name: str = WORKSHEET_FILENAME
    include_answer_key: bool = True
    title: str = "Mental Calculation Drill"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.worksheet_name.lower().endswith(".pdf"):
            raise ValueError(f"worksheet_name must end with .pdf: {self.worksheet_name!r}")
        if self.count < 1:
            raise ValueError(f"count must be positive: {self.count}")


@dataclass(frozen=True)
class DrillResult:
    """
    Complete drill result (immutable).

    Attributes:
        problems: Generated problems in order
        seed: Seed that reproduces this drill
        worksheet_pdf: Path to the worksheet PDF (if rendered)
    """

    problems: Tuple[Problem, ...]
    seed: int
    worksheet_pdf: Optional[Path] = None

    @property
    def answers(self) -> Tuple[int, ...]:
        return tuple(problem.answer for problem in self.problems)


def build_drill(config: DrillConfig) -> DrillResult:
    """
    Build a drill from start to finish.

    Every problem draws from its own random stream, seeded from a master
    stream, so the same seed always reproduces the same drill.

    Args:
        config: Drill configuration

    Returns:
        DrillResult with problems and worksheet path

    Raises:
        ConfigurationError: If the generation config is invalid
    """
    validate_config(config.generation)

    seed = config.seed if config.seed is not None else random.randint(1, MAX_SEED)
    start_time = time.perf_counter()
    logger.info(f"Building drill of {config.count} problems (seed {seed})")

    master = random.Random(seed)
    problems = tuple(
        Problem.from_config(config.generation, rng=random.Random(master.getrandbits(64)))
        for _ in range(config.count)
    )

    worksheet_pdf = None
    if config.output_dir is not None:
        from .output import render_worksheet

        worksheet_pdf = Path(config.output_dir) / config.worksheet_name
        render_worksheet(
            problems,
            worksheet_pdf,
            title=config.title,
            include_answer_key=config.include_answer_key,
        )

    elapsed = time.perf_counter() - start_time
    logger.info(f"Drill built in {elapsed:.3f}s")
    return DrillResult(problems=problems, seed=seed, worksheet_pdf=worksheet_pdf)
