import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import yomiage
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from yomiage.config import GenerationConfig  # noqa: E402


# Common test fixtures
@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random source."""
    return random.Random(12345)


@pytest.fixture
def mixed_config() -> GenerationConfig:
    """3-6 digit, 10 term problem with 3 subtractions and a non-negative answer."""
    return GenerationConfig(
        min_digit=3,
        max_digit=6,
        length=10,
        subtractions=3,
        allow_negative=False,
    )


def digit_length(term: int) -> int:
    """Number of decimal digits in abs(term)."""
    return len(str(abs(term)))


def prefix_sums(terms) -> list[int]:
    """Running totals from the first term up to each position."""
    sums = []
    total = 0
    for term in terms:
        total += term
        sums.append(total)
    return sums
