"""
Module: config

Purpose:
    Generation parameters for a single drill problem and the validator
    that rejects inconsistent parameter combinations before any
    generation work starts.

Key Classes:
    - GenerationConfig: Immutable generation parameters
    - ConfigurationError: Raised for invalid parameters

Key Functions:
    - validate_config(): Check a config for internal consistency

Dependencies:
    - dataclasses (std)

Used By:
    - yomiage.generation: Problem generator
    - yomiage.problem: Problem facade
    - yomiage.drill: Drill builder
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional


class ConfigurationError(ValueError):
    """Raised when generation parameters are invalid."""

    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.field = field


_INT_FIELDS = ("min_digit", "max_digit", "length", "subtractions")


@dataclass(frozen=True)
class GenerationConfig:
    """
    Parameters for generating one drill problem (immutable).

    Construction only checks field types. Whether the values make sense
    together is decided by validate_config(), so an inconsistent config
    can still be built, inspected and rejected with a reason.

    Attributes:
        min_digit: Smallest digit-length of a term (inclusive)
        max_digit: Largest digit-length of a term (inclusive)
        length: Number of terms in the problem
        subtractions: Exact number of negative terms
        allow_negative: Whether running sums and the answer may go negative

    Invariants (after validation):
        - 1 <= min_digit <= max_digit
        - length >= 1
        - subtractions < length
        - subtractions <= length // 2 unless allow_negative

    Example:
        >>> config = GenerationConfig(min_digit=3, max_digit=6, length=10, subtractions=3)
        >>> validate_config(config)
    """

    min_digit: int
    max_digit: int
    length: int
    subtractions: int = 0
    allow_negative: bool = False

    def __post_init__(self) -> None:
        """Check field types on construction."""
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{name} must be an integer: {value!r}", field=name
                )
            if value < 0:
                raise ConfigurationError(
                    f"{name} must be non-negative: {value}", field=name
                )
        if not isinstance(self.allow_negative, bool):
            raise ConfigurationError(
                f"allow_negative must be a bool: {self.allow_negative!r}",
                field="allow_negative",
            )

    @property
    def is_valid(self) -> bool:
        """True when validate_config() accepts this config."""
        try:
            validate_config(self)
        except ConfigurationError:
            return False
        return True

    @property
    def digit_range(self) -> range:
        """Digit-lengths a term may have."""
        return range(self.min_digit, self.max_digit + 1)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenerationConfig":
        """
        Deserialize from a dictionary.

        Raises:
            ConfigurationError: If a required key is missing or a value
                has the wrong type
        """
        missing = [name for name in ("min_digit", "max_digit", "length") if name not in data]
        if missing:
            raise ConfigurationError(f"Missing required fields: {missing}", field=missing[0])
        return cls(
            min_digit=data["min_digit"],
            max_digit=data["max_digit"],
            length=data["length"],
            subtractions=data.get("subtractions", 0),
            allow_negative=data.get("allow_negative", False),
        )


def validate_config(config: GenerationConfig) -> None:
    """
    Check a config for internal consistency.

    Checks run in a fixed order and the first failure wins.

    Args:
        config: Config to check

    Raises:
        ConfigurationError: With the reason of the first failed check
    """
    if config.min_digit < 1:
        raise ConfigurationError(
            "minimum digit-length must be at least 1", field="min_digit"
        )
    if config.max_digit < config.min_digit:
        raise ConfigurationError(
            "maximum digit-length must not be less than minimum", field="max_digit"
        )
    if config.length < 1:
        raise ConfigurationError("length must be at least 1", field="length")
    if not config.allow_negative and config.subtractions > config.length // 2:
        raise ConfigurationError(
            "too many subtractions for a non-negative-answer problem",
            field="subtractions",
        )
    if config.subtractions >= config.length:
        raise ConfigurationError(
            "subtraction count must be less than total term count",
            field="subtractions",
        )
