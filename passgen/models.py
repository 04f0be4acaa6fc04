"""
Result types returned by the generators and the strength estimator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from .config import CharacterClassKind


@dataclass(frozen=True)
class GeneratedSecret:
    value: str

    # Characters of `value` that belong to each enabled class.
    composition: Mapping[CharacterClassKind, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "composition", MappingProxyType(dict(self.composition)))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class InvalidConfiguration:
    """
    Returned instead of a secret when the constraints cannot be satisfied.
    """

    reason: str

    def __str__(self) -> str:
        return f"invalid configuration: {self.reason}"


GenerationResult = Union[GeneratedSecret, InvalidConfiguration]


class StrengthLevel(str, Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


@dataclass(frozen=True)
class StrengthAssessment:
    entropy_bits: float
    charset_size: int | None
    crack_time_seconds: float
    crack_time_label: str
    score: int
    level: StrengthLevel
    feedback: tuple[str, ...] = ()


@dataclass(frozen=True)
class TargetLengthSearch:
    """
    Outcome of a character-length passphrase search.
    """

    value: str
    difference: int | None
    attempts: int

    # Best difference seen after each attempt; None until a word was placed.
    history: tuple[int | None, ...] = ()

    @property
    def reached(self) -> bool:
        return bool(self.value)
