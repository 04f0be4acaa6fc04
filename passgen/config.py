"""
Configuration for the password / passphrase generator.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum


UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
DEFAULT_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Separators longer than this are cut down, same as the input field did.
MAX_SEPARATOR_LENGTH = 3


class CharacterClassKind(str, Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"
    CUSTOM_SYMBOLS = "custom_symbols"


class LengthMode(str, Enum):
    WORD_COUNT = "word-count"
    CHARACTER_LENGTH = "character-length"


def dedupe(chars: str) -> str:
    """
    Drop repeated characters, keeping the first occurrence of each.
    """
    return "".join(dict.fromkeys(chars))


@dataclass(frozen=True)
class CharacterClassSpec:
    kind: CharacterClassKind
    alphabet: str
    min_count: int = 0
    enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet", dedupe(self.alphabet))

    @property
    def usable(self) -> bool:
        # An enabled class with nothing to draw from takes no part in generation.
        return self.enabled and bool(self.alphabet)


def default_classes(
    min_count: int = 1,
    custom_symbols: str = "",
) -> tuple[CharacterClassSpec, ...]:
    """
    The standard class layout: upper, lower, digits, default symbols and
    an optional custom-symbol class that is enabled only when symbols are given.
    """
    return (
        CharacterClassSpec(CharacterClassKind.UPPERCASE, UPPERCASE, min_count),
        CharacterClassSpec(CharacterClassKind.LOWERCASE, LOWERCASE, min_count),
        CharacterClassSpec(CharacterClassKind.DIGITS, DIGITS, min_count),
        CharacterClassSpec(CharacterClassKind.SYMBOLS, DEFAULT_SYMBOLS, min_count),
        CharacterClassSpec(
            CharacterClassKind.CUSTOM_SYMBOLS,
            custom_symbols,
            min_count if custom_symbols else 0,
            enabled=bool(custom_symbols),
        ),
    )


@dataclass(frozen=True)
class GenerationConstraints:
    # Desired password length in characters.
    total_length: int = 12

    # Ordered class specs. Order decides the draw order of the minimums.
    classes: tuple[CharacterClassSpec, ...] = field(default_factory=default_classes)

    def enabled_classes(self) -> list[CharacterClassSpec]:
        return [spec for spec in self.classes if spec.usable]

    def required_count(self) -> int:
        return sum(spec.min_count for spec in self.enabled_classes())


@dataclass(frozen=True)
class PassphraseConstraints:
    length_mode: LengthMode = LengthMode.WORD_COUNT

    # Used only in WORD_COUNT mode.
    word_count: int = 4

    # Used only in CHARACTER_LENGTH mode.
    target_length: int = 20

    separator: str = "-"
    capitalize: bool = False
    include_numbers: bool = False

    # Upper bound on inserted digit tokens, see passphrase.insert_numbers.
    min_number_count: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "separator", self.separator[:MAX_SEPARATOR_LENGTH])

    @property
    def number_reservation(self) -> int:
        """
        Characters held back for digit tokens while words are being chosen.
        """
        if not self.include_numbers:
            return 0
        return max(0, self.min_number_count) * (len(self.separator) + 1)


@dataclass
class QuantumSourceConfig:
    # Number of qubits to prepare in superposition.
    # Each qubit gives one raw bit per run.
    # NOTE: Keep this <= backend limit (often 20–29 for local simulators).
    num_qubits: int = 20

    # How many rounds of SHA-256 mixing to apply to each batch of bits.
    entropy_rounds: int = 2

    # Independent circuit runs XOR-combined into one batch.
    quantum_streams: int = 2


# Default configuration instances you can import elsewhere
DEFAULT_CONFIG = GenerationConstraints()
DEFAULT_PASSPHRASE_CONFIG = PassphraseConstraints()
DEFAULT_QUANTUM_CONFIG = QuantumSourceConfig()
