"""
Character-mode generation: fixed-length passwords with per-class minimums.
"""

from __future__ import annotations

from loguru import logger

from .config import CharacterClassKind, GenerationConstraints, DEFAULT_CONFIG
from .models import GeneratedSecret, GenerationResult, InvalidConfiguration
from .randomness import RandomSource, default_source


def _check(cfg: GenerationConstraints) -> InvalidConfiguration | None:
    if cfg.total_length < 1:
        return InvalidConfiguration("length must be at least 1")

    if any(spec.min_count < 0 for spec in cfg.classes):
        return InvalidConfiguration("minimum counts must not be negative")

    if not cfg.enabled_classes():
        return InvalidConfiguration("no character classes enabled")

    if cfg.required_count() > cfg.total_length:
        return InvalidConfiguration("minimum counts exceed length")

    return None


def tally(value: str, cfg: GenerationConstraints) -> dict[CharacterClassKind, int]:
    """
    Count, for every enabled class, the characters of `value` drawn from its
    alphabet. A character shared by two alphabets counts towards both.
    """
    return {
        spec.kind: sum(1 for ch in value if ch in spec.alphabet)
        for spec in cfg.enabled_classes()
    }


def generate(
    constraints: GenerationConstraints | None = None,
    rng: RandomSource | None = None,
) -> GenerationResult:
    """
    Generate one password meeting the per-class minimum counts.

    - Pre-place `min_count` characters from each enabled class.
    - Fill the rest from the union of enabled alphabets.
    - Fisher–Yates shuffle so required characters are not clustered up front.

    Unsatisfiable constraints come back as InvalidConfiguration.
    """
    cfg = constraints or DEFAULT_CONFIG
    rng = rng or default_source()

    problem = _check(cfg)
    if problem is not None:
        logger.debug("rejected character constraints: {}", problem.reason)
        return problem

    enabled = cfg.enabled_classes()
    chars: list[str] = []

    for spec in enabled:
        for _ in range(spec.min_count):
            chars.append(rng.choice(spec.alphabet))

    # Bigger alphabets win proportionally more of the free slots.
    pool = "".join(spec.alphabet for spec in enabled)
    for _ in range(cfg.total_length - len(chars)):
        chars.append(rng.choice(pool))

    rng.shuffle(chars)

    value = "".join(chars)
    composition = tally(value, cfg)
    logger.debug(
        "generated {}-character password from {} classes",
        len(value),
        len(enabled),
    )
    return GeneratedSecret(value=value, composition=composition)
