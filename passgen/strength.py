"""
Strength estimation: entropy, brute-force crack time and a 0–100 score.

The charset size is a heuristic. Any symbol present counts as a full
keyboard's worth of symbols (at least 32), so entropy is overestimated for
small custom symbol sets.
"""

from __future__ import annotations

import math
import string

from .models import StrengthAssessment, StrengthLevel

GUESSES_PER_SECOND = 1e9
SYMBOL_CHARSET_FLOOR = 32

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY

# (upper bound in seconds, unit divisor, unit name), checked in order.
_TIME_BUCKETS: tuple[tuple[float, float, str], ...] = (
    (MINUTE, 1, "seconds"),
    (HOUR, MINUTE, "minutes"),
    (DAY, HOUR, "hours"),
    (YEAR, DAY, "days"),
    (1e3 * YEAR, YEAR, "years"),
    (1e6 * YEAR, 1e3 * YEAR, "thousand years"),
    (1e9 * YEAR, 1e6 * YEAR, "million years"),
    (1e12 * YEAR, 1e9 * YEAR, "billion years"),
)

FEEDBACK = {
    "length": "Use at least 12 characters",
    "uppercase": "Add uppercase letters",
    "lowercase": "Add lowercase letters",
    "digit": "Add numbers",
    "symbol": "Add symbols",
    "variety": "Mix at least three character types",
    "repetition": "Avoid repeated characters",
}
ALL_CHECKS_PASSED = "Strong password! All checks passed."
EMPTY_FEEDBACK = "Nothing to assess yet"


def _is_symbol(ch: str) -> bool:
    return ch not in string.ascii_letters and ch not in string.digits


def charset_size(secret: str) -> int:
    size = 0
    if any(ch in string.ascii_lowercase for ch in secret):
        size += 26
    if any(ch in string.ascii_uppercase for ch in secret):
        size += 26
    if any(ch in string.digits for ch in secret):
        size += 10

    symbols = {ch for ch in secret if _is_symbol(ch)}
    if symbols:
        size += max(len(symbols), SYMBOL_CHARSET_FLOOR)
    return size


def crack_time_label(seconds: float) -> str:
    if seconds < 1:
        return "Instant"
    if math.isinf(seconds):
        return "Longer than a trillion trillion years"

    for limit, unit, name in _TIME_BUCKETS:
        if seconds < limit:
            return f"{math.floor(seconds / unit)} {name}"
    return f"{math.floor(seconds / (1e12 * YEAR))} trillion years"


def _crack_seconds(entropy_bits: float) -> float:
    # charset ** length / 2 / rate, in log space so long secrets do not overflow.
    try:
        return 2.0 ** (entropy_bits - 1) / GUESSES_PER_SECOND
    except OverflowError:
        return math.inf


def level_for(score: int) -> StrengthLevel:
    if score >= 80:
        return StrengthLevel.VERY_STRONG
    if score >= 60:
        return StrengthLevel.STRONG
    if score >= 40:
        return StrengthLevel.MODERATE
    if score >= 20:
        return StrengthLevel.WEAK
    return StrengthLevel.VERY_WEAK


def assess(secret: str) -> StrengthAssessment:
    """
    Score a secret. Pure function of the string, no randomness involved.
    """
    if not secret:
        return StrengthAssessment(
            entropy_bits=0.0,
            charset_size=None,
            crack_time_seconds=0.0,
            crack_time_label="Instant",
            score=0,
            level=StrengthLevel.VERY_WEAK,
            feedback=(EMPTY_FEEDBACK,),
        )

    length = len(secret)
    size = charset_size(secret)
    entropy_bits = length * math.log2(size)
    seconds = _crack_seconds(entropy_bits)

    has = {
        "uppercase": any(ch in string.ascii_uppercase for ch in secret),
        "lowercase": any(ch in string.ascii_lowercase for ch in secret),
        "digit": any(ch in string.digits for ch in secret),
        "symbol": any(_is_symbol(ch) for ch in secret),
    }
    kinds = sum(has.values())

    checks = {"length": length >= 12}
    checks.update(has)
    checks["variety"] = kinds >= 3
    checks["repetition"] = len(set(secret)) / length > 0.6

    score = 0
    if length >= 12:
        score += 20
    elif length >= 8:
        score += 10
    score += 15 * kinds
    if checks["variety"]:
        score += 10
    if checks["repetition"]:
        score += 10
    score = min(score, 100)

    feedback = tuple(FEEDBACK[name] for name, passed in checks.items() if not passed)

    return StrengthAssessment(
        entropy_bits=entropy_bits,
        charset_size=size,
        crack_time_seconds=seconds,
        crack_time_label=crack_time_label(seconds),
        score=score,
        level=level_for(score),
        feedback=feedback or (ALL_CHECKS_PASSED,),
    )
