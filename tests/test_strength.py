"""Tests for strength estimation."""

import math

import pytest

from passgen.models import StrengthLevel
from passgen.strength import (
    ALL_CHECKS_PASSED,
    DAY,
    FEEDBACK,
    HOUR,
    YEAR,
    assess,
    charset_size,
    crack_time_label,
    level_for,
)


def test_empty_secret_is_zeroed():
    report = assess("")

    assert report.score == 0
    assert report.entropy_bits == 0
    assert report.level is StrengthLevel.VERY_WEAK
    assert report.charset_size is None
    assert report.crack_time_label == "Instant"


def test_repeated_lowercase_is_weak():
    report = assess("aaaaaaaaaaaa")

    assert report.score == 35
    assert report.level in (StrengthLevel.VERY_WEAK, StrengthLevel.WEAK)
    assert report.charset_size == 26
    assert report.feedback == (
        FEEDBACK["uppercase"],
        FEEDBACK["digit"],
        FEEDBACK["symbol"],
        FEEDBACK["variety"],
        FEEDBACK["repetition"],
    )


def test_strong_password_gets_full_marks():
    report = assess("Abcdefgh1!jk")

    assert report.score == 100
    assert report.level is StrengthLevel.VERY_STRONG
    assert report.charset_size == 26 + 26 + 10 + 32
    assert report.feedback == (ALL_CHECKS_PASSED,)
    assert report.entropy_bits == pytest.approx(12 * math.log2(94))


def test_short_mixed_password_feedback_order():
    report = assess("abc123")

    assert report.score == 40
    assert report.level is StrengthLevel.MODERATE
    assert report.feedback == (
        FEEDBACK["length"],
        FEEDBACK["uppercase"],
        FEEDBACK["symbol"],
        FEEDBACK["variety"],
    )


def test_medium_length_gets_partial_length_points():
    # 8 chars, lower + digit, no repeats: 10 + 30 + 10
    assert assess("abcd1234").score == 50


def test_symbol_charset_floor_and_overflow():
    assert charset_size("!") == 32
    many = "".join(chr(c) for c in range(0x2200, 0x2200 + 40))
    assert charset_size(many) == 40
    assert charset_size("aZ9") == 62


def test_crack_time_matches_keyspace():
    report = assess("ab")
    assert report.crack_time_seconds == pytest.approx(26 ** 2 / 2 / 1e9)
    assert report.crack_time_label == "Instant"


def test_entropy_grows_with_length():
    reports = [assess("aB1!" * k) for k in range(1, 6)]
    bits = [r.entropy_bits for r in reports]
    assert bits == sorted(bits)
    assert len(set(bits)) == len(bits)


def test_very_long_secret_does_not_overflow():
    report = assess("a" * 1000)
    assert math.isinf(report.crack_time_seconds)
    assert report.crack_time_label.startswith("Longer than")


@pytest.mark.parametrize(
    "seconds, label",
    [
        (0.5, "Instant"),
        (30, "30 seconds"),
        (125, "2 minutes"),
        (2 * HOUR, "2 hours"),
        (3 * DAY, "3 days"),
        (5 * YEAR, "5 years"),
        (2e3 * YEAR, "2 thousand years"),
        (5e6 * YEAR, "5 million years"),
        (7e9 * YEAR, "7 billion years"),
        (3e12 * YEAR, "3 trillion years"),
    ],
)
def test_crack_time_label_buckets(seconds, label):
    assert crack_time_label(seconds) == label


@pytest.mark.parametrize(
    "score, level",
    [
        (0, StrengthLevel.VERY_WEAK),
        (19, StrengthLevel.VERY_WEAK),
        (20, StrengthLevel.WEAK),
        (40, StrengthLevel.MODERATE),
        (60, StrengthLevel.STRONG),
        (79, StrengthLevel.STRONG),
        (80, StrengthLevel.VERY_STRONG),
        (100, StrengthLevel.VERY_STRONG),
    ],
)
def test_level_thresholds(score, level):
    assert level_for(score) is level
