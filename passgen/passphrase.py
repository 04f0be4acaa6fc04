"""
Passphrase generation from the built-in word list.

Two modes:

- word count: a fixed number of words.
- character length: a bounded random search for a passphrase whose length
  lands as close as possible to a target.

Digit tokens are inserted between words, left to right, up to
`min_number_count` of them.
"""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from .config import LengthMode, PassphraseConstraints, DEFAULT_PASSPHRASE_CONFIG
from .models import TargetLengthSearch
from .randomness import RandomSource, default_source
from .wordlist import WORD_LIST

MAX_ATTEMPTS = 100

# A difference this small ends the search early.
CLOSE_ENOUGH = 1

MAX_NUMBER_TOKENS = 5


def capitalize_word(word: str) -> str:
    return word[:1].upper() + word[1:]


def random_digit(rng: RandomSource) -> str:
    return str(rng.randbelow(10))


def insert_numbers(
    words: list[str],
    cfg: PassphraseConstraints,
    rng: RandomSource,
    budget: int | None = None,
) -> list[str]:
    """
    Put single digits between consecutive words, left to right.

    Stops after `min_number_count` digits or when the boundaries run out.
    With a `budget` (characters still free), a digit is only placed while
    it fits together with its separator.
    """
    tokens: list[str] = []
    added = 0
    token_cost = len(cfg.separator) + 1

    for i, word in enumerate(words):
        tokens.append(word)
        if i == len(words) - 1 or added >= cfg.min_number_count:
            continue
        if budget is not None:
            if budget < token_cost:
                continue
            budget -= token_cost
        tokens.append(random_digit(rng))
        added += 1

    return tokens


def generate_by_word_count(
    constraints: PassphraseConstraints | None = None,
    rng: RandomSource | None = None,
    words: Sequence[str] = WORD_LIST,
) -> str:
    cfg = constraints or DEFAULT_PASSPHRASE_CONFIG
    rng = rng or default_source()

    picks = [rng.choice(words) for _ in range(max(0, cfg.word_count))]
    if cfg.capitalize:
        picks = [capitalize_word(w) for w in picks]
    if cfg.include_numbers:
        picks = insert_numbers(picks, cfg, rng)

    return cfg.separator.join(picks)


def _build_attempt(
    cfg: PassphraseConstraints,
    rng: RandomSource,
    candidates: Sequence[str],
) -> str | None:
    """
    Greedily grow one word sequence under the target length.
    Returns None when not a single word fits.
    """
    reserve = cfg.number_reservation
    sep_len = len(cfg.separator)
    selected: list[str] = []
    current = 0

    while current < cfg.target_length:
        gap = sep_len if selected else 0
        fitting = [
            w for w in candidates
            if current + gap + len(w) + reserve <= cfg.target_length
        ]
        if not fitting:
            break

        word = rng.choice(fitting)
        selected.append(word)
        current += gap + len(word)

    if not selected:
        return None

    if cfg.include_numbers and len(selected) > 1:
        selected = insert_numbers(selected, cfg, rng, budget=cfg.target_length - current)

    return cfg.separator.join(selected)


def search_target_length(
    constraints: PassphraseConstraints | None = None,
    rng: RandomSource | None = None,
    words: Sequence[str] = WORD_LIST,
) -> TargetLengthSearch:
    """
    Run up to MAX_ATTEMPTS independent attempts and keep the one whose
    length is closest to `target_length`.
    """
    cfg = constraints or DEFAULT_PASSPHRASE_CONFIG
    rng = rng or default_source()

    candidates = [capitalize_word(w) for w in words] if cfg.capitalize else list(words)

    best = ""
    best_diff: int | None = None
    history: list[int | None] = []
    attempts = 0

    for attempts in range(1, MAX_ATTEMPTS + 1):
        result = _build_attempt(cfg, rng, candidates)
        if result is not None:
            diff = abs(len(result) - cfg.target_length)
            if best_diff is None or diff < best_diff:
                best, best_diff = result, diff
        history.append(best_diff)

        if best_diff is not None and best_diff <= CLOSE_ENOUGH:
            break

    if best_diff is None:
        logger.warning(
            "no word fits a target length of {} (separator {!r}, {} numbers reserved)",
            cfg.target_length,
            cfg.separator,
            cfg.min_number_count if cfg.include_numbers else 0,
        )
    else:
        logger.debug(
            "target length {}: best difference {} after {} attempts",
            cfg.target_length,
            best_diff,
            attempts,
        )

    return TargetLengthSearch(
        value=best,
        difference=best_diff,
        attempts=attempts,
        history=tuple(history),
    )


def generate_by_target_length(
    constraints: PassphraseConstraints | None = None,
    rng: RandomSource | None = None,
    words: Sequence[str] = WORD_LIST,
) -> str:
    """
    Best-effort passphrase of roughly `target_length` characters.
    An empty string means the target could not be reached at all.
    """
    return search_target_length(constraints, rng, words).value


def generate_passphrase(
    constraints: PassphraseConstraints | None = None,
    rng: RandomSource | None = None,
    words: Sequence[str] = WORD_LIST,
) -> str:
    cfg = constraints or DEFAULT_PASSPHRASE_CONFIG
    if cfg.length_mode == LengthMode.CHARACTER_LENGTH:
        return generate_by_target_length(cfg, rng, words)
    return generate_by_word_count(cfg, rng, words)


def target_accuracy(passphrase: str, target_length: int) -> tuple[int, int]:
    """
    Return (difference, accuracy percent) of a passphrase against its target.
    Every character off costs ten points.
    """
    difference = abs(len(passphrase) - target_length)
    return difference, max(0, 100 - difference * 10)


def max_number_count(word_count: int) -> int:
    """
    Largest sensible `min_number_count` for a given word count.
    """
    return min(max(1, word_count - 1), MAX_NUMBER_TOKENS)
