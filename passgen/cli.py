"""
Command-line interface and high-level generator functions.
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

from loguru import logger

from .characters import generate
from .config import (
    CharacterClassKind,
    CharacterClassSpec,
    GenerationConstraints,
    LengthMode,
    PassphraseConstraints,
    QuantumSourceConfig,
    DEFAULT_CONFIG,
    default_classes,
)
from .models import GeneratedSecret, InvalidConfiguration, StrengthAssessment
from .passphrase import generate_passphrase
from .randomness import RandomSource, SeededRandomSource, default_source
from .strength import assess

EXIT_INVALID = 2


@dataclass
class GenerationMeta:
    """
    Full result of one password generation.
    """
    secret: GeneratedSecret
    assessment: StrengthAssessment
    config: GenerationConstraints


def generate_password_with_meta(
    config: GenerationConstraints | None = None,
    rng: RandomSource | None = None,
) -> GenerationMeta | InvalidConfiguration:
    """
    High-level pipeline:

    - Generate a password honouring the class minimums.
    - Score it.
    """
    cfg = config or DEFAULT_CONFIG
    result = generate(cfg, rng)
    if isinstance(result, InvalidConfiguration):
        return result

    return GenerationMeta(secret=result, assessment=assess(result.value), config=cfg)


def generate_password(
    config: GenerationConstraints | None = None,
    rng: RandomSource | None = None,
) -> str | InvalidConfiguration:
    meta = generate_password_with_meta(config, rng)
    if isinstance(meta, InvalidConfiguration):
        return meta
    return meta.secret.value


# ---------- argument parsing ----------

_CLASS_FLAGS = (
    (CharacterClassKind.UPPERCASE, "upper"),
    (CharacterClassKind.LOWERCASE, "lower"),
    (CharacterClassKind.DIGITS, "digits"),
    (CharacterClassKind.SYMBOLS, "symbols"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate passwords and passphrases and estimate their strength.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="log generation details")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seed", type=int, help="reproducible (insecure) random source")
    source.add_argument("--quantum", action="store_true", help="draw from a simulated quantum circuit")
    parser.add_argument("--qubits", type=int, default=QuantumSourceConfig.num_qubits)

    sub = parser.add_subparsers(dest="command", required=True)

    pw = sub.add_parser("password", help="character-based password")
    pw.add_argument("--length", type=int, default=DEFAULT_CONFIG.total_length)
    for _kind, name in _CLASS_FLAGS:
        pw.add_argument(f"--no-{name}", action="store_true", help=f"disable {name}")
        pw.add_argument(f"--min-{name}", type=int, default=1, metavar="N")
    pw.add_argument("--custom-symbols", default="", metavar="CHARS")
    pw.add_argument("--min-custom", type=int, default=1, metavar="N")
    pw.add_argument("--strength", action="store_true", help="print a strength report")

    pp = sub.add_parser("passphrase", help="dictionary-word passphrase")
    mode = pp.add_mutually_exclusive_group()
    mode.add_argument("--words", type=int, default=None, metavar="N")
    mode.add_argument("--target-length", type=int, default=None, metavar="N")
    pp.add_argument("--separator", default="-")
    pp.add_argument("--capitalize", action="store_true")
    pp.add_argument("--numbers", type=int, default=0, metavar="N",
                    help="insert up to N digits between words")
    pp.add_argument("--strength", action="store_true", help="print a strength report")

    ass = sub.add_parser("assess", help="score an existing secret")
    ass.add_argument("secret")

    return parser


def constraints_from_args(args: argparse.Namespace) -> GenerationConstraints:
    classes: list[CharacterClassSpec] = []
    for spec in default_classes(custom_symbols=args.custom_symbols):
        if spec.kind == CharacterClassKind.CUSTOM_SYMBOLS:
            classes.append(
                CharacterClassSpec(spec.kind, spec.alphabet, args.min_custom, spec.enabled)
            )
            continue
        name = dict(_CLASS_FLAGS)[spec.kind]
        classes.append(
            CharacterClassSpec(
                spec.kind,
                spec.alphabet,
                getattr(args, f"min_{name}"),
                enabled=not getattr(args, f"no_{name}"),
            )
        )
    return GenerationConstraints(total_length=args.length, classes=tuple(classes))


def passphrase_from_args(args: argparse.Namespace) -> PassphraseConstraints:
    if args.target_length is not None:
        return PassphraseConstraints(
            length_mode=LengthMode.CHARACTER_LENGTH,
            target_length=args.target_length,
            separator=args.separator,
            capitalize=args.capitalize,
            include_numbers=args.numbers > 0,
            min_number_count=args.numbers,
        )
    return PassphraseConstraints(
        length_mode=LengthMode.WORD_COUNT,
        word_count=args.words if args.words is not None else 4,
        separator=args.separator,
        capitalize=args.capitalize,
        include_numbers=args.numbers > 0,
        min_number_count=args.numbers,
    )


def random_source_from_args(args: argparse.Namespace) -> RandomSource:
    if args.seed is not None:
        return SeededRandomSource(args.seed)
    if args.quantum:
        from .quantum_engine import QuantumRandomSource

        return QuantumRandomSource(QuantumSourceConfig(num_qubits=args.qubits))
    return default_source()


def configure_logging(verbose: bool) -> None:
    logger.enable("passgen")
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def print_assessment(report: StrengthAssessment) -> None:
    print(f"Strength:   {report.level.value} ({report.score}/100)")
    print(f"Entropy:    {report.entropy_bits:.1f} bits")
    print(f"Crack time: {report.crack_time_label}")
    for line in report.feedback:
        print(f"  - {line}")


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for `passgen`, `python -m passgen.cli` or `run_passgen.py`.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "assess":
        print_assessment(assess(args.secret))
        return 0

    rng = random_source_from_args(args)

    if args.command == "password":
        meta = generate_password_with_meta(constraints_from_args(args), rng)
        if isinstance(meta, InvalidConfiguration):
            print(f"error: {meta}", file=sys.stderr)
            return EXIT_INVALID
        secret = meta.secret.value
        report = meta.assessment
    else:
        secret = generate_passphrase(passphrase_from_args(args), rng)
        if not secret:
            print("error: no passphrase fits the requested length", file=sys.stderr)
            return EXIT_INVALID
        report = assess(secret)

    print(secret)
    if args.strength:
        print_assessment(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
