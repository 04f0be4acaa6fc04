"""
Password and passphrase generator with strength estimation.
"""

from loguru import logger

from .config import (
    CharacterClassKind,
    CharacterClassSpec,
    GenerationConstraints,
    LengthMode,
    PassphraseConstraints,
    QuantumSourceConfig,
    DEFAULT_CONFIG,
    DEFAULT_PASSPHRASE_CONFIG,
    default_classes,
)
from .models import (
    GeneratedSecret,
    InvalidConfiguration,
    StrengthAssessment,
    StrengthLevel,
    TargetLengthSearch,
)
from .randomness import RandomSource, SeededRandomSource, SystemRandomSource
from .characters import generate
from .passphrase import (
    generate_by_target_length,
    generate_by_word_count,
    generate_passphrase,
    search_target_length,
)
from .strength import assess
from .wordlist import WORD_LIST
from .cli import generate_password, generate_password_with_meta

# Library code stays quiet unless the application opts in.
logger.disable("passgen")

__all__ = [
    "CharacterClassKind",
    "CharacterClassSpec",
    "GenerationConstraints",
    "LengthMode",
    "PassphraseConstraints",
    "QuantumSourceConfig",
    "DEFAULT_CONFIG",
    "DEFAULT_PASSPHRASE_CONFIG",
    "default_classes",
    "GeneratedSecret",
    "InvalidConfiguration",
    "StrengthAssessment",
    "StrengthLevel",
    "TargetLengthSearch",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "generate",
    "generate_by_target_length",
    "generate_by_word_count",
    "generate_passphrase",
    "search_target_length",
    "assess",
    "WORD_LIST",
    "generate_password",
    "generate_password_with_meta",
]
