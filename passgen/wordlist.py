"""
Built-in dictionary for passphrase generation.
"""

WORD_LIST: tuple[str, ...] = (
    "apple", "banana", "cherry", "dragon", "elephant", "falcon", "guitar", "harbor",
    "island", "jungle", "kitten", "lemon", "mountain", "ocean", "piano", "quartz",
    "rainbow", "sunset", "tiger", "umbrella", "valley", "wizard", "yellow", "zebra",
    "bridge", "castle", "flower", "garden", "happy", "magic", "nature", "purple",
    "river", "silver", "thunder", "winter", "bright", "cloud", "dream", "forest",
    "golden", "honest", "journey", "kindness", "light", "moon", "noble", "peace",
    "quiet", "royal", "star", "truth", "unique", "voice", "wisdom", "youth",
)
