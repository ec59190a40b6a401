"""
Relative letter frequencies of a text.

Only the ASCII letters A-Z/a-z are counted. Other alphabets, digits,
punctuation and ideographic characters are excluded from both the counts
and the denominator.
"""

from collections import Counter

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def is_alphabetic(char: str) -> bool:
    """Return True if char is A-Z or a-z."""
    return "A" <= char <= "Z" or "a" <= char <= "z"


def alphabetic_characters(text: str) -> str:
    """Return only the characters of text within the range A-Z or a-z."""
    return "".join(char for char in text if is_alphabetic(char))


def compute_profile(text: str) -> dict[str, float]:
    """
    Compute the relative frequency (in percent) of each letter a-z.

    Case-insensitive. A text without any ASCII letters yields a profile of
    all zeros instead of dividing by zero.

    Args:
        text: Text to analyze.

    Returns:
        Mapping of all 26 lowercase letters to a percentage.
    """
    counts = Counter(alphabetic_characters(text.lower()))
    total = sum(counts.values())

    if total == 0:
        return {letter: 0.0 for letter in ALPHABET}

    return {letter: counts[letter] * 100 / total for letter in ALPHABET}
