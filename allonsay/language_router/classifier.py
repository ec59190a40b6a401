"""
Letter-frequency language classification.

Compares the letter frequency profile of a text against fixed reference
profiles and picks the closest language. This is only reliable for texts
with a reasonable number of letters (tens of characters or more); short
fragments give effectively arbitrary results.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

import numpy as np

from .frequency import ALPHABET, compute_profile

_LOGGER = logging.getLogger(__name__)


class Language(str, Enum):
    """Languages with a reference profile."""

    ENGLISH = "en"
    DUTCH = "nl"


@dataclass(frozen=True)
class ReferenceProfile:
    """
    Published letter frequencies (in percent) for one language.

    Attributes:
        language: Language the profile describes.
        frequencies: Read-only mapping of the 26 letters a-z to a percentage.
    """

    language: Language
    frequencies: Mapping[str, float]

    def __post_init__(self):
        missing = set(ALPHABET) - set(self.frequencies)
        if missing:
            raise ValueError(
                f"Reference profile for {self.language.name} is missing letters: "
                f"{''.join(sorted(missing))}"
            )
        object.__setattr__(self, "frequencies", MappingProxyType(dict(self.frequencies)))

    def as_array(self) -> np.ndarray:
        return _profile_to_array(self.frequencies)


# =============================================================================
# REFERENCE PROFILES
# =============================================================================

# Published letter frequencies (Wikipedia).

ENGLISH_PROFILE = ReferenceProfile(
    language=Language.ENGLISH,
    frequencies={
        "a": 8.167, "b": 1.492, "c": 2.782, "d": 4.253, "e": 12.702,
        "f": 2.228, "g": 2.015, "h": 6.094, "i": 6.966, "j": 0.153,
        "k": 0.772, "l": 4.025, "m": 2.406, "n": 6.749, "o": 7.507,
        "p": 1.929, "q": 0.095, "r": 5.987, "s": 6.327, "t": 9.056,
        "u": 2.758, "v": 0.978, "w": 2.360, "x": 0.150, "y": 1.974,
        "z": 0.074,
    },
)

DUTCH_PROFILE = ReferenceProfile(
    language=Language.DUTCH,
    frequencies={
        "a": 7.486, "b": 1.584, "c": 1.242, "d": 5.933, "e": 18.91,
        "f": 0.805, "g": 3.403, "h": 2.380, "i": 6.499, "j": 1.46,
        "k": 2.248, "l": 3.568, "m": 2.213, "n": 10.032, "o": 6.063,
        "p": 1.57, "q": 0.009, "r": 6.411, "s": 3.73, "t": 6.79,
        "u": 1.99, "v": 2.85, "w": 1.52, "x": 0.036, "y": 0.035,
        "z": 1.39,
    },
)

# Candidate order; the first entry is also the default language on ties.
REFERENCE_PROFILES: tuple[ReferenceProfile, ...] = (ENGLISH_PROFILE, DUTCH_PROFILE)


def _profile_to_array(profile: Mapping[str, float]) -> np.ndarray:
    return np.array([profile.get(letter, 0.0) for letter in ALPHABET], dtype=np.float64)


def distance(profile: Mapping[str, float], reference: ReferenceProfile) -> float:
    """
    Mean squared difference between a text profile and a reference profile.

    The squared differences are summed over all 26 letters and divided by 26.
    """
    diff = reference.as_array() - _profile_to_array(profile)
    return float(np.sum(diff**2) / len(ALPHABET))


class LanguageClassifier:
    """
    Picks the language whose reference profile is closest to a text.

    Reference profiles are injected at construction so tests can substitute
    synthetic tables.
    """

    def __init__(
        self,
        reference_profiles: Iterable[ReferenceProfile] = REFERENCE_PROFILES,
        default_language: Optional[Language] = Language.ENGLISH,
    ):
        """
        Initialize the classifier.

        Args:
            reference_profiles: Candidate profiles, at most one per language.
            default_language: Language chosen when distances tie. Must have a
                             profile; if None, the first profile is used.
        """
        self.reference_profiles = tuple(reference_profiles)
        if not self.reference_profiles:
            raise ValueError("At least one reference profile is required")

        languages = [ref.language for ref in self.reference_profiles]
        if len(set(languages)) != len(languages):
            raise ValueError("Duplicate language in reference profiles")

        if default_language is None:
            default_language = languages[0]
        if default_language not in languages:
            raise ValueError(f"No reference profile for default language {default_language.name}")
        self.default_language = default_language

        # Default language first, then the rest in the given order
        self._candidates = sorted(
            self.reference_profiles, key=lambda ref: ref.language != default_language
        )

    @property
    def languages(self) -> list[Language]:
        return [ref.language for ref in self.reference_profiles]

    def distances(self, text: str) -> list[tuple[Language, float]]:
        """Return the distance of text to each reference profile, in candidate order."""
        profile = compute_profile(text)
        return [(ref.language, distance(profile, ref)) for ref in self._candidates]

    def classify(self, text: str) -> Language:
        """
        Return the language most likely used in text.

        A candidate only replaces the current best on a strictly lower
        distance, so ties go to the default language.
        """
        scores = self.distances(text)
        closest_language, lowest_distance = scores[0]

        for language, score in scores[1:]:
            if score < lowest_distance:
                closest_language = language
                lowest_distance = score

        _LOGGER.debug(
            "Language distances: %s -> %s",
            ", ".join(f"{lang.value}={score:.3f}" for lang, score in scores),
            closest_language.value,
        )
        return closest_language


_default_classifier: Optional[LanguageClassifier] = None


def guess_language(text: str) -> Language:
    """Classify text with the built-in reference profiles."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = LanguageClassifier()
    return _default_classifier.classify(text)
