"""Letter-frequency language classification and CJK script segmentation."""

from .classifier import (
    DUTCH_PROFILE,
    ENGLISH_PROFILE,
    REFERENCE_PROFILES,
    Language,
    LanguageClassifier,
    ReferenceProfile,
    guess_language,
)
from .frequency import alphabetic_characters, compute_profile
from .router import (
    DEFAULT_VOICES,
    RoutingResult,
    VoiceAssignment,
    VoiceMap,
    VoiceRouter,
    get_voice,
    route_text,
)
from .segmenter import Segment, is_ideographic, segment

__all__ = [
    "DEFAULT_VOICES",
    "DUTCH_PROFILE",
    "ENGLISH_PROFILE",
    "REFERENCE_PROFILES",
    "Language",
    "LanguageClassifier",
    "ReferenceProfile",
    "RoutingResult",
    "Segment",
    "VoiceAssignment",
    "VoiceMap",
    "VoiceRouter",
    "alphabetic_characters",
    "compute_profile",
    "get_voice",
    "guess_language",
    "is_ideographic",
    "route_text",
    "segment",
]
