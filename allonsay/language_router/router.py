"""
Assign a synthesis voice to each script run of a text.

The language is determined once for the whole text and applied to every
non-ideographic run; ideographic runs always get the ideographic voice.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Optional

from .classifier import Language, LanguageClassifier
from .segmenter import Segment, segment

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoiceMap:
    """
    Voice identifiers, one per supported language plus one for ideographs.

    Defaults are macOS system voices.
    """

    english: str = "Samantha"
    dutch: str = "Claire"
    ideographic: str = "Sin-ji"

    def for_language(self, language: Language) -> str:
        if language is Language.DUTCH:
            return self.dutch
        return self.english


DEFAULT_VOICES = VoiceMap()


@dataclass
class VoiceAssignment:
    """A segment paired with the voice that should read it."""

    segment: Segment
    voice: str

    @property
    def text(self) -> str:
        return self.segment.text

    @property
    def is_ideographic(self) -> bool:
        return self.segment.is_ideographic


@dataclass
class RoutingResult:
    """Result of routing a text: whole-text language and ordered assignments."""

    original_text: str
    language: Optional[Language]
    assignments: list[VoiceAssignment] = field(default_factory=list)


def _truncate(text: str, limit: int = 50) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


class VoiceRouter:
    """Routes text segments to voices."""

    def __init__(
        self,
        classifier: Optional[LanguageClassifier] = None,
        voices: VoiceMap = DEFAULT_VOICES,
    ):
        self.classifier = classifier or LanguageClassifier()
        self.voices = voices

    def voice_for(self, part: Segment, language: Language) -> str:
        """Return the voice for a segment, given the language of the whole text."""
        if part.is_ideographic:
            return self.voices.ideographic
        return self.voices.for_language(language)

    def plan(self, text: str) -> RoutingResult:
        """
        Split text and assign a voice to every segment.

        The whole text is classified once and that language is used for every
        non-ideographic segment.

        Args:
            text: Input text.

        Returns:
            RoutingResult with assignments in reading order. The language is
            None for empty text.
        """
        if not text:
            return RoutingResult(original_text=text, language=None, assignments=[])

        language = self.classifier.classify(text)
        assignments = [
            VoiceAssignment(segment=part, voice=self.voice_for(part, language))
            for part in segment(text)
        ]

        _LOGGER.info("Voice routing (%s): %s", language.value, json.dumps([
            {"voice": a.voice, "text": _truncate(a.text)} for a in assignments
        ], ensure_ascii=False))

        return RoutingResult(original_text=text, language=language, assignments=assignments)

    def route(self, text: str) -> list[VoiceAssignment]:
        """Return the voice assignments for text, in segmentation order."""
        return self.plan(text).assignments


def route_text(text: str, voices: Optional[VoiceMap] = None) -> list[VoiceAssignment]:
    """
    Convenience function to route text with the built-in reference profiles.

    Args:
        text: Input text.
        voices: Optional voice identifiers (defaults to macOS voices).

    Returns:
        Ordered list of VoiceAssignment.
    """
    router = VoiceRouter(voices=voices or DEFAULT_VOICES)
    return router.route(text)


def get_voice(part: str, sentence: str, voices: VoiceMap = DEFAULT_VOICES) -> str:
    """
    Return the voice for one part of a sentence.

    The part is treated as ideographic if its first character is; otherwise
    the language of the whole sentence decides.
    """
    router = VoiceRouter(voices=voices)
    runs = segment(part)
    if not runs:
        return voices.for_language(router.classifier.default_language)
    return router.voice_for(runs[0], router.classifier.classify(sentence))
