"""
Split text into runs of ideographic and non-ideographic characters.

Each run can be pronounced by a single voice. Concatenating the runs in
order gives back the original text.
"""

from dataclasses import dataclass

import regex
import unicodedataplus as udp

# CJK Unified Ideographs + Extensions A-D (inclusive code point ranges)
IDEOGRAPHIC_RANGES: tuple[tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
)

_IDEOGRAPHIC_CLASS = "".join(f"{chr(start)}-{chr(end)}" for start, end in IDEOGRAPHIC_RANGES)
# Alternates between maximal runs of ideographs and maximal runs of anything else
_RUN_PATTERN = regex.compile(
    rf"(?P<ideographic>[{_IDEOGRAPHIC_CLASS}]+)|[^{_IDEOGRAPHIC_CLASS}]+"
)

_NEUTRAL_SCRIPTS = ("Common", "Inherited", "Unknown")


@dataclass
class Segment:
    """A run of text that is uniformly ideographic or uniformly not."""

    text: str
    start: int
    end: int
    is_ideographic: bool
    script: str


def is_ideographic(char: str) -> bool:
    """Return True if char is a Chinese character."""
    code = ord(char)
    return any(start <= code <= end for start, end in IDEOGRAPHIC_RANGES)


def _get_char_script(char: str) -> str:
    """Get the Unicode script for a character."""
    try:
        return udp.script(char)
    except (ValueError, KeyError):
        return "Unknown"


def _run_script(text: str) -> str:
    """First script of a run that is not Common/Inherited, else Common."""
    for char in text:
        script = _get_char_script(char)
        if script not in _NEUTRAL_SCRIPTS:
            return script
    return "Common"


def segment(text: str) -> list[Segment]:
    """
    Split text into maximal ideographic and non-ideographic runs.

    Args:
        text: Input text, iterated by code point.

    Returns:
        Segments in text order. Empty text gives an empty list.
    """
    if not text:
        return []

    segments: list[Segment] = []
    for match in _RUN_PATTERN.finditer(text):
        segments.append(
            Segment(
                text=match.group(),
                start=match.start(),
                end=match.end(),
                is_ideographic=match.group("ideographic") is not None,
                script=_run_script(match.group()),
            )
        )
    return segments
