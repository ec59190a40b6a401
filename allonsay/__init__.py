"""Speak bilingual text with a voice per language and script."""

__version__ = "0.1.0"
