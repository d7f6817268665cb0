"""Input text normalization."""
import re

from ..models.template import MatchMode

WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str, mode: MatchMode = MatchMode.WHOLE_TEXT) -> str:
    """Prepare input text for matching.

    Whole-text mode collapses every whitespace run, newlines included, into a
    single space. Line mode only trims the ends so line structure survives.
    """
    if mode == MatchMode.WHOLE_TEXT:
        text = WHITESPACE_RE.sub(" ", text)
    return text.strip()
