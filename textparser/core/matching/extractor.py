"""Match extractor - runs compiled patterns and collects placeholder values."""

import logging
import re
from typing import Optional

import regex

from ..models.extraction import ExtractionResult
from ..models.template import CompiledPattern
from .compiler import group_name

logger = logging.getLogger(__name__)

# A "<" followed by a non-blank opens a tag that runs to the next ">" or to the
# end of the value.
TAG_RE = re.compile(r"<(?!\s)[^>]*>?")

DEFAULT_TIMEOUT = 5.0


def clean_value(value: str) -> str:
    """Strip markup tags and surrounding whitespace."""
    return TAG_RE.sub("", value).strip()


def extract(
    text: str,
    compiled: CompiledPattern,
    source: str = "<string>",
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> Optional[ExtractionResult]:
    """Extract placeholder values from text.

    Each pattern is searched over the whole text on its own. Values are
    accumulated in pattern order, so a later capture of the same name
    overwrites an earlier one. A search that runs longer than ``timeout``
    counts as not matching.

    Args:
        text: Normalized text.
        compiled: Compiled template.
        source: Template label stored on the result.
        timeout: Seconds allowed per pattern search, None for no limit.

    Returns:
        Extraction result, or None when no placeholder value was captured.
    """
    values: dict[str, str] = {}

    for pattern, names in zip(compiled.patterns, compiled.group_names):
        try:
            match = regex.search(pattern, text, compiled.flags, timeout=timeout)
        except TimeoutError:
            logger.warning(f"Matching {source} timed out after {timeout}s")
            continue

        if match is None:
            continue

        for index, name in enumerate(names):
            value = match.group(group_name(index))
            if value is None:
                continue
            values[name] = clean_value(value)

    if not values:
        logger.debug(f"No placeholder values captured with {source}")
        return None

    return ExtractionResult(values=values, source=source)
