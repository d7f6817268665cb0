"""Template compiler - turns ``{%Name%}`` templates into regex patterns."""

import logging
import re

from ..exceptions import TemplateSyntaxError
from ..models.template import CompiledPattern, MatchMode
from .normalizer import WHITESPACE_RE

logger = logging.getLogger(__name__)

# Name is taken without surrounding blanks and cannot span lines or contain "%".
PLACEHOLDER_RE = re.compile(r"\{%[ \t]*([^%\s][^%\n]*?)[ \t]*%\}")
DELIMITER_RE = re.compile(r"\{%|%\}")


def group_name(index: int) -> str:
    """Regex group name used for the placeholder at ``index``."""
    return f"_p{index}"


def compile_template(
    template_text: str,
    mode: MatchMode = MatchMode.WHOLE_TEXT,
    strict: bool = False,
    source: str = "<string>",
) -> CompiledPattern:
    """Compile template text into regex patterns.

    Literal text is escaped, each placeholder becomes an unbounded capture.
    Whole-text mode yields one pattern with whitespace runs collapsed to a
    single space. Line mode yields one pattern per non-blank line with
    in-line whitespace kept as is.

    Placeholders map to synthetic group names, so any name is accepted and a
    repeated name simply yields two groups; the later one wins on extraction.

    Args:
        template_text: Raw template content.
        mode: Matching mode.
        strict: Raise on malformed placeholder syntax instead of matching it
            literally.
        source: Template label for diagnostics.

    Returns:
        Compiled pattern.

    Raises:
        TemplateSyntaxError: In strict mode, on unbalanced ``{%``/``%}``.
    """
    if mode == MatchMode.LINE:
        units = [line.strip() for line in template_text.splitlines()]
        units = [line for line in units if line]
    else:
        units = [template_text.strip()]

    patterns = []
    group_names = []
    for unit in units:
        pattern, names = _compile_unit(unit, mode, strict, source)
        patterns.append(pattern)
        group_names.append(names)

    logger.debug(f"Compiled {source} ({mode.value}): {patterns}")
    return CompiledPattern(
        mode=mode, patterns=tuple(patterns), group_names=tuple(group_names)
    )


def _compile_unit(
    text: str, mode: MatchMode, strict: bool, source: str
) -> tuple[str, tuple[str, ...]]:
    parts = []
    names: list[str] = []
    pos = 0

    for match in PLACEHOLDER_RE.finditer(text):
        parts.append(_escape_literal(text[pos : match.start()], mode, strict, source))
        parts.append(f"(?P<{group_name(len(names))}>.*)")
        names.append(match.group(1))
        pos = match.end()

    parts.append(_escape_literal(text[pos:], mode, strict, source))
    return "".join(parts), tuple(names)


def _escape_literal(fragment: str, mode: MatchMode, strict: bool, source: str) -> str:
    delimiter = DELIMITER_RE.search(fragment)
    if delimiter:
        snippet = fragment[delimiter.start() : delimiter.start() + 40]
        if strict:
            raise TemplateSyntaxError(source, snippet)
        logger.warning(
            f"Malformed placeholder in {source}: {snippet!r} will be matched literally"
        )

    if mode == MatchMode.WHOLE_TEXT:
        fragment = WHITESPACE_RE.sub(" ", fragment)
    return re.escape(fragment)
