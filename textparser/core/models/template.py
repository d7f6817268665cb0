"""Template domain models."""
from dataclasses import dataclass
from enum import Enum

import regex


class MatchMode(Enum):
    """How a template is matched against text."""
    WHOLE_TEXT = "whole"  # one pattern over the whitespace-collapsed text
    LINE = "line"         # one pattern per template line, searched independently


@dataclass(frozen=True)
class Template:
    """Template text loaded from a file or passed in directly."""
    content: str
    source: str
    mode: MatchMode = MatchMode.WHOLE_TEXT


@dataclass(frozen=True)
class CompiledPattern:
    """Regex sources compiled from a template.

    ``group_names[i][j]`` is the placeholder name bound to group ``_p{j}`` of
    ``patterns[i]``. A name may appear more than once; the last group wins.
    """
    mode: MatchMode
    patterns: tuple[str, ...]
    group_names: tuple[tuple[str, ...], ...]

    @property
    def flags(self) -> int:
        if self.mode == MatchMode.WHOLE_TEXT:
            return regex.DOTALL
        return 0

    @property
    def placeholders(self) -> list[str]:
        """Unique placeholder names in template order."""
        seen: dict[str, None] = {}
        for names in self.group_names:
            for name in names:
                seen.setdefault(name, None)
        return list(seen)


@dataclass
class TemplateMatch:
    """Result of template ranking."""
    template: Template
    score: float  # 0..100

    @property
    def source(self) -> str:
        return self.template.source
