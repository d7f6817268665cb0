"""Domain models."""
from .extraction import ExtractionResult
from .template import CompiledPattern, MatchMode, Template, TemplateMatch

__all__ = [
    "ExtractionResult",
    "CompiledPattern",
    "MatchMode",
    "Template",
    "TemplateMatch",
]
