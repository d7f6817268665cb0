"""Template based extraction of structured data from unstructured text."""
from .core.exceptions import TemplateSyntaxError
from .core.matching import compile_template, extract, normalize
from .core.models import (
    CompiledPattern,
    ExtractionResult,
    MatchMode,
    Template,
    TemplateMatch,
)
from .core.services.parser_service import TextParser
from .core.services.template_repository import TemplateRepository
from .infrastructure.file_system import LocalFileSystem

__all__ = [
    "TemplateSyntaxError",
    "compile_template",
    "extract",
    "normalize",
    "CompiledPattern",
    "ExtractionResult",
    "MatchMode",
    "Template",
    "TemplateMatch",
    "TextParser",
    "TemplateRepository",
    "LocalFileSystem",
]
