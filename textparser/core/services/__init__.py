"""Core business services."""
from .template_repository import TemplateRepository
from .parser_service import TextParser

__all__ = [
    "TemplateRepository",
    "TextParser",
]
