"""Template compilation and matching."""
from .compiler import compile_template
from .extractor import clean_value, extract
from .normalizer import normalize

__all__ = [
    "compile_template",
    "clean_value",
    "extract",
    "normalize",
]
