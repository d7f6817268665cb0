"""Input document loader implementations."""
from .pdf_loader import PDFLoader
from .docx_loader import DocxLoader
from .text_loader import TextLoader
from .composite_loader import CompositeLoader

__all__ = ["PDFLoader", "DocxLoader", "TextLoader", "CompositeLoader"]
