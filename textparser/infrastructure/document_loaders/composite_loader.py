import logging
from pathlib import Path

from .docx_loader import DocxLoader
from .pdf_loader import PDFLoader
from .text_loader import TextLoader

logger = logging.getLogger(__name__)


class CompositeLoader:
    """Loads input documents, falling back to plain text for unknown types."""

    def __init__(self, encoding: str = "utf-8"):
        self._fallback = TextLoader(encoding)
        self._loaders = [
            PDFLoader(),
            DocxLoader(),
            self._fallback,
        ]

    def supports(self, file_path: Path) -> bool:
        return any(loader.supports(file_path) for loader in self._loaders)

    def load(self, file_path: str | Path) -> str:
        file_path = Path(file_path)
        for loader in self._loaders:
            if loader.supports(file_path):
                return loader.load(file_path)

        logger.debug(f"No loader for {file_path.suffix!r}, reading as text")
        return self._fallback.load(file_path)
