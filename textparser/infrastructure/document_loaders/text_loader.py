from pathlib import Path


class TextLoader:

    EXTENSIONS = {".txt", ".md", ".markdown", ".html", ".htm"}

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONS

    def load(self, file_path: Path) -> str:
        return file_path.read_text(encoding=self._encoding)
