from pathlib import Path

from pypdf import PdfReader


class PDFLoader:

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".pdf"

    def load(self, file_path: Path) -> str:
        # Pages are joined by line breaks so line templates still see page text
        # as separate lines.
        reader = PdfReader(file_path)
        return "\n".join(page.extract_text() or "" for page in reader.pages)
