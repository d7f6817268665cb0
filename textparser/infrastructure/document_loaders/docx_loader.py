from pathlib import Path

from docx import Document


class DocxLoader:

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".docx"

    def load(self, file_path: Path) -> str:
        doc = Document(file_path)
        lines = [p.text for p in doc.paragraphs]
        # Form-like documents keep their label/value pairs in tables.
        for table in doc.tables:
            for row in table.rows:
                lines.append(" ".join(cell.text for cell in row.cells))
        return "\n".join(lines)
