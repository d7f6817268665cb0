import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalFileSystem:

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def list_entries(self, directory: str) -> list[str]:
        # iterdir() raises for missing or non-directory paths
        entries = sorted(p for p in Path(directory).iterdir() if p.is_file())
        logger.debug(f"Listed {len(entries)} entries in {directory}")
        return [str(p) for p in entries]

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding=self._encoding)
