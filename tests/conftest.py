import pytest

from textparser.core.models.template import MatchMode
from textparser.core.services.parser_service import TextParser
from textparser.core.services.template_repository import TemplateRepository


class InMemoryFileSystem:
    """File system double keyed by path, listing in insertion order."""

    def __init__(self, files: dict[str, str] | None = None):
        self.files = dict(files or {})
        self.reads: list[str] = []

    def list_entries(self, directory: str) -> list[str]:
        prefix = directory.rstrip("/") + "/"
        return [path for path in self.files if path.startswith(prefix)]

    def read_text(self, path: str) -> str:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None


@pytest.fixture
def make_fs():
    """Build in-memory file systems from a path -> content mapping."""
    return InMemoryFileSystem


@pytest.fixture
def fs(make_fs):
    return make_fs()


@pytest.fixture
def repository(fs):
    return TemplateRepository(file_system=fs)


@pytest.fixture
def parser(repository):
    return TextParser(repository=repository)


@pytest.fixture
def line_parser(repository):
    return TextParser(repository=repository, mode=MatchMode.LINE)
