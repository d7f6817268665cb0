"""Template repository - lists templates and ranks them against input text."""

import logging
from typing import Optional

from ..models.template import MatchMode, Template, TemplateMatch
from ..protocols.file_system import FileSystemProtocol
from ..strategies.similarity import SequenceMatcherSimilarity, SimilarityStrategy

logger = logging.getLogger(__name__)


class TemplateRepository:
    """Templates stored as files in a directory."""

    def __init__(
        self,
        file_system: FileSystemProtocol,
        similarity: SimilarityStrategy | None = None,
        mode: MatchMode = MatchMode.WHOLE_TEXT,
    ):
        """Initialize template repository.

        Args:
            file_system: File listing and reading capability.
            similarity: Strategy used to rank templates.
            mode: Matching mode assigned to loaded templates.
        """
        self._file_system = file_system
        self._similarity = similarity or SequenceMatcherSimilarity()
        self._mode = mode

    def load(self, path: str, mode: Optional[MatchMode] = None) -> Template:
        """Read a single template file."""
        content = self._file_system.read_text(path)
        return Template(content=content, source=path, mode=mode or self._mode)

    def list_templates(
        self, directory: str, mode: Optional[MatchMode] = None
    ) -> list[Template]:
        """Load every entry of a directory as a template.

        Entries are neither filtered nor validated; a file that is not a usable
        template simply fails to match later.

        Args:
            directory: Templates directory.
            mode: Override for the repository matching mode.

        Returns:
            Templates in listing order.
        """
        templates = [
            self.load(path, mode) for path in self._file_system.list_entries(directory)
        ]
        logger.info(f"Loaded {len(templates)} templates from {directory}")
        return templates

    def rank(
        self, directory: str, text: str, mode: Optional[MatchMode] = None
    ) -> list[TemplateMatch]:
        """Score every template against raw input text, best first."""
        matches = [
            TemplateMatch(template=t, score=self._similarity.score(text, t.content))
            for t in self.list_templates(directory, mode)
        ]
        for match in matches:
            logger.debug(f"Similarity {match.score:.2f}: {match.source}")
        return sorted(matches, key=lambda m: m.score, reverse=True)

    def find_best_match(
        self, directory: str, text: str, mode: Optional[MatchMode] = None
    ) -> Optional[Template]:
        """Find the template most similar to the text.

        Similarity is measured between the raw text and raw template content.
        On equal scores the first template in listing order is kept.

        Args:
            directory: Templates directory.
            text: Input text.
            mode: Override for the repository matching mode.

        Returns:
            Best template, or None if the directory has no entries.
        """
        best_match: Optional[Template] = None
        best_score = -1.0

        for template in self.list_templates(directory, mode):
            score = self._similarity.score(text, template.content)
            logger.debug(f"Similarity {score:.2f}: {template.source}")

            if score > best_score:
                best_score = score
                best_match = template

        if best_match:
            logger.info(f"Best template: {best_match.source} score={best_score:.2f}")
        return best_match
