import logging
from abc import ABC, abstractmethod
from difflib import SequenceMatcher

logger = logging.getLogger(__name__)


class SimilarityStrategy(ABC):
    """Base class for text similarity strategies."""

    @abstractmethod
    def score(self, text: str, other: str) -> float:
        """Similarity percentage between 0 and 100."""
        ...


class SequenceMatcherSimilarity(SimilarityStrategy):
    """Character overlap of recursive longest common substrings.

    Finds the longest common substring, repeats on the parts to its left and
    right, and sums the matched characters. The score is twice that sum as a
    percentage of the combined length.
    """

    def score(self, text: str, other: str) -> float:
        total = len(text) + len(other)
        if total == 0:
            return 0.0

        # autojunk would drop frequent characters from long inputs
        matcher = SequenceMatcher(None, text, other, autojunk=False)
        matched = sum(block.size for block in matcher.get_matching_blocks())
        return matched * 2 * 100.0 / total
