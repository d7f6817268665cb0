"""Scoring strategies."""
from .similarity import SequenceMatcherSimilarity, SimilarityStrategy

__all__ = [
    "SequenceMatcherSimilarity",
    "SimilarityStrategy",
]
