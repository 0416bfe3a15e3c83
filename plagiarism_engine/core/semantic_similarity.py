from typing import Dict

import numpy as np

from .logging_config import LoggerMixin
from .text_processing import term_frequency


def cosine_from_vectors(tf_a: Dict[str, float], tf_b: Dict[str, float]) -> float:
    """
    Cosine similarity of two term-frequency vectors.

    Words missing from one vector count as 0. Returns 0.0 when either vector
    has zero magnitude (empty text).
    """
    if not tf_a or not tf_b:
        return 0.0

    # Sorted so the floating point summation order is stable across runs
    vocabulary = sorted(tf_a.keys() | tf_b.keys())
    vec_a = np.fromiter((tf_a.get(word, 0.0) for word in vocabulary), dtype=np.float64, count=len(vocabulary))
    vec_b = np.fromiter((tf_b.get(word, 0.0) for word in vocabulary), dtype=np.float64, count=len(vocabulary))

    magnitude_a = np.linalg.norm(vec_a)
    magnitude_b = np.linalg.norm(vec_b)
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0

    similarity = float(np.dot(vec_a, vec_b) / (magnitude_a * magnitude_b))
    return min(max(similarity, 0.0), 1.0)


def cosine_similarity(text_a: str, text_b: str) -> float:
    """Cosine similarity of the term-frequency vectors of two normalized texts."""
    return cosine_from_vectors(term_frequency(text_a), term_frequency(text_b))


class CosineSimilarityCalculator(LoggerMixin):
    """
    Compares documents by the cosine of their word-frequency vectors.

    Vectors are cached per normalized text for the lifetime of the calculator,
    so one instance should not outlive a single plagiarism check.
    """

    def __init__(self):
        self._vectors: Dict[str, Dict[str, float]] = {}

    def vector(self, normalized_text: str) -> Dict[str, float]:
        cached = self._vectors.get(normalized_text)
        if cached is None:
            cached = term_frequency(normalized_text)
            self._vectors[normalized_text] = cached
        return cached

    def compute(self, text_a: str, text_b: str) -> float:
        """
        Args:
            text_a: Normalized target text
            text_b: Normalized reference text

        Returns:
            Similarity in [0, 1]
        """
        similarity = cosine_from_vectors(self.vector(text_a), self.vector(text_b))
        self.logger.debug(f"Cosine similarity: {similarity:.4f}")
        return similarity
