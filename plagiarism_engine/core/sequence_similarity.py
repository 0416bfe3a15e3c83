from typing import Dict, Sequence, Set, Tuple

from .logging_config import LoggerMixin
from .text_processing import generate_ngrams
from .validation import ParameterValidationError, ParameterValidator, validate_inputs


def ngram_set(normalized_text: str, n: int) -> Set[str]:
    return set(generate_ngrams(normalized_text, n))


def _validate_sizes(sizes: Sequence[int]) -> Tuple[int, ...]:
    if not sizes:
        raise ParameterValidationError("At least one n-gram size is required", field="ngram_sizes", value=sizes)
    return tuple(ParameterValidator.validate_positive_integer(n, "ngram_sizes") for n in sizes)


def overlap_ratio(set_a: Set[str], set_b: Set[str]) -> float:
    """
    Shared phrases divided by the size of the larger set.

    Unlike Jaccard the denominator is ``max(|A|, |B|)`` rather than the
    union, so a short text inside a long one is penalised less.
    """
    larger = max(len(set_a), len(set_b))
    if larger == 0:
        return 0.0
    return len(set_a & set_b) / larger


def ngram_similarity(text_a: str, text_b: str, n: int = 3) -> float:
    """N-gram set overlap between two normalized texts, in [0, 1]."""
    return overlap_ratio(ngram_set(text_a, n), ngram_set(text_b, n))


class NGramSimilarityCalculator(LoggerMixin):
    """
    Phrase-level similarity from overlapping word n-grams.

    The reported score is the mean overlap over all configured n-gram sizes
    (bigrams and trigrams by default).
    """

    @validate_inputs(ngram_sizes=_validate_sizes)
    def __init__(self, ngram_sizes: Sequence[int] = (2, 3)):
        self.ngram_sizes = ngram_sizes
        self._sets: Dict[Tuple[str, int], Set[str]] = {}

    def _ngrams(self, normalized_text: str, n: int) -> Set[str]:
        key = (normalized_text, n)
        cached = self._sets.get(key)
        if cached is None:
            cached = ngram_set(normalized_text, n)
            self._sets[key] = cached
        return cached

    def compute_per_size(self, text_a: str, text_b: str) -> Dict[int, float]:
        return {
            n: overlap_ratio(self._ngrams(text_a, n), self._ngrams(text_b, n))
            for n in self.ngram_sizes
        }

    def compute(self, text_a: str, text_b: str) -> float:
        """Average n-gram overlap of two normalized texts."""
        scores = self.compute_per_size(text_a, text_b)
        average = sum(scores.values()) / len(scores)
        self.logger.debug(
            "N-gram similarity: " + ", ".join(f"n={n}: {score:.4f}" for n, score in scores.items())
        )
        return average
