from typing import List, Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .exact_match import FingerprintMatcher
from .logging_config import LoggerMixin
from .models import ComparisonResult, Document, PlagiarismStatus
from .semantic_similarity import CosineSimilarityCalculator
from .sequence_similarity import NGramSimilarityCalculator
from .text_processing import to_percent


def classify_status(max_similarity: int, config: EngineConfig = DEFAULT_CONFIG) -> PlagiarismStatus:
    """Risk band of the highest overall similarity across all references."""
    if max_similarity >= config.high_threshold:
        return PlagiarismStatus.HIGH
    if max_similarity >= config.medium_threshold:
        return PlagiarismStatus.MEDIUM
    if max_similarity >= config.low_threshold:
        return PlagiarismStatus.LOW
    return PlagiarismStatus.SAFE


class PlagiarismAggregator(LoggerMixin):
    """
    Combines the cosine, n-gram and fingerprint scorers into one weighted
    score per (target, reference) pair and ranks the references.

    One aggregator serves a single check: the scorers cache vectors, n-gram
    sets and fingerprints per document text.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.cosine = CosineSimilarityCalculator()
        self.ngram = NGramSimilarityCalculator(self.config.ngram_sizes)
        self.fingerprint = FingerprintMatcher(self.config.fingerprint_window)

    def compare(self, target: Document, reference: Document) -> ComparisonResult:
        """
        Score the target against one reference document.

        Args:
            target: Normalized target document
            reference: Normalized reference document

        Returns:
            ComparisonResult with integer percentages
        """
        cosine_sim = self.cosine.compute(target.normalized_text, reference.normalized_text)
        ngram_sim = self.ngram.compute(target.normalized_text, reference.normalized_text)
        fingerprint_sim, matches = self.fingerprint.compute(target.normalized_text, reference.normalized_text)

        overall = (
            cosine_sim * self.config.cosine_weight
            + ngram_sim * self.config.ngram_weight
            + fingerprint_sim * self.config.fingerprint_weight
        )

        result = ComparisonResult(
            reference_id=reference.id,
            overall_similarity=to_percent(overall),
            cosine_similarity=to_percent(cosine_sim),
            ngram_similarity=to_percent(ngram_sim),
            fingerprint_similarity=to_percent(fingerprint_sim),
            matching_phrases=[fp.content for fp in matches[:self.config.max_matching_phrases]],
        )
        self.logger.debug(
            f"Reference {reference.id}: overall={result.overall_similarity}% "
            f"cosine={result.cosine_similarity}% ngram={result.ngram_similarity}% "
            f"fingerprint={result.fingerprint_similarity}%",
            extra={'reference_id': reference.id}
        )
        return result

    @staticmethod
    def rank(results: List[ComparisonResult]) -> List[ComparisonResult]:
        """Descending by overall similarity; ties keep corpus order."""
        return sorted(results, key=lambda result: result.overall_similarity, reverse=True)

    @staticmethod
    def max_similarity(results: List[ComparisonResult]) -> int:
        return max((result.overall_similarity for result in results), default=0)

    def classify(self, max_similarity: int) -> PlagiarismStatus:
        return classify_status(max_similarity, self.config)
