import pytest

from plagiarism_engine.core.aggregator import PlagiarismAggregator, classify_status
from plagiarism_engine.core.config import EngineConfig
from plagiarism_engine.core.models import ComparisonResult, Document, PlagiarismStatus


def result(reference_id, overall):
    return ComparisonResult(reference_id, overall, 0, 0, 0)


class TestCompare:
    def test_self_similarity_saturates(self, words):
        text = words("w", 60)
        aggregator = PlagiarismAggregator()
        comparison = aggregator.compare(Document.create("t", text), Document.create("r", text))
        assert comparison.overall_similarity == 100
        assert comparison.cosine_similarity == 100
        assert comparison.ngram_similarity == 100
        assert comparison.fingerprint_similarity == 100
        assert len(comparison.matching_phrases) == 5

    def test_weighted_combination(self):
        # Under the window size: fingerprint contributes nothing
        text = "The quick brown fox jumps over the lazy dog."
        comparison = PlagiarismAggregator().compare(Document.create("t", text), Document.create("r", text))
        assert comparison.fingerprint_similarity == 0
        assert comparison.overall_similarity == 75

    def test_custom_weights(self):
        text = "The quick brown fox jumps over the lazy dog."
        config = EngineConfig(cosine_weight=0.5, ngram_weight=0.5, fingerprint_weight=0.0)
        comparison = PlagiarismAggregator(config).compare(Document.create("t", text), Document.create("r", text))
        assert comparison.overall_similarity == 100

    def test_disjoint_documents(self):
        comparison = PlagiarismAggregator().compare(
            Document.create("t", "Completely unrelated sentence about gardening techniques."),
            Document.create("r", "Financial markets experienced volatility today."),
        )
        assert comparison.cosine_similarity == 0
        assert comparison.ngram_similarity == 0
        assert comparison.overall_similarity == 0
        assert comparison.matching_phrases == []

    def test_reference_id_carried(self):
        comparison = PlagiarismAggregator().compare(Document.create("t", "a b c"), Document.create(42, "a b c"))
        assert comparison.reference_id == "42"


class TestRanking:
    def test_sorted_descending_and_stable(self):
        ranked = PlagiarismAggregator.rank([result("a", 10), result("b", 40), result("c", 10), result("d", 90)])
        assert [r.reference_id for r in ranked] == ["d", "b", "a", "c"]

    def test_max_similarity(self):
        assert PlagiarismAggregator.max_similarity([result("a", 10), result("b", 64)]) == 64
        assert PlagiarismAggregator.max_similarity([]) == 0


@pytest.mark.parametrize("score, status", [
    (100, PlagiarismStatus.HIGH),
    (80, PlagiarismStatus.HIGH),
    (79, PlagiarismStatus.MEDIUM),
    (50, PlagiarismStatus.MEDIUM),
    (49, PlagiarismStatus.LOW),
    (25, PlagiarismStatus.LOW),
    (24, PlagiarismStatus.SAFE),
    (0, PlagiarismStatus.SAFE),
])
def test_classify_status(score, status):
    assert classify_status(score) is status


def test_status_values_and_colors():
    assert PlagiarismStatus.HIGH.value == "PLAGIAT TINGGI"
    assert PlagiarismStatus.SAFE.value == "AMAN"
    assert PlagiarismStatus.HIGH.color == "red"
    assert PlagiarismStatus.LOW.color == "yellow"
