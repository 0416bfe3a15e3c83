import math

import pytest

from plagiarism_engine.core.exact_match import (
    FingerprintMatcher, create_fingerprints, fingerprint_similarity, hash_window, match_fingerprints
)
from plagiarism_engine.core.semantic_similarity import (
    CosineSimilarityCalculator, cosine_from_vectors, cosine_similarity
)
from plagiarism_engine.core.sequence_similarity import (
    NGramSimilarityCalculator, ngram_similarity, overlap_ratio
)
from plagiarism_engine.core.validation import ParameterValidationError


class TestCosineSimilarity:
    def test_identical_texts(self):
        assert cosine_similarity("a b c a", "a b c a") == pytest.approx(1.0)

    def test_disjoint_vocabularies(self):
        assert cosine_similarity("red green blue", "cat dog bird") == 0.0

    def test_known_value(self):
        # tf: the 2/7, four shared words 1/7, one unique word each
        assert cosine_similarity(
            "the cat sat on the mat today", "the cat sat on the mat yesterday"
        ) == pytest.approx(8 / 9)

    def test_empty_text_is_zero(self):
        assert cosine_similarity("", "some words") == 0.0
        assert cosine_similarity("", "") == 0.0
        assert cosine_from_vectors({}, {"a": 1.0}) == 0.0

    @pytest.mark.parametrize("text_a, text_b", [
        ("a b c", "b c d e"),
        ("lorem ipsum dolor sit amet", "dolor amet lorem lorem"),
        ("x", "x y z x y"),
    ])
    def test_symmetric(self, text_a, text_b):
        assert cosine_similarity(text_a, text_b) == cosine_similarity(text_b, text_a)

    def test_calculator_caches_vectors(self):
        calculator = CosineSimilarityCalculator()
        first = calculator.vector("a b")
        assert calculator.vector("a b") is first
        assert calculator.compute("a b", "a b") == pytest.approx(1.0)


class TestNGramSimilarity:
    def test_denominator_is_larger_set(self):
        # bigrams: {a b, b c} vs {a b, b c, c d, d e}
        assert ngram_similarity("a b c", "a b c d e", 2) == pytest.approx(2 / 4)

    def test_not_union_jaccard(self):
        set_a, set_b = {"x", "y", "z"}, {"x", "y", "w"}
        assert overlap_ratio(set_a, set_b) == pytest.approx(2 / 3)

    def test_both_empty_is_zero(self):
        assert ngram_similarity("a", "b", 3) == 0.0
        assert overlap_ratio(set(), set()) == 0.0

    def test_one_empty_is_zero(self):
        assert ngram_similarity("a", "a b c d", 2) == 0.0

    def test_disjoint(self):
        assert ngram_similarity("red green blue", "cat dog bird", 2) == 0.0

    def test_calculator_averages_bigrams_and_trigrams(self):
        calculator = NGramSimilarityCalculator()
        # bigrams 2/4, trigrams 1/3
        assert calculator.compute("a b c", "a b c d e") == pytest.approx((2 / 4 + 1 / 3) / 2)
        assert calculator.compute_per_size("a b c", "a b c d e") == {
            2: pytest.approx(0.5), 3: pytest.approx(1 / 3)
        }

    def test_calculator_rejects_empty_sizes(self):
        with pytest.raises(ParameterValidationError):
            NGramSimilarityCalculator(())


class TestFingerprints:
    def test_window_count_and_positions(self, words):
        fingerprints = create_fingerprints(words("w", 55), window_size=50)
        assert len(fingerprints) == 6
        assert [fp.position for fp in fingerprints] == list(range(6))
        assert fingerprints[0].content == words("w", 50)
        assert fingerprints[0].hash == hash_window(words("w", 50))

    def test_short_text_has_no_fingerprints(self, words):
        assert create_fingerprints(words("w", 49), window_size=50) == []
        assert create_fingerprints("", window_size=50) == []

    def test_exact_window_size(self, words):
        assert len(create_fingerprints(words("w", 50), window_size=50)) == 1

    def test_hash_is_stable_md5(self):
        assert hash_window("abc") == "900150983cd24fb0d6963f7d28e17f72"

    def test_matching(self, words):
        target = create_fingerprints(words("w", 60), window_size=50)
        source = create_fingerprints(words("w", 55), window_size=50)
        matches = match_fingerprints(target, source)
        assert [fp.position for fp in matches] == list(range(6))
        assert fingerprint_similarity(target, matches) == pytest.approx(6 / 11)

    def test_empty_target_guard(self):
        assert fingerprint_similarity([], []) == 0.0

    def test_asymmetry_is_expected(self, words):
        # A is a prefix of B: all of A's windows occur in B, not vice versa
        matcher = FingerprintMatcher(window_size=50)
        text_a, text_b = words("w", 60), words("w", 80)
        a_vs_b, _ = matcher.compute(text_a, text_b)
        b_vs_a, _ = matcher.compute(text_b, text_a)
        assert a_vs_b == pytest.approx(1.0)
        assert b_vs_a == pytest.approx(11 / 31)
        assert not math.isclose(a_vs_b, b_vs_a)

    def test_invalid_window_size(self):
        with pytest.raises(ParameterValidationError):
            FingerprintMatcher(window_size=0)
