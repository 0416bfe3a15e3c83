import pytest

from plagiarism_engine.core.config import EngineConfig
from plagiarism_engine.core.diagnostics import (
    SentenceDiagnosticEngine, build_analysis, merge_summaries, severity_for
)
from plagiarism_engine.core.messages import ANALYSIS_MESSAGES
from plagiarism_engine.core.models import (
    DiagnosticSummary, Document, MatchType, SentenceMatch, Severity
)


def summary_with(severity, exact=0, near=0):
    def match(kind):
        return SentenceMatch("t", "s", 95 if kind is MatchType.EXACT else 80, 0, kind)
    return DiagnosticSummary(
        exact_matches=[match(MatchType.EXACT) for _ in range(exact)],
        near_matches=[match(MatchType.NEAR) for _ in range(near)],
        severity=severity,
    )


class TestAnalyzeReference:
    def setup_method(self):
        self.engine = SentenceDiagnosticEngine()

    def analyze(self, target, source):
        return self.engine.analyze_reference(self.engine.prepare(target), Document.create("ref", source))

    def test_identical_sentence_is_exact(self):
        summary = self.analyze("The quick brown fox jumps over the lazy dog.",
                               "The quick brown fox jumps over the lazy dog.")
        assert len(summary.exact_matches) == 1
        match = summary.exact_matches[0]
        assert match.similarity == 100
        assert match.type is MatchType.EXACT
        assert match.reference_id == "ref"
        assert match.original == "The quick brown fox jumps over the lazy dog."
        assert summary.severity is Severity.HIGH
        assert summary.total_issues == 1

    def test_near_match_band(self):
        # cosine 8/9
        summary = self.analyze("The cat sat on the mat today.", "The cat sat on the mat yesterday.")
        assert summary.exact_matches == []
        assert len(summary.near_matches) == 1
        assert summary.near_matches[0].similarity == 89
        assert summary.severity is Severity.MEDIUM

    def test_low_similarity_discarded(self):
        summary = self.analyze("Gardening needs patience and water.", "Markets need patience today.")
        assert summary.total_issues == 0
        assert summary.suggestions == []
        assert summary.severity is Severity.LOW

    def test_full_cross_product_without_dedup(self):
        # One target sentence matching two identical source sentences
        summary = self.analyze("Plagiarism hurts learning.",
                               "Plagiarism hurts learning. Something else entirely. Plagiarism hurts learning!")
        assert len(summary.exact_matches) == 2
        assert {m.source for m in summary.exact_matches} == {"Plagiarism hurts learning.",
                                                             "Plagiarism hurts learning!"}

    def test_positions_refer_to_target_sentences(self):
        summary = self.analyze("Unique opening words here. The quick brown fox jumps.",
                               "The quick brown fox jumps.")
        assert [m.position for m in summary.exact_matches] == [1]

    def test_one_suggestion_per_match(self):
        summary = self.analyze("The quick brown fox jumps. The cat sat on the mat today.",
                               "The quick brown fox jumps. The cat sat on the mat yesterday.")
        assert len(summary.suggestions) == 2
        exact, near = summary.suggestions
        assert exact.type is MatchType.EXACT and exact.similarity == 100
        assert near.type is MatchType.NEAR and near.similarity == 89
        assert "100%" in exact.suggestion
        assert exact.original_text == "The quick brown fox jumps."

    def test_punctuation_only_sentences_skipped(self):
        assert self.engine.prepare("... !!! ?") == []

    def test_max_sentences_bound(self):
        engine = SentenceDiagnosticEngine(EngineConfig(max_sentences=1))
        prepared = engine.prepare("First sentence here. Second sentence here.")
        assert [s.text for s in prepared] == ["First sentence here."]


class TestMerge:
    def test_high_is_never_downgraded(self):
        merged = merge_summaries([summary_with(Severity.HIGH, exact=1),
                                  summary_with(Severity.LOW),
                                  summary_with(Severity.MEDIUM, near=1)])
        assert merged.severity is Severity.HIGH

    def test_medium_when_only_near(self):
        merged = merge_summaries([summary_with(Severity.LOW), summary_with(Severity.MEDIUM, near=2)])
        assert merged.severity is Severity.MEDIUM
        assert merged.total_issues == 2

    def test_high_after_medium(self):
        merged = merge_summaries([summary_with(Severity.MEDIUM, near=1), summary_with(Severity.HIGH, exact=1)])
        assert merged.severity is Severity.HIGH
        assert merged.total_issues == 2

    def test_empty_merge(self):
        merged = merge_summaries([])
        assert merged.severity is Severity.LOW
        assert merged.total_issues == 0
        assert merged.analysis == ANALYSIS_MESSAGES["clean"]

    def test_engine_merges_across_references(self):
        engine = SentenceDiagnosticEngine()
        merged = engine.analyze("The quick brown fox jumps over the lazy dog.", [
            Document.create("copy", "The quick brown fox jumps over the lazy dog."),
            Document.create("other", "Financial markets experienced volatility today."),
        ])
        assert merged.severity is Severity.HIGH
        assert [m.reference_id for m in merged.exact_matches] == ["copy"]


class TestClassify:
    @pytest.mark.parametrize("similarity, expected", [
        (1.0, MatchType.EXACT),
        (0.9000001, MatchType.EXACT),
        (0.9, MatchType.NEAR),
        (0.7000001, MatchType.NEAR),
        (0.7, None),
        (0.0, None),
    ])
    def test_band_edges_are_exclusive(self, similarity, expected):
        assert SentenceDiagnosticEngine().classify(similarity) is expected

    def test_custom_thresholds(self):
        engine = SentenceDiagnosticEngine(EngineConfig(exact_match_threshold=0.8, near_match_threshold=0.5))
        assert engine.classify(0.85) is MatchType.EXACT
        assert engine.classify(0.5) is None


class TestAnalysisText:
    def test_exact_and_near_mentions_both_counts(self):
        text = build_analysis(2, 3)
        assert text == ANALYSIS_MESSAGES["exact_and_near"].format(exact=2, near=3)
        assert "2" in text and "3" in text

    def test_bands(self):
        assert build_analysis(1, 0) == ANALYSIS_MESSAGES["exact_only"].format(exact=1, near=0)
        assert build_analysis(0, 4) == ANALYSIS_MESSAGES["near_only"].format(exact=0, near=4)
        assert build_analysis(0, 0) == ANALYSIS_MESSAGES["clean"]

    def test_severity_for(self):
        assert severity_for(1, 5) is Severity.HIGH
        assert severity_for(0, 1) is Severity.MEDIUM
        assert severity_for(0, 0) is Severity.LOW
