"""
Sentence-level diagnosis of copied and lightly paraphrased sentences.

Every target sentence is compared with every sentence of each reference by
cosine similarity. Pairs above the exact threshold are exact matches, pairs
above the near threshold are near matches, the rest are discarded. Each
retained pair yields a rewrite suggestion.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .config import DEFAULT_CONFIG, EngineConfig
from .logging_config import LoggerMixin
from .messages import ANALYSIS_MESSAGES, SUGGESTION_TEMPLATES
from .models import DiagnosticSummary, Document, MatchType, SentenceMatch, Severity, Suggestion
from .semantic_similarity import cosine_from_vectors
from .text_processing import normalize_text, split_sentences, term_frequency, to_percent


@dataclass(frozen=True)
class PreparedSentence:
    position: int
    text: str
    vector: Dict[str, float]


def build_analysis(exact_count: int, near_count: int) -> str:
    if exact_count and near_count:
        key = "exact_and_near"
    elif exact_count:
        key = "exact_only"
    elif near_count:
        key = "near_only"
    else:
        key = "clean"
    return ANALYSIS_MESSAGES[key].format(exact=exact_count, near=near_count)


def severity_for(exact_count: int, near_count: int) -> Severity:
    if exact_count:
        return Severity.HIGH
    if near_count:
        return Severity.MEDIUM
    return Severity.LOW


def merge_summaries(summaries: Iterable[DiagnosticSummary]) -> DiagnosticSummary:
    """
    Combine per-reference summaries, in the order given.

    Severity only ever rises while merging: once any reference reports
    ``high`` the merged summary stays ``high``.
    """
    merged = DiagnosticSummary()
    for summary in summaries:
        merged.exact_matches.extend(summary.exact_matches)
        merged.near_matches.extend(summary.near_matches)
        merged.suggestions.extend(summary.suggestions)
        if summary.severity.rank > merged.severity.rank:
            merged.severity = summary.severity
    merged.analysis = build_analysis(len(merged.exact_matches), len(merged.near_matches))
    return merged


class SentenceDiagnosticEngine(LoggerMixin):
    """Finds exact and near sentence matches and proposes rewrites."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def prepare(self, text: str) -> List[PreparedSentence]:
        """
        Split text into sentences and vectorize each one.

        Sentences that normalize to nothing (bare punctuation, symbols) are
        skipped; positions still refer to the original sentence order.
        """
        prepared = []
        for position, sentence in enumerate(split_sentences(text, self.config.max_sentences)):
            vector = term_frequency(normalize_text(sentence))
            if vector:
                prepared.append(PreparedSentence(position=position, text=sentence, vector=vector))
        return prepared

    def classify(self, similarity: float) -> Optional[MatchType]:
        if similarity > self.config.exact_match_threshold:
            return MatchType.EXACT
        if similarity > self.config.near_match_threshold:
            return MatchType.NEAR
        return None

    @staticmethod
    def suggest(match: SentenceMatch) -> Suggestion:
        return Suggestion(
            original_text=match.original,
            similarity=match.similarity,
            suggestion=SUGGESTION_TEMPLATES[match.type].format(similarity=match.similarity),
            position=match.position,
            type=match.type,
        )

    def analyze_reference(self, target_sentences: List[PreparedSentence], reference: Document) -> DiagnosticSummary:
        """
        Compare all target sentences against all sentences of one reference.

        Args:
            target_sentences: Output of ``prepare`` for the target text
            reference: Reference document (raw text is split into sentences)

        Returns:
            DiagnosticSummary for this reference alone
        """
        source_sentences = self.prepare(reference.raw_text)
        summary = DiagnosticSummary()

        with self.log_operation("sentence_diagnostics", reference_id=reference.id,
                                pair_count=len(target_sentences) * len(source_sentences)):
            for target in target_sentences:
                for source in source_sentences:
                    similarity = cosine_from_vectors(target.vector, source.vector)
                    match_type = self.classify(similarity)
                    if match_type is None:
                        continue

                    match = SentenceMatch(
                        original=target.text,
                        source=source.text,
                        similarity=to_percent(similarity),
                        position=target.position,
                        type=match_type,
                        reference_id=reference.id,
                    )
                    if match_type is MatchType.EXACT:
                        summary.exact_matches.append(match)
                    else:
                        summary.near_matches.append(match)
                    summary.suggestions.append(self.suggest(match))

        exact_count, near_count = len(summary.exact_matches), len(summary.near_matches)
        summary.severity = severity_for(exact_count, near_count)
        summary.analysis = build_analysis(exact_count, near_count)
        return summary

    def analyze(self, target_text: str, references: List[Document]) -> DiagnosticSummary:
        """Diagnose the target against every reference and merge the findings."""
        target_sentences = self.prepare(target_text)
        return merge_summaries(self.analyze_reference(target_sentences, reference) for reference in references)
