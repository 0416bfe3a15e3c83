"""
Rule cascade turning scores and diagnostics into prioritized guidance.

Rules are evaluated in table order and fire independently of each other.
Each rule names a message key; titles, descriptions and action lists come
from ``messages.RECOMMENDATION_MESSAGES``.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union

from .config import DEFAULT_CONFIG, EngineConfig
from .logging_config import LoggerMixin
from .messages import RECOMMENDATION_MESSAGES
from .models import ComparisonResult, DiagnosticSummary, Priority, Recommendation, ScoreSummary, Severity
from .text_processing import count_words


@dataclass(frozen=True)
class RecommendationContext:
    max_similarity: int
    avg_cosine: float
    avg_ngram: float
    avg_fingerprint: float
    word_count: int
    diagnostics: DiagnosticSummary
    config: EngineConfig

    def template_values(self) -> Dict[str, object]:
        return {
            "similarity": self.max_similarity,
            "cosine": round(self.avg_cosine),
            "ngram": round(self.avg_ngram),
            "fingerprint": round(self.avg_fingerprint),
            "word_count": self.word_count,
            "total_issues": self.diagnostics.total_issues,
            "exact": len(self.diagnostics.exact_matches),
            "near": len(self.diagnostics.near_matches),
            "analysis": self.diagnostics.analysis,
        }


Predicate = Callable[[RecommendationContext], bool]


@dataclass(frozen=True)
class RecommendationRule:
    message_key: str
    type: str
    predicate: Predicate
    priority: Union[Priority, Callable[[RecommendationContext], Priority]]
    severity: Union[Severity, Callable[[RecommendationContext], Severity]]
    embeds_diagnostics: bool = False

    def resolve_priority(self, context: RecommendationContext) -> Priority:
        return self.priority(context) if callable(self.priority) else self.priority

    def resolve_severity(self, context: RecommendationContext) -> Severity:
        return self.severity(context) if callable(self.severity) else self.severity


def _ngram_dominates(ctx: RecommendationContext) -> bool:
    return ctx.avg_ngram > ctx.avg_cosine and ctx.avg_ngram > ctx.avg_fingerprint


def _fingerprint_dominates(ctx: RecommendationContext) -> bool:
    return (
        ctx.avg_fingerprint > ctx.avg_cosine
        and ctx.avg_fingerprint > ctx.avg_ngram
        and ctx.avg_fingerprint > ctx.config.dominant_fingerprint_threshold
    )


DEFAULT_RULES: List[RecommendationRule] = [
    # Sentence diagnostics
    RecommendationRule(
        message_key="diagnostic",
        type="ai_thinking",
        predicate=lambda ctx: ctx.diagnostics.total_issues > 0,
        priority=lambda ctx: Priority.REQUIRED if ctx.diagnostics.severity is Severity.HIGH else Priority.MEDIUM,
        severity=lambda ctx: ctx.diagnostics.severity,
        embeds_diagnostics=True,
    ),
    # Overall score brackets, exactly one fires
    RecommendationRule(
        message_key="rewrite_comprehensive",
        type="critical",
        predicate=lambda ctx: ctx.max_similarity >= ctx.config.high_threshold,
        priority=Priority.REQUIRED,
        severity=Severity.HIGH,
    ),
    RecommendationRule(
        message_key="improve_paraphrase",
        type="improvement",
        predicate=lambda ctx: ctx.config.medium_threshold <= ctx.max_similarity < ctx.config.high_threshold,
        priority=Priority.MEDIUM,
        severity=Severity.MEDIUM,
    ),
    RecommendationRule(
        message_key="optimize_originality",
        type="optimization",
        predicate=lambda ctx: ctx.config.low_threshold <= ctx.max_similarity < ctx.config.medium_threshold,
        priority=Priority.MEDIUM,
        severity=Severity.LOW,
    ),
    RecommendationRule(
        message_key="maintain_standard",
        type="maintenance",
        predicate=lambda ctx: ctx.max_similarity < ctx.config.low_threshold,
        priority=Priority.LOW,
        severity=Severity.LOW,
    ),
    # Dominant algorithm, independent checks
    RecommendationRule(
        message_key="vary_structure",
        type="structure",
        predicate=_ngram_dominates,
        priority=Priority.MEDIUM,
        severity=Severity.MEDIUM,
    ),
    RecommendationRule(
        message_key="stop_copy_paste",
        type="copy_paste",
        predicate=_fingerprint_dominates,
        priority=Priority.REQUIRED,
        severity=Severity.HIGH,
    ),
    # Short documents inflate similarity
    RecommendationRule(
        message_key="expand_content",
        type="content",
        predicate=lambda ctx: ctx.word_count < ctx.config.min_word_count,
        priority=Priority.MEDIUM,
        severity=Severity.LOW,
    ),
]


class RecommendationSynthesizer(LoggerMixin):
    """
    Evaluates the recommendation rules against one check's results.

    ``messages`` may be swapped for a translated table with the same keys.
    """

    def __init__(self,
                 config: Optional[EngineConfig] = None,
                 rules: Optional[Sequence[RecommendationRule]] = None,
                 messages: Optional[Dict[str, Dict]] = None):
        self.config = config or DEFAULT_CONFIG
        self.rules = list(rules) if rules is not None else DEFAULT_RULES
        self.messages = messages or RECOMMENDATION_MESSAGES

    def build_context(self,
                      results: Sequence[ComparisonResult],
                      target_text: str,
                      diagnostics: DiagnosticSummary,
                      summary: Optional[ScoreSummary] = None) -> RecommendationContext:
        summary = summary or ScoreSummary.from_results(results)
        return RecommendationContext(
            max_similarity=max((r.overall_similarity for r in results), default=0),
            avg_cosine=summary.avg_cosine,
            avg_ngram=summary.avg_ngram,
            avg_fingerprint=summary.avg_fingerprint,
            word_count=count_words(target_text),
            diagnostics=diagnostics,
            config=self.config,
        )

    def render(self, rule: RecommendationRule, context: RecommendationContext) -> Recommendation:
        message = self.messages[rule.message_key]
        values = context.template_values()
        return Recommendation(
            priority=rule.resolve_priority(context),
            type=rule.type,
            title=message["title"].format(**values),
            description=message["description"].format(**values),
            actions=list(message["actions"]),
            severity=rule.resolve_severity(context),
            diagnostics=context.diagnostics if rule.embeds_diagnostics else None,
        )

    def synthesize(self,
                   results: Sequence[ComparisonResult],
                   target_text: str,
                   diagnostics: DiagnosticSummary,
                   summary: Optional[ScoreSummary] = None) -> List[Recommendation]:
        """
        Args:
            results: Comparison result for every reference checked
            target_text: Raw target text, used for the word count
            diagnostics: Merged sentence diagnostics
            summary: Precomputed score averages, derived from results when omitted

        Returns:
            Recommendations in rule order
        """
        context = self.build_context(results, target_text, diagnostics, summary)
        recommendations = [self.render(rule, context) for rule in self.rules if rule.predicate(context)]
        self.logger.debug(
            f"Generated {len(recommendations)} recommendations: "
            + ", ".join(rec.type for rec in recommendations)
        )
        return recommendations


def generate_recommendations(results: Sequence[ComparisonResult],
                             target_text: str,
                             diagnostics: DiagnosticSummary,
                             config: Optional[EngineConfig] = None) -> List[Recommendation]:
    return RecommendationSynthesizer(config).synthesize(results, target_text, diagnostics)
