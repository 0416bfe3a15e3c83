"""
Core functionality for plagiarism detection.

This package contains the scoring algorithms and processing logic:
- Text normalization, n-grams and term frequencies
- Cosine, n-gram and fingerprint similarity
- Weighted aggregation and risk classification
- Sentence-level diagnostics and recommendations
"""

from .aggregator import PlagiarismAggregator, classify_status
from .checker import PlagiarismChecker, check_plagiarism
from .config import EngineConfig
from .diagnostics import SentenceDiagnosticEngine, merge_summaries
from .exact_match import FingerprintMatcher, create_fingerprints
from .logging_config import setup_logging, LoggerMixin, ProductionLogger
from .models import (
    ComparisonResult, DiagnosticSummary, Document, Fingerprint, MatchType,
    PlagiarismReport, PlagiarismStatus, Priority, Recommendation, ScoreSummary, SentenceMatch,
    Severity, Suggestion
)
from .recommendations import RecommendationSynthesizer, generate_recommendations
from .semantic_similarity import CosineSimilarityCalculator, cosine_similarity
from .sequence_similarity import NGramSimilarityCalculator, ngram_similarity
from .text_processing import generate_ngrams, normalize_text, split_sentences, term_frequency
from .validation import (
    ValidationError, ParameterValidationError, EmptyReferenceCorpusError,
    MalformedInputError, CheckCancelledError, ParameterValidator, sanitize_text
)

__all__ = [
    'PlagiarismAggregator',
    'classify_status',
    'PlagiarismChecker',
    'check_plagiarism',
    'EngineConfig',
    'SentenceDiagnosticEngine',
    'merge_summaries',
    'FingerprintMatcher',
    'create_fingerprints',
    'setup_logging',
    'LoggerMixin',
    'ProductionLogger',
    'ComparisonResult',
    'DiagnosticSummary',
    'Document',
    'Fingerprint',
    'MatchType',
    'PlagiarismReport',
    'PlagiarismStatus',
    'Priority',
    'Recommendation',
    'ScoreSummary',
    'SentenceMatch',
    'Severity',
    'Suggestion',
    'RecommendationSynthesizer',
    'generate_recommendations',
    'CosineSimilarityCalculator',
    'cosine_similarity',
    'NGramSimilarityCalculator',
    'ngram_similarity',
    'generate_ngrams',
    'normalize_text',
    'split_sentences',
    'term_frequency',
    'ValidationError',
    'ParameterValidationError',
    'EmptyReferenceCorpusError',
    'MalformedInputError',
    'CheckCancelledError',
    'ParameterValidator',
    'sanitize_text',
]
