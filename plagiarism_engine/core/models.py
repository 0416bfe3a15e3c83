"""
Result records produced by the plagiarism engine.

All records are created fresh for one check and are never persisted by the
engine. ``to_dict`` gives JSON-compatible values for whatever serializes the
report (HTTP layer, exporters).
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .text_processing import normalize_text


class PlagiarismStatus(str, Enum):
    SAFE = "AMAN"
    LOW = "PLAGIAT RENDAH"
    MEDIUM = "PLAGIAT SEDANG"
    HIGH = "PLAGIAT TINGGI"

    @property
    def color(self) -> str:
        return _STATUS_COLORS[self]


_STATUS_COLORS = {
    PlagiarismStatus.SAFE: "green",
    PlagiarismStatus.LOW: "yellow",
    PlagiarismStatus.MEDIUM: "orange",
    PlagiarismStatus.HIGH: "red",
}


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.LOW: 0, Severity.MEDIUM: 1, Severity.HIGH: 2}


class Priority(str, Enum):
    REQUIRED = "WAJIB"
    MEDIUM = "SEDANG"
    LOW = "RENDAH"


class MatchType(str, Enum):
    EXACT = "exact"
    NEAR = "near"


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


@dataclass(frozen=True)
class Document:
    id: str
    raw_text: str
    normalized_text: str

    @classmethod
    def create(cls, doc_id: Any, raw_text: str) -> "Document":
        return cls(id=str(doc_id), raw_text=raw_text, normalized_text=normalize_text(raw_text))

    @classmethod
    def from_mapping(cls, reference: Mapping[str, Any]) -> "Document":
        """Build a document from a ``{"id": ..., "content": ...}`` mapping."""
        return cls.create(reference["id"], reference["content"])


@dataclass(frozen=True)
class Fingerprint:
    hash: str
    position: int
    content: str


@dataclass
class ComparisonResult:
    reference_id: str
    overall_similarity: int
    cosine_similarity: int
    ngram_similarity: int
    fingerprint_similarity: int
    matching_phrases: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ScoreSummary:
    """Mean of each algorithm's score across every reference checked."""
    avg_cosine: float = 0.0
    avg_ngram: float = 0.0
    avg_fingerprint: float = 0.0

    @classmethod
    def from_results(cls, results: Sequence[ComparisonResult]) -> "ScoreSummary":
        if not results:
            return cls()
        count = len(results)
        return cls(
            avg_cosine=sum(r.cosine_similarity for r in results) / count,
            avg_ngram=sum(r.ngram_similarity for r in results) / count,
            avg_fingerprint=sum(r.fingerprint_similarity for r in results) / count,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {name: round(value, 2) for name, value in asdict(self).items()}


@dataclass
class SentenceMatch:
    original: str
    source: str
    similarity: int
    position: int
    type: MatchType
    reference_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass
class Suggestion:
    original_text: str
    similarity: int
    suggestion: str
    position: int
    type: MatchType

    def to_dict(self) -> Dict[str, Any]:
        return _plain(asdict(self))


@dataclass
class DiagnosticSummary:
    exact_matches: List[SentenceMatch] = field(default_factory=list)
    near_matches: List[SentenceMatch] = field(default_factory=list)
    suggestions: List[Suggestion] = field(default_factory=list)
    analysis: str = ""
    severity: Severity = Severity.LOW

    @property
    def total_issues(self) -> int:
        return len(self.exact_matches) + len(self.near_matches)

    def to_dict(self) -> Dict[str, Any]:
        data = _plain(asdict(self))
        data["total_issues"] = self.total_issues
        return data


@dataclass
class Recommendation:
    priority: Priority
    type: str
    title: str
    description: str
    actions: List[str]
    severity: Severity
    diagnostics: Optional[DiagnosticSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "priority": self.priority.value,
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "actions": list(self.actions),
            "severity": self.severity.value,
        }
        if self.diagnostics is not None:
            data["diagnostics"] = self.diagnostics.to_dict()
        return data


@dataclass
class PlagiarismReport:
    max_similarity: int
    overall_status: PlagiarismStatus
    per_reference_results: List[ComparisonResult]
    diagnostics: DiagnosticSummary
    recommendations: List[Recommendation]
    summary: ScoreSummary = field(default_factory=ScoreSummary)
    total_documents_checked: int = 0
    text_length: int = 0
    word_count: int = 0
    top_results_limit: int = 10

    @property
    def status_color(self) -> str:
        return self.overall_status.color

    @property
    def top_results(self) -> List[ComparisonResult]:
        """Highest ranked comparisons kept for detailed display."""
        return self.per_reference_results[:self.top_results_limit]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_similarity": self.max_similarity,
            "overall_status": self.overall_status.value,
            "status_color": self.status_color,
            "total_documents_checked": self.total_documents_checked,
            "text_length": self.text_length,
            "word_count": self.word_count,
            "per_reference_results": [result.to_dict() for result in self.per_reference_results],
            "detailed_results": [result.to_dict() for result in self.top_results],
            "summary": self.summary.to_dict(),
            "diagnostics": self.diagnostics.to_dict(),
            "recommendations": [rec.to_dict() for rec in self.recommendations],
        }
