"""
Entry point of the engine: one target text against a reference corpus.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from tqdm import tqdm

from .aggregator import PlagiarismAggregator
from .config import DEFAULT_CONFIG, EngineConfig
from .diagnostics import PreparedSentence, SentenceDiagnosticEngine, merge_summaries
from .logging_config import LoggerMixin
from .models import ComparisonResult, DiagnosticSummary, Document, PlagiarismReport, ScoreSummary
from .recommendations import RecommendationSynthesizer
from .text_processing import count_words
from .validation import (
    CheckCancelledError, EmptyReferenceCorpusError, ParameterValidator, ReferenceValidator
)

ReferenceInput = Union[Document, Mapping[str, Any]]


class PlagiarismChecker(LoggerMixin):
    """
    Runs the full pipeline: per-reference scoring and sentence diagnostics,
    then ranking, risk classification and recommendations.

    The checker holds no state between calls; every ``check`` builds fresh
    scorers so caches never leak across documents.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def _load_references(self, references: Sequence[ReferenceInput]) -> List[Document]:
        if references is None or len(references) == 0:
            raise EmptyReferenceCorpusError(
                "At least one reference document is required for a plagiarism check",
                field="references",
                value=0
            )

        documents = []
        for index, reference in enumerate(references):
            if isinstance(reference, Document):
                ParameterValidator.validate_string(reference.raw_text, f"references[{index}].raw_text")
                documents.append(reference)
            else:
                documents.append(Document.from_mapping(ReferenceValidator.validate_reference(reference, index)))

        if self.config.max_references is not None and len(documents) > self.config.max_references:
            self.logger.warning(
                f"Reference corpus truncated from {len(documents)} to {self.config.max_references} documents",
                extra={'reference_count': len(documents)}
            )
            documents = documents[:self.config.max_references]
        return documents

    @staticmethod
    def _process_reference(aggregator: PlagiarismAggregator,
                           diagnostics: SentenceDiagnosticEngine,
                           target: Document,
                           target_sentences: List[PreparedSentence],
                           reference: Document) -> Tuple[ComparisonResult, DiagnosticSummary]:
        return aggregator.compare(target, reference), diagnostics.analyze_reference(target_sentences, reference)

    def _run_sequential(self, task, references: List[Document],
                        cancel_event: Optional[threading.Event]) -> List[Tuple[ComparisonResult, DiagnosticSummary]]:
        outcomes = []
        progress = tqdm(references, desc="Comparing references", unit="doc", disable=not self.config.show_progress)
        for completed, reference in enumerate(progress):
            if cancel_event is not None and cancel_event.is_set():
                progress.close()
                raise CheckCancelledError(completed, len(references))
            outcomes.append(task(reference))
        return outcomes

    def _run_parallel(self, task, references: List[Document],
                      cancel_event: Optional[threading.Event]) -> List[Tuple[ComparisonResult, DiagnosticSummary]]:
        max_workers = min(self.config.max_workers, len(references))
        self.logger.info(f"Comparing {len(references)} references using {max_workers} workers")

        outcomes: List[Optional[Tuple[ComparisonResult, DiagnosticSummary]]] = [None] * len(references)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_to_index = {
                executor.submit(task, reference): index
                for index, reference in enumerate(references)
            }

            completed = 0
            with tqdm(total=len(references), desc="Comparing references", unit="doc",
                      disable=not self.config.show_progress) as progress:
                for future in as_completed(future_to_index):
                    if cancel_event is not None and cancel_event.is_set():
                        for pending in future_to_index:
                            pending.cancel()
                        raise CheckCancelledError(completed, len(references))
                    # Re-raises worker exceptions; a check never returns partial results
                    outcomes[future_to_index[future]] = future.result()
                    completed += 1
                    progress.update(1)

        return outcomes

    def check(self,
              target_text: str,
              references: Sequence[ReferenceInput],
              cancel_event: Optional[threading.Event] = None) -> PlagiarismReport:
        """
        Check a target text against every reference document.

        Args:
            target_text: Plain text already extracted from the submitted document
            references: ``{"id", "content"}`` mappings or ``Document`` objects
            cancel_event: Optional event; when set, the check stops between references

        Returns:
            PlagiarismReport with ranked per-reference results

        Raises:
            EmptyReferenceCorpusError: If ``references`` is empty
            MalformedInputError: If the target or a reference is not text
            CheckCancelledError: If ``cancel_event`` was set during the check
        """
        ParameterValidator.validate_string(target_text, "target_text")
        documents = self._load_references(references)
        target = Document.create("target", target_text)

        with self.log_operation("check_plagiarism", reference_count=len(documents)):
            aggregator = PlagiarismAggregator(self.config)
            diagnostics_engine = SentenceDiagnosticEngine(self.config)
            target_sentences = diagnostics_engine.prepare(target_text)

            def task(reference: Document):
                return self._process_reference(aggregator, diagnostics_engine, target, target_sentences, reference)

            if self.config.max_workers > 1 and len(documents) > 1:
                outcomes = self._run_parallel(task, documents, cancel_event)
            else:
                outcomes = self._run_sequential(task, documents, cancel_event)

            results = [result for result, _ in outcomes]
            diagnostics = merge_summaries(partial for _, partial in outcomes)

            max_similarity = aggregator.max_similarity(results)
            status = aggregator.classify(max_similarity)
            summary = ScoreSummary.from_results(results)
            recommendations = RecommendationSynthesizer(self.config).synthesize(
                results, target_text, diagnostics, summary
            )

            self.logger.info(
                f"Plagiarism check completed. Max similarity: {max_similarity}% ({status.value}), "
                f"{diagnostics.total_issues} sentence issues, {len(recommendations)} recommendations",
                extra={'reference_count': len(documents)}
            )

            return PlagiarismReport(
                max_similarity=max_similarity,
                overall_status=status,
                per_reference_results=aggregator.rank(results),
                diagnostics=diagnostics,
                recommendations=recommendations,
                summary=summary,
                total_documents_checked=len(documents),
                text_length=len(target_text),
                word_count=count_words(target_text),
                top_results_limit=self.config.top_results,
            )


def check_plagiarism(target_text: str,
                     references: Sequence[ReferenceInput],
                     config: Optional[EngineConfig] = None,
                     cancel_event: Optional[threading.Event] = None) -> PlagiarismReport:
    """Check ``target_text`` against ``references``; see ``PlagiarismChecker.check``."""
    return PlagiarismChecker(config).check(target_text, references, cancel_event=cancel_event)
