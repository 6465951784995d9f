"""Batch analysis over a collection of documents."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Callable, Dict, Iterable, List, Sequence

from .classifier import LexiconClassifier, round_half_up
from .logging import document_logger, get_logger
from .models import AnalysisRecord, Document, Sentiment

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BatchRunner:
    """Classifies documents independently and returns records in input order."""

    def __init__(
        self,
        classifier: LexiconClassifier | None = None,
        *,
        clock: Clock | None = None,
        max_workers: int = 1,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.classifier = classifier or LexiconClassifier()
        self.clock = clock or _utcnow
        self.max_workers = max_workers
        self.logger = get_logger("batch")

    def run(self, documents: Iterable[Document]) -> List[AnalysisRecord]:
        docs = list(documents)
        self.logger.debug("Analyzing %d documents with %d worker(s)", len(docs), self.max_workers)
        if self.max_workers == 1 or len(docs) < 2:
            return [self.analyze(doc) for doc in docs]
        # Executor.map yields results in submission order.
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(self.analyze, docs))

    def analyze(self, document: Document) -> AnalysisRecord:
        result = self.classifier.classify(document.content)
        document_logger(self.logger, document.name).debug(
            "Classified as %s (%d%%)", result.sentiment.value, result.confidence
        )
        return AnalysisRecord(
            id=document.id,
            document_name=document.name,
            document_type=document.doc_type,
            result=result,
            processed_at=self.clock(),
        )


def analyze_documents(
    documents: Iterable[Document],
    *,
    classifier: LexiconClassifier | None = None,
    clock: Clock | None = None,
    max_workers: int = 1,
) -> List[AnalysisRecord]:
    """Analyze ``documents`` and return one record per document, in order."""
    runner = BatchRunner(classifier, clock=clock, max_workers=max_workers)
    return runner.run(documents)


@dataclass(frozen=True)
class SentimentDistribution:
    """Per-label record counts for summary views."""

    total: int = 0
    counts: Dict[Sentiment, int] = field(default_factory=dict)

    def count(self, label: Sentiment | str) -> int:
        return self.counts.get(Sentiment(label), 0)

    def percentage(self, label: Sentiment | str) -> int:
        if self.total == 0:
            return 0
        return round_half_up(self.count(label) / self.total * 100)

    def as_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            label.value: {"count": self.count(label), "percentage": self.percentage(label)}
            for label in Sentiment
        }


def summarize_results(records: Sequence[AnalysisRecord]) -> SentimentDistribution:
    counts = {label: 0 for label in Sentiment}
    for record in records:
        counts[record.sentiment] += 1
    return SentimentDistribution(total=len(records), counts=counts)


__all__ = [
    "BatchRunner",
    "SentimentDistribution",
    "analyze_documents",
    "summarize_results",
]
