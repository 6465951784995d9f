"""Core data models shared across legalsent components."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Tuple


class Sentiment(str, Enum):
    """Closed set of labels produced by the classifier."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class Document:
    """A caller-owned document handed to the core for analysis."""

    id: str
    name: str
    content: str
    doc_type: str = "Text"


@dataclass(frozen=True)
class ScoreBreakdown:
    """Raw lexicon hit counts before normalization."""

    positive: int = 0
    negative: int = 0
    neutral: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.negative + self.neutral


@dataclass(frozen=True)
class SentimentScores:
    """Per-bucket integer percentages. Not forced to sum to exactly 100."""

    positive: int = 0
    negative: int = 0
    neutral: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"positive": self.positive, "negative": self.negative, "neutral": self.neutral}


@dataclass(frozen=True)
class SentimentResult:
    """Outcome of classifying a single text."""

    sentiment: Sentiment
    confidence: int
    scores: SentimentScores
    key_phrases: Tuple[str, ...] = field(default_factory=tuple)
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sentiment": self.sentiment.value,
            "confidence": self.confidence,
            "scores": self.scores.as_dict(),
            "key_phrases": list(self.key_phrases),
            "summary": self.summary,
        }


@dataclass(frozen=True)
class AnalysisRecord:
    """A sentiment result joined with the identity of the analysed document."""

    id: str
    document_name: str
    document_type: str
    result: SentimentResult
    processed_at: datetime

    @property
    def sentiment(self) -> Sentiment:
        return self.result.sentiment

    @property
    def confidence(self) -> int:
        return self.result.confidence

    @property
    def summary(self) -> str:
        return self.result.summary

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "document_name": self.document_name,
            "document_type": self.document_type,
        }
        payload.update(self.result.to_dict())
        payload["processed_at"] = self.processed_at.isoformat().replace("+00:00", "Z")
        return payload


__all__ = [
    "AnalysisRecord",
    "Document",
    "ScoreBreakdown",
    "Sentiment",
    "SentimentResult",
    "SentimentScores",
]
