"""Rule-based sentiment classification for legal documents."""

from .batch import BatchRunner, SentimentDistribution, analyze_documents, summarize_results
from .classifier import LexiconClassifier, classify_document
from .lexicon import DEFAULT_LEXICON, Bucket, Lexicon, LexiconError
from .models import (
    AnalysisRecord,
    Document,
    ScoreBreakdown,
    Sentiment,
    SentimentResult,
    SentimentScores,
)

__all__ = [
    "AnalysisRecord",
    "BatchRunner",
    "Bucket",
    "DEFAULT_LEXICON",
    "Document",
    "Lexicon",
    "LexiconClassifier",
    "LexiconError",
    "ScoreBreakdown",
    "Sentiment",
    "SentimentDistribution",
    "SentimentResult",
    "SentimentScores",
    "analyze_documents",
    "classify_document",
    "summarize_results",
]
