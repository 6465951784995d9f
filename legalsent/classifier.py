"""Rule-based lexical sentiment classifier."""

from __future__ import annotations

import math
from typing import List, Tuple

from .artifacts import extract_key_phrases, generate_summary
from .lexicon import DEFAULT_LEXICON, Bucket, Lexicon
from .logging import get_logger
from .models import ScoreBreakdown, Sentiment, SentimentResult, SentimentScores
from .text import split_words

_DOMINANT_BASE = 85.0
_DOMINANT_CAP = 95.0
_DOMINANT_WEIGHT = 0.5
_NEUTRAL_BASE = 80.0
_NEUTRAL_FLOOR = 65.0
_NEUTRAL_WEIGHT = 0.3


class LexiconClassifier:
    """Scores text by counting lexicon hits per token.

    Each whitespace-separated token is lowercased and tested against the
    positive, negative and neutral word lists in that order; the first list
    with an entry contained in the token claims it. Punctuation is left on the
    tokens, so ``"breach,"`` still matches ``"breach"``.
    """

    def __init__(self, lexicon: Lexicon | None = None) -> None:
        self.lexicon = lexicon or DEFAULT_LEXICON
        self._ordered = self.lexicon.buckets()
        self.logger = get_logger("classifier")

    def tokenize(self, text: str) -> List[str]:
        return split_words(text.lower())

    def count(self, text: str) -> ScoreBreakdown:
        """Return raw hit counts for ``text``."""
        hits = {bucket: 0 for bucket in Bucket}
        for token in self.tokenize(text):
            bucket = self._match(token)
            if bucket is not None:
                hits[bucket] += 1
        return ScoreBreakdown(
            positive=hits[Bucket.POSITIVE],
            negative=hits[Bucket.NEGATIVE],
            neutral=hits[Bucket.NEUTRAL],
        )

    def normalize(self, breakdown: ScoreBreakdown) -> SentimentScores:
        """Convert counts into independently rounded percentages."""
        positive, negative, neutral = _percentages(breakdown)
        return SentimentScores(
            positive=round_half_up(positive),
            negative=round_half_up(negative),
            neutral=round_half_up(neutral),
        )

    def decide(self, breakdown: ScoreBreakdown) -> Tuple[Sentiment, int]:
        """Apply the decision rule and return ``(label, confidence)``.

        The rule works on unrounded percentages. A bucket must strictly beat
        both others to win; every tie, including the no-hit case, is neutral.
        """
        positive, negative, neutral = _percentages(breakdown)
        if positive > negative and positive > neutral:
            label = Sentiment.POSITIVE
            confidence = min(_DOMINANT_BASE + (positive - negative) * _DOMINANT_WEIGHT, _DOMINANT_CAP)
        elif negative > positive and negative > neutral:
            label = Sentiment.NEGATIVE
            confidence = min(_DOMINANT_BASE + (negative - positive) * _DOMINANT_WEIGHT, _DOMINANT_CAP)
        else:
            label = Sentiment.NEUTRAL
            confidence = max(_NEUTRAL_FLOOR, _NEUTRAL_BASE - abs(positive - negative) * _NEUTRAL_WEIGHT)
        return label, round_half_up(confidence)

    def classify(self, text: str) -> SentimentResult:
        """Classify ``text`` and attach key phrases and a summary."""
        breakdown = self.count(text)
        sentiment, confidence = self.decide(breakdown)
        self.logger.debug(
            "Lexicon hits positive=%d negative=%d neutral=%d -> %s (%d%%)",
            breakdown.positive,
            breakdown.negative,
            breakdown.neutral,
            sentiment.value,
            confidence,
        )
        return SentimentResult(
            sentiment=sentiment,
            confidence=confidence,
            scores=self.normalize(breakdown),
            key_phrases=extract_key_phrases(text),
            summary=generate_summary(sentiment),
        )

    def _match(self, token: str) -> Bucket | None:
        for bucket, words in self._ordered:
            if any(word in token for word in words):
                return bucket
        return None


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up, unlike :func:`round`."""
    return int(math.floor(value + 0.5))


def _percentages(breakdown: ScoreBreakdown) -> Tuple[float, float, float]:
    total = breakdown.total
    if total == 0:
        return 0.0, 0.0, 0.0
    return (
        breakdown.positive / total * 100,
        breakdown.negative / total * 100,
        breakdown.neutral / total * 100,
    )


_DEFAULT_CLASSIFIER = LexiconClassifier()


def classify_document(content: str, classifier: LexiconClassifier | None = None) -> SentimentResult:
    """Classify a document body with the given or default classifier."""
    return (classifier or _DEFAULT_CLASSIFIER).classify(content)


__all__ = ["LexiconClassifier", "classify_document", "round_half_up"]
