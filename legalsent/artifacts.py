"""Display artifacts derived from a classification: key phrases and summaries."""

from __future__ import annotations

import re
from typing import Mapping, Tuple

from .logging import get_logger
from .models import Sentiment
from .text import strip, truncate_code_units

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_ELLIPSIS = "..."

DEFAULT_PHRASE_LIMIT = 3
DEFAULT_PHRASE_LENGTH = 100

SUMMARIES: Mapping[Sentiment, str] = {
    Sentiment.POSITIVE: (
        "Document reflects favorable terms, satisfaction, and positive outcomes "
        "with constructive language throughout."
    ),
    Sentiment.NEGATIVE: (
        "Document contains concerning elements including disputes, issues, or "
        "problematic situations requiring attention."
    ),
    Sentiment.NEUTRAL: (
        "Document presents balanced information with standard legal language and neutral tone."
    ),
}

logger = get_logger("artifacts")


def extract_key_phrases(
    text: str,
    *,
    limit: int = DEFAULT_PHRASE_LIMIT,
    max_length: int = DEFAULT_PHRASE_LENGTH,
) -> Tuple[str, ...]:
    """Return excerpts of the first sentences of ``text``.

    Sentences are split on runs of ``.``, ``!`` and ``?``. Blank segments are
    skipped, each excerpt is stripped and cut to ``max_length`` UTF-16 code units, and
    an ellipsis is always appended, truncated or not.
    """
    phrases = []
    for segment in _SENTENCE_SPLIT.split(text):
        if len(phrases) >= limit:
            break
        stripped = strip(segment)
        if not stripped:
            continue
        phrases.append(truncate_code_units(stripped, max_length) + _ELLIPSIS)
    return tuple(phrases)


def generate_summary(sentiment: object) -> str:
    """Return the canned summary sentence for ``sentiment``.

    Labels outside the closed :class:`Sentiment` set fall back to the neutral text.
    """
    label = _coerce_sentiment(sentiment)
    if label is None:
        logger.warning("Unknown sentiment label %r; using neutral summary", sentiment)
        return SUMMARIES[Sentiment.NEUTRAL]
    return SUMMARIES[label]


def _coerce_sentiment(value: object) -> Sentiment | None:
    if isinstance(value, Sentiment):
        return value
    if isinstance(value, str):
        try:
            return Sentiment(value)
        except ValueError:
            return None
    return None


__all__ = [
    "DEFAULT_PHRASE_LENGTH",
    "DEFAULT_PHRASE_LIMIT",
    "SUMMARIES",
    "extract_key_phrases",
    "generate_summary",
]
