"""Curated word lists used for containment-based token matching."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from .models import Sentiment


class LexiconError(ValueError):
    """Raised when a lexicon contains unusable entries."""


class Bucket(str, Enum):
    """Classification counters, declared in matching priority order."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"

    @property
    def sentiment(self) -> Sentiment:
        return _BUCKET_SENTIMENTS[self]


_BUCKET_SENTIMENTS = {
    Bucket.POSITIVE: Sentiment.POSITIVE,
    Bucket.NEGATIVE: Sentiment.NEGATIVE,
    Bucket.NEUTRAL: Sentiment.NEUTRAL,
}


@dataclass(frozen=True)
class Lexicon:
    """Immutable positive/negative/neutral word lists.

    Entries are lowercase substrings. A token is assigned to the first bucket,
    in the order returned by :meth:`buckets`, that has an entry contained in it.
    """

    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()
    neutral: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for bucket in Bucket:
            raw = getattr(self, bucket.value)
            if isinstance(raw, str):
                raise LexiconError(f"{bucket.value} lexicon must be a sequence of words, not a string")
            object.__setattr__(self, bucket.value, _normalise(bucket, raw))

    def buckets(self) -> Tuple[Tuple[Bucket, Tuple[str, ...]], ...]:
        """Return ``(bucket, words)`` pairs in matching priority order."""
        return tuple((bucket, getattr(self, bucket.value)) for bucket in Bucket)

    def words(self, bucket: Bucket) -> Tuple[str, ...]:
        return getattr(self, Bucket(bucket).value)

    def extended(
        self,
        *,
        positive: Iterable[str] = (),
        negative: Iterable[str] = (),
        neutral: Iterable[str] = (),
    ) -> "Lexicon":
        """Return a new lexicon with extra words appended, skipping duplicates."""
        return Lexicon(
            positive=_merge(self.positive, positive),
            negative=_merge(self.negative, negative),
            neutral=_merge(self.neutral, neutral),
        )


def _normalise(bucket: Bucket, words: Iterable[str]) -> Tuple[str, ...]:
    cleaned = []
    for word in words:
        if not isinstance(word, str):
            raise LexiconError(f"{bucket.value} lexicon entries must be strings, got {word!r}")
        entry = word.strip().lower()
        # The empty substring is contained in every token.
        if not entry:
            raise LexiconError(f"{bucket.value} lexicon contains an empty entry")
        cleaned.append(entry)
    return tuple(cleaned)


def _merge(existing: Tuple[str, ...], extra: Iterable[str]) -> Tuple[str, ...]:
    merged = list(existing)
    for word in extra:
        key = word.strip().lower() if isinstance(word, str) else word
        if key not in merged:
            merged.append(key)
    return tuple(merged)


DEFAULT_LEXICON = Lexicon(
    positive=(
        "favorable",
        "successful",
        "satisfaction",
        "pleased",
        "exceptional",
        "outstanding",
        "invaluable",
        "confidence",
        "recommend",
        "flexibility",
    ),
    negative=(
        "breach",
        "dispute",
        "dismissal",
        "concern",
        "losses",
        "urgent",
        "deterioration",
        "alleges",
        "demands",
        "delays",
    ),
    neutral=(
        "agreement",
        "establishes",
        "acknowledges",
        "revised",
        "documented",
        "argues",
        "court",
        "finds",
    ),
)


__all__ = ["Bucket", "DEFAULT_LEXICON", "Lexicon", "LexiconError"]
