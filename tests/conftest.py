from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from legalsent.classifier import LexiconClassifier
from legalsent.lexicon import Lexicon

FIXED_TIME = datetime(2024, 9, 30, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_clock():
    """Return a clock that always reports the same instant."""
    return lambda: FIXED_TIME


@pytest.fixture
def synthetic_classifier() -> LexiconClassifier:
    """Classifier over a tiny lexicon that keeps expected counts easy to reason about."""
    lexicon = Lexicon(positive=("good",), negative=("bad",), neutral=("meh",))
    return LexiconClassifier(lexicon)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo CLI logging configuration so caplog keeps seeing package records."""
    yield
    logger = logging.getLogger("legalsent")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
