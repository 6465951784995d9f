"""Tests for the FastAPI service mode."""

from __future__ import annotations

import threading

import pytest
from fastapi.testclient import TestClient

from legalsent.classifier import LexiconClassifier
from legalsent.lexicon import Lexicon, LexiconError
from legalsent.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_classify_endpoint(client: TestClient) -> None:
    response = client.post(
        "/classify",
        json={"content": "We are extremely pleased with the exceptional outstanding results."},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["sentiment"] == "Positive"
    assert data["confidence"] == 95
    assert data["scores"] == {"positive": 100, "negative": 0, "neutral": 0}
    assert data["key_phrases"] == [
        "We are extremely pleased with the exceptional outstanding results..."
    ]


def test_classify_endpoint_rejects_missing_content(client: TestClient) -> None:
    response = client.post("/classify", json={})
    assert response.status_code == 422


def test_analyze_endpoint_preserves_order_and_ids(client: TestClient) -> None:
    response = client.post(
        "/analyze",
        json={
            "documents": [
                {"id": "x-1", "name": "dispute.txt", "content": "Breach and losses.", "type": "Dispute"},
                {"name": "plain.txt", "content": "Nothing to see."},
            ]
        },
    )
    assert response.status_code == 200
    data = response.json()
    first, second = data["records"]
    assert first["id"] == "x-1"
    assert first["document_type"] == "Dispute"
    assert first["sentiment"] == "Negative"
    assert second["id"]
    assert second["document_type"] == "Text"
    assert second["sentiment"] == "Neutral"
    assert data["distribution"]["Negative"] == {"count": 1, "percentage": 50}


def test_analyze_endpoint_accepts_empty_batch(client: TestClient) -> None:
    response = client.post("/analyze", json={"documents": []})
    assert response.status_code == 200
    data = response.json()
    assert data["records"] == []
    assert data["distribution"]["Neutral"] == {"count": 0, "percentage": 0}


def test_export_endpoint_returns_csv(client: TestClient) -> None:
    response = client.post(
        "/export",
        json={"documents": [{"id": "1", "name": "a.txt", "content": "Outstanding."}]},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.splitlines()
    assert lines[0] == "Document Name,Type,Sentiment,Confidence,Summary"
    assert lines[1].startswith("a.txt,Text,Positive,95%,")


def test_custom_classifier_factory_is_used() -> None:
    classifier = LexiconClassifier(Lexicon(negative=("nothing",)))
    client = TestClient(create_app(lambda: classifier))
    response = client.post("/classify", json={"content": "Nothing to report."})
    assert response.json()["sentiment"] == "Negative"


class _ThreadRecordingClassifier(LexiconClassifier):
    def __init__(self) -> None:
        super().__init__()
        self.threads: list[int] = []

    def classify(self, text: str):
        self.threads.append(threading.get_ident())
        return super().classify(text)


def test_classify_runs_off_the_event_loop_thread() -> None:
    classifier = _ThreadRecordingClassifier()
    loop_threads: list[int] = []

    def factory() -> LexiconClassifier:
        # Called from the async dependency, i.e. on the event loop thread.
        loop_threads.append(threading.get_ident())
        return classifier

    client = TestClient(create_app(factory))
    response = client.post("/classify", json={"content": "Breach."})

    assert response.status_code == 200
    assert response.json()["sentiment"] == "Negative"
    assert classifier.threads and loop_threads
    assert classifier.threads[0] != loop_threads[0]


def _raising_factory(exc: Exception):
    def factory() -> LexiconClassifier:
        raise exc

    return factory


def test_lexicon_error_maps_to_bad_request() -> None:
    client = TestClient(create_app(_raising_factory(LexiconError("neutral lexicon contains an empty entry"))))
    response = client.post("/classify", json={"content": "text"})

    assert response.status_code == 400
    assert response.json() == {"detail": "neutral lexicon contains an empty entry"}


def test_value_error_maps_to_bad_request() -> None:
    client = TestClient(create_app(_raising_factory(ValueError("max_workers must be at least 1"))))
    response = client.post("/analyze", json={"documents": []})

    assert response.status_code == 400
    assert response.json()["detail"] == "max_workers must be at least 1"
