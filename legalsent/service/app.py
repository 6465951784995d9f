"""FastAPI application entrypoint for legalsent service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional, TypeVar

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from ..batch import analyze_documents, summarize_results
from ..classifier import LexiconClassifier
from ..export import DEFAULT_EXPORT_NAME, render_csv
from ..ingest import make_document
from ..logging import get_logger
from ..models import AnalysisRecord

T = TypeVar("T")

logger = get_logger("service")


class ClassifyRequest(BaseModel):
    content: str


class ScoresModel(BaseModel):
    positive: int
    negative: int
    neutral: int


class ClassifyResponse(BaseModel):
    sentiment: str
    confidence: int
    scores: ScoresModel
    key_phrases: List[str]
    summary: str


class DocumentPayload(BaseModel):
    id: Optional[str] = None
    name: str
    content: str
    type: str = "Text"


class AnalyzeRequest(BaseModel):
    documents: List[DocumentPayload] = Field(default_factory=list)


class RecordResponse(ClassifyResponse):
    id: str
    document_name: str
    document_type: str
    processed_at: str


class AnalyzeResponse(BaseModel):
    records: List[RecordResponse]
    distribution: Dict[str, Dict[str, int]]


class HealthResponse(BaseModel):
    status: str


def _default_classifier() -> LexiconClassifier:
    return LexiconClassifier()


def create_app(
    classifier_factory: Callable[[], LexiconClassifier] = _default_classifier,
) -> FastAPI:
    """Create the FastAPI application exposing legalsent operations."""

    app = FastAPI(title="Legal Sentiment Service", version="1.0.0")

    async def get_classifier() -> LexiconClassifier:
        return classifier_factory()

    async def _in_executor(func: Callable[[], T]) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, func)

    async def _run_batch(
        payload: AnalyzeRequest, classifier: LexiconClassifier
    ) -> List[AnalysisRecord]:
        documents = [
            make_document(doc.name, doc.content, doc.type, id=doc.id) for doc in payload.documents
        ]
        return await _in_executor(lambda: analyze_documents(documents, classifier=classifier))

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/classify", response_model=ClassifyResponse)
    async def classify(
        payload: ClassifyRequest,
        classifier: LexiconClassifier = Depends(get_classifier),
    ) -> ClassifyResponse:
        result = await _in_executor(lambda: classifier.classify(payload.content))
        return ClassifyResponse(**result.to_dict())

    @app.post("/analyze", response_model=AnalyzeResponse)
    async def analyze(
        payload: AnalyzeRequest,
        classifier: LexiconClassifier = Depends(get_classifier),
    ) -> AnalyzeResponse:
        records = await _run_batch(payload, classifier)
        return AnalyzeResponse(
            records=[RecordResponse(**record.to_dict()) for record in records],
            distribution=summarize_results(records).as_dict(),
        )

    @app.post("/export")
    async def export(
        payload: AnalyzeRequest,
        classifier: LexiconClassifier = Depends(get_classifier),
    ) -> Response:
        records = await _run_batch(payload, classifier)
        return Response(
            content=render_csv(records),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{DEFAULT_EXPORT_NAME}"'},
        )

    # LexiconError is a ValueError, so bad lexicons land here too.
    @app.exception_handler(ValueError)
    async def value_error_handler(_: Any, exc: ValueError) -> JSONResponse:
        logger.warning("Rejecting request: %s", exc)
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    logger.info("Serving on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
