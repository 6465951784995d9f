"""Turns files and built-in samples into documents for analysis."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Iterable, List

from .logging import get_logger
from .models import Document

SUPPORTED_SUFFIXES = (".txt", ".csv")

logger = get_logger("ingest")

_SAMPLES = (
    (
        "Contract_Amendment_2024.txt",
        "Contract",
        "This amendment to the software licensing agreement establishes favorable terms for both "
        "parties. The client agrees to extend the contract period with mutual satisfaction. Both "
        "parties acknowledge the successful completion of milestones and express confidence in "
        "continued collaboration. The revised payment schedule provides adequate flexibility while "
        "maintaining contractual obligations.",
    ),
    (
        "Dispute_Resolution_Case.txt",
        "Dispute",
        "The plaintiff alleges breach of contract and demands immediate remediation. The defendant "
        "disputes these claims and argues for dismissal due to lack of substantial evidence. The "
        "court finds merit in both arguments but expresses concern about the timeline delays. "
        "Significant financial losses are documented, requiring urgent attention to prevent further "
        "deterioration of the business relationship.",
    ),
    (
        "Client_Feedback_Q3.txt",
        "Feedback",
        "We are extremely pleased with the legal services provided during Q3. The team demonstrated "
        "exceptional professionalism and delivered outstanding results within the expected "
        "timeframe. The strategic advice proved invaluable for our business decisions. We highly "
        "recommend this firm and look forward to continued partnership in future endeavors.",
    ),
)


def make_document(
    name: str, content: str, doc_type: str = "Text", id: str | None = None
) -> Document:
    """Build a document, generating an identifier when none is supplied."""
    return Document(id=id if id is not None else uuid.uuid4().hex, name=name, content=content, doc_type=doc_type)


def sample_documents() -> List[Document]:
    """Return the demonstration documents."""
    return [
        Document(id=str(index), name=name, content=content, doc_type=doc_type)
        for index, (name, doc_type, content) in enumerate(_SAMPLES, start=1)
    ]


def load_document(path: Path) -> Document:
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"Document not found: {path}")
    content = path.read_text(encoding="utf-8", errors="replace")
    doc_type = "CSV" if path.suffix.lower() == ".csv" else "Text"
    logger.debug("Loaded %s (%s, %d chars)", path.name, doc_type, len(content))
    return make_document(path.name, content, doc_type)


def load_documents(paths: Iterable[Path]) -> List[Document]:
    """Load files, expanding directories to their supported files in sorted order."""
    documents: List[Document] = []
    for raw in paths:
        path = Path(raw).expanduser()
        if path.is_dir():
            for child in sorted(path.iterdir()):
                if child.is_file() and child.suffix.lower() in SUPPORTED_SUFFIXES:
                    documents.append(load_document(child))
            continue
        documents.append(load_document(path))
    return documents


__all__ = [
    "SUPPORTED_SUFFIXES",
    "load_document",
    "load_documents",
    "make_document",
    "sample_documents",
]
