"""Delimited export of analysis records."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, List

from .models import AnalysisRecord

EXPORT_COLUMNS = ("Document Name", "Type", "Sentiment", "Confidence", "Summary")
DEFAULT_EXPORT_NAME = "legal_sentiment_analysis_results.csv"


def export_rows(records: Iterable[AnalysisRecord]) -> List[List[str]]:
    """Return the header followed by one row per record."""
    rows = [list(EXPORT_COLUMNS)]
    for record in records:
        rows.append(
            [
                record.document_name,
                record.document_type,
                record.sentiment.value,
                f"{record.confidence}%",
                record.summary,
            ]
        )
    return rows


def render_csv(records: Iterable[AnalysisRecord]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(export_rows(records))
    return buffer.getvalue()


def write_csv(records: Iterable[AnalysisRecord], path: Path) -> Path:
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_csv(records), encoding="utf-8")
    return path


__all__ = ["DEFAULT_EXPORT_NAME", "EXPORT_COLUMNS", "export_rows", "render_csv", "write_csv"]
