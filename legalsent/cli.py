"""CLI entrypoints for legalsent commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Sequence

from .batch import analyze_documents, summarize_results
from .classifier import LexiconClassifier
from .config import ConfigError, build_lexicon, load_config
from .export import write_csv
from .ingest import load_documents, sample_documents
from .logging import configure_logging, get_logger
from .models import AnalysisRecord, Document, Sentiment, SentimentResult


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .legalsent.yml or the directory holding it (defaults to current directory).",
    )


def _add_json_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit machine-readable JSON instead of text.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legalsent",
        description="Classify the sentiment of legal documents with a lexicon-based scorer.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="FILE",
        help="Also write log records, tagged with their document, to FILE.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser(
        "classify",
        help="Classify a single piece of text.",
    )
    _add_verbose_option(classify_parser, suppress_default=True)
    _add_config_option(classify_parser)
    _add_json_option(classify_parser)
    classify_parser.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Text to classify; reads standard input when omitted or '-'.",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze documents and print a sentiment overview.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_config_option(analyze_parser)
    _add_json_option(analyze_parser)
    analyze_parser.add_argument(
        "paths",
        nargs="*",
        help="Text or CSV files, or directories containing them.",
    )
    analyze_parser.add_argument(
        "--samples",
        action="store_true",
        help="Include the built-in sample documents.",
    )
    analyze_parser.add_argument(
        "--export",
        nargs="?",
        const="",
        default=None,
        metavar="FILE",
        help="Write results as CSV (defaults to the configured export path).",
    )
    analyze_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker threads (overrides batch.max_workers).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for legalsent commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
        service=args.command == "serve",
    )
    logger = get_logger("cli")

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return

    try:
        config = load_config(Path(args.config))
        classifier = LexiconClassifier(build_lexicon(config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "classify":
        text = sys.stdin.read() if args.text == "-" else args.text
        result = classifier.classify(text)
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print(_format_result(result))
    elif args.command == "analyze":
        if not args.paths and not args.samples:
            parser.exit(1, "Provide at least one path or --samples.\n")
        try:
            documents: List[Document] = load_documents(Path(p) for p in args.paths)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        if args.samples:
            documents.extend(sample_documents())
        workers = args.workers if args.workers is not None else config.batch.max_workers
        if workers < 1:
            parser.exit(1, "--workers must be at least 1\n")

        records = analyze_documents(documents, classifier=classifier, max_workers=workers)
        logger.info("Analyzed %d documents", len(records))

        if args.json:
            payload = {
                "records": [record.to_dict() for record in records],
                "distribution": summarize_results(records).as_dict(),
            }
            print(json.dumps(payload, indent=2))
        else:
            print(_format_records(records))

        if args.export is not None:
            target = Path(args.export) if args.export else config.export_path
            written = write_csv(records, target)
            logger.info("Exported results to %s", _relativize(written))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _format_result(result: SentimentResult) -> str:
    scores = result.scores
    lines = [
        f"Sentiment: {result.sentiment.value} ({result.confidence}% confidence)",
        f"Scores: positive {scores.positive}% | negative {scores.negative}% | neutral {scores.neutral}%",
        f"Summary: {result.summary}",
    ]
    if result.key_phrases:
        lines.append("Key phrases:")
        lines.extend(f"  - {phrase}" for phrase in result.key_phrases)
    return "\n".join(lines)


def _format_records(records: Sequence[AnalysisRecord]) -> str:
    if not records:
        return "No documents analyzed."
    lines = [
        f"{record.document_name} [{record.document_type}]: "
        f"{record.sentiment.value} ({record.confidence}%)"
        for record in records
    ]
    distribution = summarize_results(records)
    lines.append("")
    for label in Sentiment:
        lines.append(
            f"{label.value}: {distribution.count(label)} ({distribution.percentage(label)}%)"
        )
    return "\n".join(lines)


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
