"""Package logger setup for the CLI, the HTTP service and per-document analysis.

Records may carry a ``document`` attribute naming the document they concern;
:func:`document_logger` attaches it and every handler installed here renders
it ahead of the message.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, MutableMapping, Tuple

_LOGGER_NAME = "legalsent"

_CONSOLE_FORMAT = "[legalsent] %(levelname)s %(document)s%(message)s"
_SERVICE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(document)s%(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(document)s%(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the legalsent hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


class DocumentLogAdapter(logging.LoggerAdapter):
    """Tags every record with the name of the document being analysed."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["document"] = f"{self.extra['document']}: "
        kwargs["extra"] = extra
        return msg, kwargs


def document_logger(logger: logging.Logger, document_name: str) -> DocumentLogAdapter:
    return DocumentLogAdapter(logger, {"document": document_name})


class _DocumentContextFilter(logging.Filter):
    # Records logged without a document still need the attribute for formatting.
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "document"):
            record.document = ""
        return True


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    service: bool = False,
) -> logging.Logger:
    """Install console (and optional file) handlers on the package logger.

    ``service`` switches the console format to timestamped lines with the
    logger name, which suits the long-running HTTP process. Calling this again
    replaces the handlers from the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_SERVICE_FORMAT if service else _CONSOLE_FORMAT))
    handlers: list[logging.Handler] = [console]

    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(_DocumentContextFilter())
        logger.addHandler(handler)

    return logger


__all__ = ["DocumentLogAdapter", "configure_logging", "document_logger", "get_logger"]
