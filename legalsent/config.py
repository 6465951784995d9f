"""Configuration loading for legalsent (.legalsent.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .export import DEFAULT_EXPORT_NAME
from .lexicon import DEFAULT_LEXICON, Lexicon, LexiconError

CONFIG_FILENAME = ".legalsent.yml"
_LEXICON_MODES = {"extend", "replace"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LexiconConfig:
    """Word list overrides applied on top of (or instead of) the defaults."""

    mode: str = "extend"
    positive: List[str] = field(default_factory=list)
    negative: List[str] = field(default_factory=list)
    neutral: List[str] = field(default_factory=list)


@dataclass
class BatchConfig:
    """Fan-out settings for batch analysis."""

    max_workers: int = 1


@dataclass
class ExportConfig:
    """Where CSV exports are written by default."""

    path: str = DEFAULT_EXPORT_NAME


@dataclass
class LegalSentConfig:
    """Represents the settings defined in .legalsent.yml."""

    root: Path
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    @property
    def export_path(self) -> Path:
        return self.root / self.export.path


def load_config(config_path: Path) -> LegalSentConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return LegalSentConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    lexicon = LexiconConfig()
    lexicon_data = _as_dict(data.get("lexicon"))
    if lexicon_data:
        mode = (_as_str(lexicon_data.get("mode")) or "extend").strip().lower()
        if mode not in _LEXICON_MODES:
            raise ConfigError(f"lexicon.mode must be one of: {', '.join(sorted(_LEXICON_MODES))}")
        lexicon = LexiconConfig(
            mode=mode,
            positive=_as_str_list(lexicon_data.get("positive")),
            negative=_as_str_list(lexicon_data.get("negative")),
            neutral=_as_str_list(lexicon_data.get("neutral")),
        )

    batch = BatchConfig()
    batch_data = _as_dict(data.get("batch"))
    if batch_data and batch_data.get("max_workers") is not None:
        workers = _as_int(batch_data.get("max_workers"))
        if workers is None or workers < 1:
            raise ConfigError("batch.max_workers must be a positive integer")
        batch.max_workers = workers

    export = ExportConfig()
    export_data = _as_dict(data.get("export"))
    if export_data:
        export.path = _as_str(export_data.get("path")) or DEFAULT_EXPORT_NAME

    return LegalSentConfig(root=root, lexicon=lexicon, batch=batch, export=export)


def build_lexicon(config: LegalSentConfig) -> Lexicon:
    """Return the lexicon described by ``config``."""
    settings = config.lexicon
    try:
        if settings.mode == "replace":
            return Lexicon(
                positive=tuple(settings.positive),
                negative=tuple(settings.negative),
                neutral=tuple(settings.neutral),
            )
        return DEFAULT_LEXICON.extended(
            positive=settings.positive,
            negative=settings.negative,
            neutral=settings.neutral,
        )
    except LexiconError as exc:
        raise ConfigError(f"Invalid lexicon in {CONFIG_FILENAME}: {exc}") from exc


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "BatchConfig",
    "CONFIG_FILENAME",
    "ConfigError",
    "ExportConfig",
    "LegalSentConfig",
    "LexiconConfig",
    "build_lexicon",
    "load_config",
]
