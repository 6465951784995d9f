"""Tests for legalsent.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from legalsent.config import (
    CONFIG_FILENAME,
    ConfigError,
    LegalSentConfig,
    build_lexicon,
    load_config,
)
from legalsent.export import DEFAULT_EXPORT_NAME
from legalsent.lexicon import DEFAULT_LEXICON


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, LegalSentConfig)
    assert config.root == tmp_path.resolve()
    assert config.lexicon.mode == "extend"
    assert config.batch.max_workers == 1
    assert config.export.path == DEFAULT_EXPORT_NAME
    assert build_lexicon(config) == DEFAULT_LEXICON


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text(
        """
lexicon:
  positive: [amicable, cooperative]
  negative:
    - "penalty"
batch:
  max_workers: 4
export:
  path: "reports/out.csv"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.lexicon.positive == ["amicable", "cooperative"]
    assert config.lexicon.negative == ["penalty"]
    assert config.lexicon.neutral == []
    assert config.batch.max_workers == 4
    assert config.export_path == tmp_path.resolve() / "reports" / "out.csv"

    lexicon = build_lexicon(config)
    assert lexicon.positive[: len(DEFAULT_LEXICON.positive)] == DEFAULT_LEXICON.positive
    assert lexicon.positive[-2:] == ("amicable", "cooperative")
    assert lexicon.negative[-1] == "penalty"


def test_replace_mode_drops_default_lists(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        "lexicon:\n  mode: replace\n  positive: [good]\n", encoding="utf-8"
    )

    lexicon = build_lexicon(load_config(tmp_path))
    assert lexicon.positive == ("good",)
    assert lexicon.negative == ()
    assert lexicon.neutral == ()


def test_sibling_file_path_resolves_to_config(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("batch:\n  max_workers: 2\n", encoding="utf-8")
    config = load_config(tmp_path / "documents.txt")
    assert config.batch.max_workers == 2


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "lexicon: [unclosed\n",
        "lexicon:\n  mode: merge\n",
        "batch:\n  max_workers: 0\n",
        "batch:\n  max_workers: many\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_empty_lexicon_entry_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        "lexicon:\n  neutral: ['']\n", encoding="utf-8"
    )
    config = load_config(tmp_path)
    with pytest.raises(ConfigError):
        build_lexicon(config)
