"""Load notes pipeline configuration from TOML (e.g. suppliernotes.toml).

Config file is looked up in order:
  1. Path passed to load_config()
  2. Path in SUPPLIERNOTES_CONFIG env var (if set)
  3. suppliernotes.toml in the current working directory

If no file is found, built-in defaults are used.

Recognised tables:

```toml
[lexicon]            # any list replaces the built-in one
positive = ["excellent", "zero defects"]
quality = ["quality", "defects"]

[aliases]            # merged over the built-in alias table
"ACME CORP" = "Acme Corp"

[segmenter]
separator = "===="
banner_markers = ["SUPPLIER PERFORMANCE NOTES"]
skip_prefixes = ["**NOTE:"]
```
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from suppliernotes.clock import IngestionClock
from suppliernotes.ingest import IngestionOrchestrator
from suppliernotes.lexicon import DEFAULT_LEXICON, DEFAULT_NAME_ALIASES, Lexicon
from suppliernotes.pipeline.analyzer import LexiconSentimentAnalyzer
from suppliernotes.pipeline.extractor import NotesExtractor
from suppliernotes.pipeline.patterns import BANNER_MARKERS, SECTION_SEPARATOR, SKIP_LINE_PREFIXES
from suppliernotes.pipeline.resolve import check_aliases
from suppliernotes.pipeline.segmenter import NotesDocumentSegmenter

CONFIG_ENV_VAR = "SUPPLIERNOTES_CONFIG"
CONFIG_FILENAME = "suppliernotes.toml"

_LEXICON_KEYS = ("positive", "negative", "neutral", "quality", "delivery", "pricing")


class NotesConfig(BaseModel, frozen=True):
    """Resolved configuration for one pipeline instance."""

    lexicon: Lexicon = DEFAULT_LEXICON
    aliases: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_NAME_ALIASES))
    separator: str = SECTION_SEPARATOR
    banner_markers: tuple[str, ...] = BANNER_MARKERS
    skip_prefixes: tuple[str, ...] = SKIP_LINE_PREFIXES
    source_path: Path | None = None

    @field_validator("aliases")
    @classmethod
    def aliases_keep_keys(cls, value: dict[str, str]) -> dict[str, str]:
        return check_aliases(value)

    def build_orchestrator(self, clock: IngestionClock | None = None) -> IngestionOrchestrator:
        """Wire an orchestrator from this configuration."""
        return IngestionOrchestrator(
            segmenter=NotesDocumentSegmenter(
                separator=self.separator,
                banner_markers=self.banner_markers,
            ),
            extractor=NotesExtractor(skip_prefixes=self.skip_prefixes),
            analyzer=LexiconSentimentAnalyzer(self.lexicon),
            name_aliases=self.aliases,
            clock=clock,
        )


def _default_config_paths() -> list[Path]:
    """Return paths to check for suppliernotes.toml (first existing wins)."""
    paths: list[Path] = []
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path.cwd() / CONFIG_FILENAME)
    return paths


def _string_list(table: dict[str, Any], key: str, section: str) -> tuple[str, ...]:
    value = table[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"[{section}] {key} must be a list of strings")
    return tuple(value)


def config_from_dict(data: dict[str, Any], source_path: Path | None = None) -> NotesConfig:
    """Build a NotesConfig from parsed TOML data."""
    lexicon_table = data.get("lexicon", {})
    if not isinstance(lexicon_table, dict):
        raise ValueError("[lexicon] must be a table")
    overrides = {
        key: _string_list(lexicon_table, key, "lexicon")
        for key in _LEXICON_KEYS
        if key in lexicon_table
    }
    lexicon = Lexicon(**{**DEFAULT_LEXICON.model_dump(), **overrides}) if overrides else DEFAULT_LEXICON

    alias_table = data.get("aliases", {})
    if not isinstance(alias_table, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in alias_table.items()
    ):
        raise ValueError("[aliases] must map strings to strings")
    aliases = {**DEFAULT_NAME_ALIASES, **alias_table}

    segmenter_table = data.get("segmenter", {})
    if not isinstance(segmenter_table, dict):
        raise ValueError("[segmenter] must be a table")
    settings: dict[str, Any] = {}
    if "separator" in segmenter_table:
        separator = segmenter_table["separator"]
        if not isinstance(separator, str) or not separator:
            raise ValueError("[segmenter] separator must be a non-empty string")
        settings["separator"] = separator
    for key in ("banner_markers", "skip_prefixes"):
        if key in segmenter_table:
            settings[key] = _string_list(segmenter_table, key, "segmenter")

    return NotesConfig(lexicon=lexicon, aliases=aliases, source_path=source_path, **settings)


def load_config(path: str | Path | None = None) -> NotesConfig:
    """Load configuration from TOML, falling back to built-in defaults.

    Args:
        path: Explicit config file. When given it must exist.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        ValueError: If the file is not valid TOML or a value has the wrong shape.
    """
    if path is not None:
        candidates = [Path(path)]
        if not candidates[0].is_file():
            raise FileNotFoundError(f"Config file not found: {path}")
    else:
        candidates = _default_config_paths()

    for candidate in candidates:
        if candidate.is_file():
            with open(candidate, "rb") as f:
                try:
                    data = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ValueError(f"Invalid TOML in {candidate}: {e}") from e
            return config_from_dict(data, source_path=candidate)
    return NotesConfig()
