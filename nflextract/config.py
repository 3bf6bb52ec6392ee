"""Load extractor settings from TOML (e.g. nflextract.toml).

Config file is looked up in order:
  1. The path passed to load_config() (must exist)
  2. Path in NFLEXTRACT_CONFIG env var (if set)
  3. nflextract.toml in the current working directory

If no file is found, built-in defaults are used. Settings live under an
[extractor] table:

    [extractor]
    gazetteer_path = "data/nfl_gazetteer.tsv"
    max_phrase_length = 5
    prefer_dictionary_for_teams = true
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from nflextract.gazetteer import DEFAULT_MAX_PHRASE_LENGTH
from nflextract.pipeline.filtering import FilterPolicy
from nflextract.pipeline.gazetteer_scan import ScanPolicy

logger = logging.getLogger(__name__)

CONFIG_ENV = "NFLEXTRACT_CONFIG"
CONFIG_FILENAME = "nflextract.toml"


class ExtractorConfig(BaseModel, frozen=True):
    """Settings for NFL mention post-processing."""

    prefer_dictionary_for_teams: bool = Field(
        default=True,
        description="Replace tagger NFLTeam mentions with gazetteer matches.",
    )
    max_phrase_length: int = Field(
        default=DEFAULT_MAX_PHRASE_LENGTH,
        ge=1,
        description="Longest token window tested against the gazetteer.",
    )
    gazetteer_path: Path | None = Field(
        default=None,
        description="Tab-separated phrase/type file to load the gazetteer from.",
    )
    drop_games_without_noun_head: bool = Field(
        default=False,
        description="Experimental noun-head filter for NFLGame mentions.",
    )
    match_games_after_score: bool = Field(
        default=False,
        description="Experimental gazetteer matching of NFLGame phrases after a score.",
    )

    def filter_policy(self) -> FilterPolicy:
        return FilterPolicy(
            prefer_dictionary_for_teams=self.prefer_dictionary_for_teams,
            drop_games_without_noun_head=self.drop_games_without_noun_head,
        )

    def scan_policy(self) -> ScanPolicy:
        return ScanPolicy(
            match_teams=self.prefer_dictionary_for_teams,
            match_games_after_score=self.match_games_after_score,
        )


def _default_config_paths() -> list[Path]:
    """Return paths to check for nflextract.toml (first existing wins)."""
    paths: list[Path] = []
    if os.environ.get(CONFIG_ENV):
        paths.append(Path(os.environ[CONFIG_ENV]))
    paths.append(Path.cwd() / CONFIG_FILENAME)
    return paths


def _read_extractor_table(path: Path) -> dict:
    with open(path, "rb") as f:
        data = tomllib.load(f)
    table = data.get("extractor", {})
    if not isinstance(table, dict):
        raise ValueError(f"{path}: [extractor] must be a table")
    if "gazetteer_path" in table:
        # relative gazetteer paths are relative to the config file
        gazetteer_path = Path(table["gazetteer_path"])
        if not gazetteer_path.is_absolute():
            table["gazetteer_path"] = path.parent / gazetteer_path
    return table


def load_config(path: Path | str | None = None) -> ExtractorConfig:
    """Load extractor config from a TOML file.

    Raises:
        FileNotFoundError: If `path` is given and does not exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If a setting has an invalid value.
    """
    if path is not None:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"config file not found: {path}")
        return ExtractorConfig(**_read_extractor_table(path))

    for candidate in _default_config_paths():
        if candidate.is_file():
            logger.debug("Loading extractor config from %s", candidate)
            return ExtractorConfig(**_read_extractor_table(candidate))
    return ExtractorConfig()
