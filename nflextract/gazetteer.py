"""Phrase gazetteer for deterministic NFL entity lookup.

The gazetteer maps normalized multi-word phrases ("new england patriots") to
entity types ("NFLTeam"). It is built once at startup and shared read-only by
every sentence processed afterwards, so it has no mutating operations; the
phrase index is exposed through a MappingProxyType.

File format read by load_gazetteer():

    # comment
    new england patriots<TAB>NFLTeam
    super bowl<TAB>NFLGame
"""

from __future__ import annotations

import re
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from nflextract.logging import setup_logging

DEFAULT_MAX_PHRASE_LENGTH = 5

_WHITESPACE = re.compile(r"\s+")


def normalize_phrase(text: str) -> str:
    """Lowercase and collapse whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text).strip().lower()


class GazetteerFormatError(ValueError):
    """Raised when a gazetteer file contains a malformed line."""

    def __init__(self, path: Path, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        super().__init__(f"{path}:{line_number}: {reason}")


class GazetteerEntry(BaseModel, frozen=True):
    """One phrase -> entity type pair."""

    phrase: str = Field(min_length=1, description="Normalized phrase.")
    entity_type: str = Field(min_length=1, description="Entity type label.")

    @field_validator("phrase")
    @classmethod
    def phrase_is_normalized(cls, value: str) -> str:
        phrase = normalize_phrase(value)
        if not phrase:
            raise ValueError("gazetteer phrase must not be blank")
        return phrase

    @property
    def token_count(self) -> int:
        return len(self.phrase.split(" "))


class Gazetteer(BaseModel, frozen=True):
    """Immutable phrase -> entity type table.

    Lookups are exact matches on the normalized phrase. Phrases longer than
    `max_phrase_length` tokens are stored but can never be matched by the
    scanner, whose windows never grow past that length.
    """

    entries: tuple[GazetteerEntry, ...] = ()
    max_phrase_length: int = Field(
        default=DEFAULT_MAX_PHRASE_LENGTH,
        ge=1,
        description="Longest token window tested against the gazetteer.",
    )

    _index: Mapping[str, str] = PrivateAttr(default_factory=lambda: MappingProxyType({}))

    def model_post_init(self, __context: Any) -> None:
        # later entries override earlier ones with the same phrase
        self._index = MappingProxyType({entry.phrase: entry.entity_type for entry in self.entries})

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH,
    ) -> "Gazetteer":
        entries = tuple(GazetteerEntry(phrase=phrase, entity_type=entity_type) for phrase, entity_type in mapping.items())
        return cls(entries=entries, max_phrase_length=max_phrase_length)

    @property
    def index(self) -> Mapping[str, str]:
        return self._index

    def lookup(self, phrase: str) -> str | None:
        """Return the entity type for an already-normalized phrase, or None."""
        return self._index.get(phrase)

    def entity_types(self) -> frozenset[str]:
        return frozenset(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, phrase: object) -> bool:
        return phrase in self._index


def _parse_line(path: Path, line_number: int, line: str) -> GazetteerEntry:
    if "\t" not in line:
        raise GazetteerFormatError(path, line_number, "expected '<phrase>\\t<entity type>'")
    phrase, entity_type = line.rsplit("\t", 1)
    phrase = normalize_phrase(phrase)
    entity_type = entity_type.strip()
    if not phrase:
        raise GazetteerFormatError(path, line_number, "empty phrase")
    if not entity_type:
        raise GazetteerFormatError(path, line_number, "empty entity type")
    return GazetteerEntry(phrase=phrase, entity_type=entity_type)


def load_gazetteer(path: Path | str, max_phrase_length: int = DEFAULT_MAX_PHRASE_LENGTH) -> Gazetteer:
    """Load a gazetteer from a tab-separated phrase/type file.

    Args:
        path: File with one `phrase<TAB>entity type` pair per line. Blank lines
            and lines starting with '#' are ignored.
        max_phrase_length: Longest token window the scanner will test.

    Returns:
        The loaded Gazetteer.

    Raises:
        FileNotFoundError: If the file does not exist.
        GazetteerFormatError: If a line is malformed.
    """
    logger = setup_logging(__name__)
    path = Path(path)
    entries: list[GazetteerEntry] = []
    with open(path, "r", encoding="utf-8") as f:
        for line_number, raw in enumerate(f, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith("#"):
                continue
            entries.append(_parse_line(path, line_number, line))

    gazetteer = Gazetteer(entries=tuple(entries), max_phrase_length=max_phrase_length)
    too_long = sum(1 for entry in entries if entry.token_count > max_phrase_length)
    logger.info(
        {
            "message": f"Loaded {len(gazetteer)} gazetteer entries from {path}",
            "gazetteer_file": str(path),
            "entries": len(gazetteer),
            "entity_types": sorted(gazetteer.entity_types()),
            "unreachable_phrases": too_long,
        },
        pprint=True,
    )
    return gazetteer
