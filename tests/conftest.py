"""Test fixtures and helpers for building tagged sentences.

This module provides:
- make_sentence(): build a Sentence from words plus optional POS and NER tags
- make_mention(): attach a typed mention over a token span of a sentence
- A small NFL gazetteer, both in memory and written to a temporary TSV file
- An NFLEntityExtractor fixture wired to that gazetteer with default settings
"""

from pathlib import Path
from typing import Sequence

import pytest

from nflextract.config import ExtractorConfig
from nflextract.extractor import NFLEntityExtractor
from nflextract.gazetteer import Gazetteer
from nflextract.sentence import EntityMention, Sentence

NFL_PHRASES = {
    "new england patriots": "NFLTeam",
    "new england": "NFLTeam",
    "patriots": "NFLTeam",
    "new york giants": "NFLTeam",
    "giants": "NFLTeam",
    "green bay packers": "NFLTeam",
    "super bowl": "NFLGame",
    "win": "NFLGame",
    "victory": "NFLGame",
}


def make_sentence(
    words: Sequence[str],
    tags: Sequence[str] | None = None,
    ners: Sequence[str] | None = None,
    doc_id: str | None = "doc",
) -> Sentence:
    """Build a sentence with no mentions from parallel word/tag lists."""
    return Sentence.from_words(words, tags=tags, ners=ners, doc_id=doc_id)


def make_mention(
    sentence: Sentence,
    start: int,
    end: int,
    entity_type: str,
    mention_id: str | None = None,
) -> EntityMention:
    """Append a mention over tokens [start, end) and return it."""
    mention_id = mention_id or f"m{len(sentence.mentions)}"
    mention = sentence.make_mention(start, end, entity_type, mention_id)
    sentence.mentions.append(mention)
    return mention


def spans(mentions: Sequence[EntityMention]) -> list[tuple[int, int, str]]:
    return [(m.start, m.end, m.entity_type) for m in mentions]


@pytest.fixture
def gazetteer() -> Gazetteer:
    """In-memory gazetteer with team and game phrases, windows up to 4 tokens."""
    return Gazetteer.from_mapping(NFL_PHRASES, max_phrase_length=4)


@pytest.fixture
def gazetteer_file(tmp_path: Path) -> Path:
    """The NFL_PHRASES gazetteer written as a TSV file."""
    path = tmp_path / "nfl_gazetteer.tsv"
    lines = ["# phrase\ttype", ""]
    lines += [f"{phrase}\t{entity_type}" for phrase, entity_type in NFL_PHRASES.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def extractor(gazetteer: Gazetteer) -> NFLEntityExtractor:
    """Extractor with the default policy (tagger teams replaced by gazetteer teams)."""
    return NFLEntityExtractor(gazetteer, ExtractorConfig(max_phrase_length=gazetteer.max_phrase_length))
