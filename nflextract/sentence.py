"""Sentence, token and entity mention models.

A sentence arrives from the upstream tagger with its tokens fixed and an
editable list of entity mentions. Post-processing rewrites that list in
place; tokens are never changed.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_DOC_ID = "EntityMention"


class Token(BaseModel, frozen=True):
    """A single token of a sentence as produced by the upstream tagger."""

    word: str = Field(description="Surface word.")
    tag: str = Field(default="", description="Part-of-speech tag.")
    ner: str = Field(default="O", description="Named-entity tag from the generic tagger.")
    index: int = Field(ge=0, description="0-based position within the sentence.")


class EntityMention(BaseModel, frozen=True):
    """A typed span of tokens detected as an entity occurrence.

    The span is half-open: `start` is inclusive and `end` exclusive.
    """

    mention_id: str = Field(description="Identifier unique within the sentence.")
    entity_type: str = Field(description="Type label, e.g. 'Date', 'NFLTeam', 'NFLGame'.")
    start: int = Field(ge=0, description="First token index (inclusive).")
    end: int = Field(description="Last token index (exclusive).")
    extent: str = Field(description="Surface words of the span joined by single spaces.")

    @model_validator(mode="after")
    def span_is_not_empty(self) -> "EntityMention":
        if self.end <= self.start:
            raise ValueError(f"mention span [{self.start}, {self.end}) is empty")
        return self

    def __len__(self) -> int:
        return self.end - self.start


class Sentence(BaseModel):
    """Tokens plus the current mention list for one sentence."""

    model_config = ConfigDict(validate_assignment=True)

    tokens: tuple[Token, ...] = ()
    mentions: list[EntityMention] = Field(default_factory=list)
    doc_id: str | None = None

    @model_validator(mode="after")
    def spans_within_tokens(self) -> "Sentence":
        for position, token in enumerate(self.tokens):
            if token.index != position:
                raise ValueError(f"token {token.word!r} has index {token.index}, expected {position}")
        for mention in self.mentions:
            if mention.end > len(self.tokens):
                raise ValueError(
                    f"mention {mention.mention_id} ends at {mention.end}, past the last token ({len(self.tokens)})"
                )
        return self

    @classmethod
    def from_words(
        cls,
        words: Sequence[str],
        tags: Sequence[str] | None = None,
        ners: Sequence[str] | None = None,
        doc_id: str | None = None,
    ) -> "Sentence":
        tags = tags if tags is not None else [""] * len(words)
        ners = ners if ners is not None else ["O"] * len(words)
        if len(tags) != len(words) or len(ners) != len(words):
            raise ValueError("words, tags and ners must have the same length")
        tokens = tuple(
            Token(word=word, tag=tag, ner=ner, index=i)
            for i, (word, tag, ner) in enumerate(zip(words, tags, ners))
        )
        return cls(tokens=tokens, doc_id=doc_id)

    def words(self) -> list[str]:
        return [token.word for token in self.tokens]

    def extent_of(self, start: int, end: int) -> str:
        return " ".join(token.word for token in self.tokens[start:end])

    def make_mention(self, start: int, end: int, entity_type: str, mention_id: str) -> EntityMention:
        """Build a mention over tokens [start, end) with its extent taken from the tokens."""
        if end > len(self.tokens):
            raise ValueError(f"span [{start}, {end}) exceeds sentence length {len(self.tokens)}")
        return EntityMention(
            mention_id=mention_id,
            entity_type=entity_type,
            start=start,
            end=end,
            extent=self.extent_of(start, end),
        )


def make_mention_identifier(sentence: Sentence, sentence_index: int, offset: int) -> str:
    """Mint a mention identifier scoped to (document, sentence, offset)."""
    doc_id = sentence.doc_id or DEFAULT_DOC_ID
    return f"{doc_id}-{sentence_index}-{offset}"
