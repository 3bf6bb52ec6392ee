"""Token-level heuristics shared by the mention filter and the gazetteer scanner.

Several of these only back experimental policies that are switched off by
default (see FilterPolicy.drop_games_without_noun_head and
ScanPolicy.match_games_after_score).
"""

from typing import Iterable, Sequence

from nflextract.sentence import EntityMention, Token

MAX_SCORE = 100


def parse_score(word: str) -> int | None:
    """Parse a token as a base-10 integer, returning None if it is not one."""
    if word[:1] in ("+", "-"):
        sign, digits = word[0], word[1:]
    else:
        sign, digits = "", word
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    return int(sign + digits)


def is_potential_score(token: Token) -> bool:
    """True if the token reads as a plausible single-team score (0-99)."""
    value = parse_score(token.word)
    return value is not None and 0 <= value < MAX_SCORE


def span_intersects(start: int, end: int, positions: set[int]) -> bool:
    return any(i in positions for i in range(start, end))


def tokens_in_mentions(mentions: Iterable[EntityMention], entity_type: str) -> set[int]:
    """Return every token index covered by a mention of the given type."""
    covered: set[int] = set()
    for mention in mentions:
        if mention.entity_type == entity_type:
            covered.update(range(mention.start, mention.end))
    return covered


def headed_by_noun(mention: EntityMention, tokens: Sequence[Token]) -> bool:
    """True if the mention's last token carries a noun (NN*) POS tag."""
    return tokens[mention.end - 1].tag.startswith("NN")
