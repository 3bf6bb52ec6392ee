"""Greedy longest-match gazetteer scan that adds mentions the tagger missed.

For every start position the scan tries the longest token window first,
shrinking it one token at a time until a gazetteer phrase of an accepted type
matches. An accepted match is appended as a new mention and scanning resumes
at its end, so matches inserted by one scan never overlap each other. They
may overlap mentions that were already in the sentence.
"""

import logging

from pydantic import BaseModel, Field

from nflextract.gazetteer import Gazetteer
from nflextract.pipeline.filtering import NFL_GAME, NFL_TEAM
from nflextract.pipeline.heuristics import is_potential_score, span_intersects, tokens_in_mentions
from nflextract.sentence import Sentence, make_mention_identifier

logger = logging.getLogger(__name__)

# how far back from a candidate game phrase to look for a score
SCORE_LOOKBEHIND = 2


class ScanPolicy(BaseModel, frozen=True):
    """Which gazetteer types the scan may surface."""

    match_teams: bool = Field(default=True, description="Insert NFLTeam mentions from the gazetteer.")
    match_games_after_score: bool = Field(
        default=False,
        description=(
            "Experimental, off by default: also insert NFLGame mentions that follow a score "
            "(e.g. 'a 10 to 5 win'). Raises recall but costs more precision than it gains."
        ),
    )


def join_window(sentence: Sentence, start: int, end: int) -> str:
    """Lowercased words of tokens [start, end) joined by single spaces."""
    return " ".join(token.word.lower() for token in sentence.tokens[start:end])


def _accepts(
    sentence: Sentence,
    start: int,
    end: int,
    gazetteer_type: str | None,
    game_tokens: set[int],
    policy: ScanPolicy,
) -> bool:
    if gazetteer_type is None:
        return False
    if gazetteer_type == NFL_TEAM:
        return policy.match_teams
    if gazetteer_type == NFL_GAME and policy.match_games_after_score:
        preceded_by_score = any(
            is_potential_score(sentence.tokens[i])
            for i in range(max(0, start - SCORE_LOOKBEHIND), start)
        )
        return preceded_by_score and not span_intersects(start, end, game_tokens)
    return False


def scan_gazetteer(
    sentence: Sentence,
    sentence_index: int,
    gazetteer: Gazetteer,
    identifier_offset: int,
    policy: ScanPolicy = ScanPolicy(),
) -> int:
    """Append gazetteer matches to `sentence.mentions`.

    Args:
        sentence: Sentence whose mention list is extended in place.
        sentence_index: Position of the sentence in its document, used in identifiers.
        gazetteer: Phrase table to match against.
        identifier_offset: First offset used to mint identifiers for new mentions.
        policy: Which gazetteer types may be inserted.

    Returns:
        The next unused identifier offset.
    """
    n = len(sentence.tokens)
    game_tokens = tokens_in_mentions(sentence.mentions, NFL_GAME) if policy.match_games_after_score else set()

    start = 0
    while start < n:
        label = None
        end = min(start + gazetteer.max_phrase_length, n)
        while end > start:
            text = join_window(sentence, start, end)
            gazetteer_type = gazetteer.lookup(text)
            if _accepts(sentence, start, end, gazetteer_type, game_tokens, policy):
                logger.debug("Found entity mention candidate from gazetteer: %r", text)
                label = gazetteer_type
                break
            end -= 1

        if label is None:
            start += 1
            continue

        mention_id = make_mention_identifier(sentence, sentence_index, identifier_offset)
        identifier_offset += 1
        mention = sentence.make_mention(start, end, label, mention_id)
        sentence.mentions.append(mention)
        logger.info("Added entity mention from gazetteer: %s %r [%d, %d)", label, mention.extent, start, end)
        start = end

    return identifier_offset
