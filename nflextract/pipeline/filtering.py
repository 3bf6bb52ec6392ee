"""Removal of entity mentions that are systematic false positives in NFL text.

The generic date tagger labels game-clock phrases ("second half", "third
quarter") and stray numeric fragments ("' 1") as dates, and the statistical
tagger's team mentions are less reliable than the gazetteer scan that runs
afterwards. filter_mentions() drops all of these and keeps everything else in
its original order.
"""

import logging
import re
from typing import Sequence

from pydantic import BaseModel, Field

from nflextract.pipeline.heuristics import headed_by_noun
from nflextract.sentence import EntityMention, Token

logger = logging.getLogger(__name__)

DATE = "Date"
NFL_TEAM = "NFLTeam"
NFL_GAME = "NFLGame"

_GAME_TIME = re.compile(r"half|quarter", re.IGNORECASE)


class FilterPolicy(BaseModel, frozen=True):
    """Switches for mention filtering."""

    prefer_dictionary_for_teams: bool = Field(
        default=True,
        description="Drop every tagger-produced NFLTeam mention; the gazetteer scan replaces them.",
    )
    drop_games_without_noun_head: bool = Field(
        default=False,
        description=(
            "Experimental, off by default: drop NFLGame mentions whose last token is not a noun. "
            "Improves mention precision but lowers relation extraction scores."
        ),
    )


def is_game_time(extent: str) -> bool:
    """True if the text refers to a game-clock segment ("half", "quarter")."""
    return _GAME_TIME.search(extent) is not None


def is_invalid_date(extent: str) -> bool:
    """True if the text has no letters and fewer than two digits."""
    letters = sum(1 for ch in extent if ch.isalpha())
    digits = sum(1 for ch in extent if ch.isdecimal())
    return letters == 0 and digits < 2


def removal_reason(
    mention: EntityMention,
    tokens: Sequence[Token] = (),
    policy: FilterPolicy = FilterPolicy(),
) -> str | None:
    """Return why a mention should be removed, or None to keep it."""
    if mention.entity_type == DATE and is_game_time(mention.extent):
        return "game time"
    if mention.entity_type == DATE and is_invalid_date(mention.extent):
        return "invalid date"
    if policy.prefer_dictionary_for_teams and mention.entity_type == NFL_TEAM:
        return "team predicted by tagger"
    if policy.drop_games_without_noun_head and mention.entity_type == NFL_GAME and not headed_by_noun(mention, tokens):
        return "game headed by non-noun"
    return None


def filter_mentions(
    mentions: Sequence[EntityMention],
    tokens: Sequence[Token] = (),
    policy: FilterPolicy = FilterPolicy(),
) -> list[EntityMention]:
    """Return the mentions that survive filtering, in their original order.

    Args:
        mentions: The sentence's current mentions. Not modified.
        tokens: The sentence's tokens; only read by the noun-head policy.
        policy: Which removal rules to apply.
    """
    kept: list[EntityMention] = []
    for mention in mentions:
        reason = removal_reason(mention, tokens, policy)
        if reason is None:
            kept.append(mention)
        else:
            logger.info("Removing entity mention (%s): %s %r [%d, %d)", reason, mention.entity_type, mention.extent, mention.start, mention.end)
    return kept
