"""Mention filtering and gazetteer scanning stages."""

from nflextract.pipeline.filtering import FilterPolicy, filter_mentions, is_game_time, is_invalid_date
from nflextract.pipeline.gazetteer_scan import ScanPolicy, scan_gazetteer
from nflextract.pipeline.interfaces import SentencePostProcessorInterface

__all__ = [
    "FilterPolicy",
    "ScanPolicy",
    "SentencePostProcessorInterface",
    "filter_mentions",
    "is_game_time",
    "is_invalid_date",
    "scan_gazetteer",
]
