"""
NFL entity mention post-processing.

Corrects the output of a generic information-extraction tagger for NFL game
reports: drops mentions that are systematic false positives in this domain
and adds team mentions the tagger misses, using a longest-match scan over a
phrase gazetteer. Every decision is local to one sentence.

    from nflextract import NFLEntityExtractor, load_gazetteer

    extractor = NFLEntityExtractor(load_gazetteer("nfl_gazetteer.tsv"))
    for index, sentence in enumerate(sentences):
        extractor.postprocess(sentence, index)
"""

from nflextract.config import ExtractorConfig, load_config
from nflextract.extractor import NFLEntityExtractor
from nflextract.gazetteer import Gazetteer, GazetteerEntry, GazetteerFormatError, load_gazetteer
from nflextract.sentence import EntityMention, Sentence, Token

__all__ = [
    "EntityMention",
    "ExtractorConfig",
    "Gazetteer",
    "GazetteerEntry",
    "GazetteerFormatError",
    "NFLEntityExtractor",
    "Sentence",
    "Token",
    "load_config",
    "load_gazetteer",
]

__version__ = "0.1.0"
