"""NFL-specific correction of tagger output, one sentence at a time.

The upstream statistical tagger does not recognize dates and is unreliable on
team names. For each sentence the extractor:

1. adds Date mentions from the generic tagger's DATE token runs,
2. records how many mentions the sentence has at that point,
3. removes known false positives (see nflextract.pipeline.filtering),
4. when prefer_dictionary_for_teams is set, adds team mentions found by a
   longest-match gazetteer scan, numbering them from the count recorded in
   step 2.

The count in step 2 is taken before filtering. Identifiers of inserted
mentions therefore start after every identifier the sentence had before
removal, even if some of those mentions are gone.
"""

from __future__ import annotations

from nflextract.config import ExtractorConfig
from nflextract.gazetteer import Gazetteer, load_gazetteer
from nflextract.logging import setup_logging
from nflextract.ner_tags import make_mentions_from_ner_tags
from nflextract.pipeline.filtering import DATE, filter_mentions
from nflextract.pipeline.gazetteer_scan import scan_gazetteer
from nflextract.pipeline.interfaces import SentencePostProcessorInterface
from nflextract.sentence import Sentence

DATE_NER_TAG = "DATE"


class NFLEntityExtractor(SentencePostProcessorInterface):
    """Post-processes tagged sentences for the NFL domain.

    The gazetteer is held by reference and never modified, so a single
    extractor (or several sharing one gazetteer) can serve concurrent
    sentence workers.
    """

    def __init__(self, gazetteer: Gazetteer, config: ExtractorConfig | None = None):
        """Initialize the extractor.

        Args:
            gazetteer: Phrase table for the team scan; its max_phrase_length
                bounds the scan windows.
            config: Extractor settings. Defaults to ExtractorConfig() with the
                gazetteer's max_phrase_length.

        Raises:
            ValueError: If config.max_phrase_length differs from the gazetteer's.
        """
        if config is not None and config.max_phrase_length != gazetteer.max_phrase_length:
            raise ValueError(
                f"config max_phrase_length={config.max_phrase_length} does not match "
                f"gazetteer max_phrase_length={gazetteer.max_phrase_length}; "
                "load the gazetteer with the config's value"
            )
        self.gazetteer = gazetteer
        self.config = config or ExtractorConfig(max_phrase_length=gazetteer.max_phrase_length)
        self._filter_policy = self.config.filter_policy()
        self._scan_policy = self.config.scan_policy()
        self.logger = setup_logging(__name__)

    @classmethod
    def from_config(cls, config: ExtractorConfig) -> "NFLEntityExtractor":
        """Build an extractor whose gazetteer is loaded from `config.gazetteer_path`.

        Raises:
            ValueError: If the config names no gazetteer file.
        """
        if config.gazetteer_path is None:
            raise ValueError("ExtractorConfig.gazetteer_path is required to load a gazetteer")
        gazetteer = load_gazetteer(config.gazetteer_path, max_phrase_length=config.max_phrase_length)
        return cls(gazetteer, config)

    def postprocess(self, sentence: Sentence, sentence_index: int) -> None:
        make_mentions_from_ner_tags(sentence, sentence_index, DATE_NER_TAG, DATE)

        original_count = len(sentence.mentions)
        sentence.mentions = filter_mentions(sentence.mentions, sentence.tokens, self._filter_policy)
        next_offset = original_count
        # the experimental game matching is gated on the team preference too
        if self.config.prefer_dictionary_for_teams:
            next_offset = scan_gazetteer(
                sentence,
                sentence_index,
                self.gazetteer,
                original_count,
                self._scan_policy,
            )

        self.logger.debug(
            {
                "sentence_index": sentence_index,
                "mentions_before_filter": original_count,
                "mentions_after": len(sentence.mentions),
                "inserted": next_offset - original_count,
            },
            pprint=True,
        )
