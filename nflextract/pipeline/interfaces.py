"""Pipeline interface for per-sentence mention post-processing.

Post-processing runs after the upstream tagger has filled in tokens,
per-token tags and an initial mention list. Implementations correct that
list in place for one sentence at a time and keep no state between
sentences, so independent sentences can be processed concurrently.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from nflextract.sentence import Sentence


class SentencePostProcessorInterface(ABC):
    """Correct the entity mentions of a tagged sentence."""

    @abstractmethod
    def postprocess(self, sentence: Sentence, sentence_index: int) -> None:
        """Rewrite `sentence.mentions` in place.

        Args:
            sentence: The tagged sentence. Tokens are read, never modified.
            sentence_index: Position of the sentence in its document; used to
                mint identifiers for mentions added here.
        """

    def postprocess_all(self, sentences: Iterable[Sentence]) -> list[Sentence]:
        """Post-process every sentence of a document, numbering them from 0."""
        processed: list[Sentence] = []
        for index, sentence in enumerate(sentences):
            self.postprocess(sentence, index)
            processed.append(sentence)
        return processed
