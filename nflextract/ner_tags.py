"""Turn runs of generic NER tags into typed entity mentions."""

from nflextract.sentence import EntityMention, Sentence, make_mention_identifier


def tag_runs(sentence: Sentence, ner_tag: str) -> list[tuple[int, int]]:
    """Return [start, end) spans of maximal contiguous tokens tagged `ner_tag`."""
    runs: list[tuple[int, int]] = []
    start: int | None = None
    for token in sentence.tokens:
        if token.ner == ner_tag:
            if start is None:
                start = token.index
        elif start is not None:
            runs.append((start, token.index))
            start = None
    if start is not None:
        runs.append((start, len(sentence.tokens)))
    return runs


def make_mentions_from_ner_tags(
    sentence: Sentence,
    sentence_index: int,
    ner_tag: str,
    entity_type: str,
) -> list[EntityMention]:
    """Append one `entity_type` mention per run of tokens tagged `ner_tag`.

    Identifiers continue from the current length of the mention list.

    Returns:
        The mentions that were appended.
    """
    added: list[EntityMention] = []
    for start, end in tag_runs(sentence, ner_tag):
        mention_id = make_mention_identifier(sentence, sentence_index, len(sentence.mentions))
        mention = sentence.make_mention(start, end, entity_type, mention_id)
        sentence.mentions.append(mention)
        added.append(mention)
    return added
