from collections.abc import Iterable
from app.models.ng_word import NGWord
from shared.utils.logging import setup_logging

logger = setup_logging()


def _word(ng_word: NGWord | str) -> str:
    return ng_word if isinstance(ng_word, str) else ng_word.word


def find_ng_word(comment: str, ng_words: Iterable[NGWord | str]) -> str | None:
    """Return the first NG word contained in comment, or None.

    Matching is a plain case-sensitive substring test: no tokenizing,
    lower-casing or unicode normalization.
    """
    for ng_word in ng_words:
        word = _word(ng_word)
        if word in comment:
            return word
    return None


def is_spam(comment: str, ng_words: Iterable[NGWord | str]) -> bool:
    return find_ng_word(comment, ng_words) is not None
