"""Random words, sentences and paragraphs.

Words are taken from a corpus in the data store: the locale's ``text.text`` by
default, or the fixed lorem ipsum corpus (``text.lorem_ipsum``) in latin mode.
Every operation accepts ``limit`` to truncate the result to that many
characters.
"""

from __future__ import annotations

import re
from functools import cached_property

from fairy.data import DataMaster
from fairy.data.keys import TextKeys
from fairy.utils.errors import InvalidArgumentError

from .base import BaseProducer

__all__ = ["TextProducer"]

_WORD_RE = re.compile(r"[^\W\d_]+(?:['’-][^\W\d_]+)*")

SENTENCE_MIN_WORDS = 3
SENTENCE_MAX_WORDS = 12


def _limit(text: str, limit: int | None) -> str:
    if limit is None:
        return text
    if limit < 0:
        raise InvalidArgumentError("limit must not be negative")
    return text[:limit].rstrip()


class TextProducer:
    """Generate text in the locale's language or in latin."""

    def __init__(self, data: DataMaster, base: BaseProducer, *, latin: bool = False) -> None:
        self.data = data
        self.base = base
        self.latin = latin

    @property
    def corpus(self) -> str:
        return self.data.get_string(TextKeys.LOREM_IPSUM if self.latin else TextKeys.TEXT)

    @cached_property
    def words(self) -> tuple[str, ...]:
        words = tuple(w.lower() for w in _WORD_RE.findall(self.corpus))
        if not words:
            raise InvalidArgumentError("text corpus contains no words")
        return words

    def lorem_ipsum(self, limit: int | None = None) -> str:
        return _limit(self.data.get_string(TextKeys.LOREM_IPSUM), limit)

    def text(self, limit: int | None = None) -> str:
        """Return the whole corpus of the current mode."""

        return _limit(self.corpus, limit)

    def word(self, count: int = 1, limit: int | None = None) -> str:
        """Return ``count`` random words separated by spaces."""

        if count < 1:
            raise InvalidArgumentError("count must be at least 1")
        return _limit(" ".join(self.base.random_elements(self.words, count)), limit)

    def sentence(self, word_count: int | None = None, limit: int | None = None) -> str:
        """Return a capitalized sentence ending with a full stop."""

        if word_count is None:
            word_count = self.base.random_between(SENTENCE_MIN_WORDS, SENTENCE_MAX_WORDS)
        body = self.word(word_count)
        return _limit(body[0].upper() + body[1:] + ".", limit)

    def paragraph(self, sentence_count: int = 3, limit: int | None = None) -> str:
        if sentence_count < 1:
            raise InvalidArgumentError("sentence_count must be at least 1")
        return _limit(" ".join(self.sentence() for _ in range(sentence_count)), limit)

    def random_string(self, length: int) -> str:
        return self.base.random_string(length)
