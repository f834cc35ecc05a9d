"""Big Bag Of Words.

A WordBag reduces text to a collection of words, each with the number of
times it occurred. Words are separated by whitespace and must consist of one
or more Unicode letters once leading and trailing non-letters are trimmed;
tokens with internal punctuation or digits ("don't", "n0t", "b-banana") are
dropped entirely. Words containing an uppercase letter are stored in their
lowercase form.

    >>> bag = WordBag().extend_from_text("It ain't over untïl it ain't, over.")
    >>> bag.to_dict()
    {'it': 2, 'over': 2, 'untïl': 1}

Keys are plain immutable ``str`` objects owned by the bag. A token that needs
no lowercasing is stored as matched (no extra copy); otherwise the result of
``str.lower()`` is stored. Callers may freely drop or rebind the source text.
"""
from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import logging

from .text import iter_candidates

logger = logging.getLogger(__name__)

class WordBag:
    """Sorted word -> occurrence count mapping built from text."""

    def __init__(self) -> None:
        self._counts: Counter = Counter()

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> WordBag:
        bag = cls()
        for text in texts:
            bag.extend_from_text(text)
        return bag

    def extend_from_text(self, text: str) -> WordBag:
        """Add every valid word found in `text` to this bag and return the bag.

        Returning the bag lets calls chain to cover several texts:

            >>> WordBag().extend_from_text("Hello world.").extend_from_text("Hello").match_count("hello")
            2
        """
        seen = accepted = 0
        for _, key in iter_candidates(text):
            seen += 1
            if key is None:
                continue
            accepted += 1
            self._counts[key] += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "wordbag: %d tokens, %d accepted; %d distinct / %d total",
                seen, accepted, len(self._counts), self.count(),
            )
        return self

    def match_count(self, keyword: str) -> int:
        """Occurrences stored under exactly `keyword`, else 0.

        The keyword is not normalized: pass it lowercase and without
        punctuation, or it will simply not match.
        """
        return self._counts.get(keyword, 0)

    def words(self) -> Iterator[str]:
        # sorted() snapshots the keys, so each call is an independent pass
        yield from sorted(self._counts)

    def items(self) -> Iterator[Tuple[str, int]]:
        for w in sorted(self._counts):
            yield w, self._counts[w]

    def most_common(self, n: Optional[int] = None) -> List[Tuple[str, int]]:
        """(word, count) pairs by descending count, ties in word order."""
        ranked = sorted(self._counts.items(), key=lambda kv: (-kv[1], kv[0]))
        if n is None:
            return ranked
        return ranked[:max(0, n)]

    def count(self) -> int:
        """Total number of words, counting repeated occurrences separately."""
        return sum(self._counts.values())

    def is_empty(self) -> bool:
        return not self._counts

    def to_dict(self) -> Dict[str, int]:
        return dict(self.items())

    def copy(self) -> WordBag:
        other = type(self)()
        other._counts = self._counts.copy()
        return other

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._counts

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"

def word_count(text: str) -> Dict[str, int]:
    """Return the word -> frequency map of a single text, in word order."""
    return WordBag().extend_from_text(text).to_dict()
