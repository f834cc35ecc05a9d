from __future__ import annotations
from typing import Iterator, Optional, Tuple
import re

# Maximal runs outside Unicode White_Space. \s follows str.isspace(), which
# also covers the U+001C..U+001F separators, so those count as token chars.
_TOKEN = re.compile(r"[\S\x1c-\x1f]+")

def iter_tokens(text: str) -> Iterator[str]:
    """Lazily yield whitespace-delimited tokens of `text` (never empty)."""
    for m in _TOKEN.finditer(text):
        yield m.group(0)

def is_word(word: str) -> bool:
    # isalpha() is False for "" so emptiness needs no separate check
    return word.isalpha()

def has_uppercase(word: str) -> bool:
    return any(ch.isupper() for ch in word)

def trim_punctuation(word: str) -> str:
    """Strip leading and trailing runs of non-letter characters.

    Only the boundaries are touched: "¡word" and ".word." become "word",
    while "not-a-word" keeps its hyphens (and is then rejected by is_word).
    """
    start, end = 0, len(word)
    while start < end and not word[start].isalpha():
        start += 1
    while end > start and not word[end - 1].isalpha():
        end -= 1
    if start == 0 and end == len(word):
        return word
    return word[start:end]

def canonical_key(word: str) -> str:
    """Lowercase only when an uppercase letter is present.

    Words made of caseless letters are returned unchanged rather than pushed
    through str.lower().
    """
    if has_uppercase(word):
        return word.lower()
    return word

def iter_candidates(text: str) -> Iterator[Tuple[str, Optional[str]]]:
    """Yield (token, key) for every token; key is None when the token is rejected."""
    for tok in iter_tokens(text):
        w = trim_punctuation(tok)
        yield tok, (canonical_key(w) if is_word(w) else None)

def iter_words(text: str) -> Iterator[str]:
    """Yield the canonical key of every accepted word in `text`, in order."""
    for _, key in iter_candidates(text):
        if key is not None:
            yield key
