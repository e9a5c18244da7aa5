"""
cliptails.indexer

Keyword extraction for autocomplete.

Keywords come from the raw clip text, before dedenting, so indentation never
changes token boundaries.
"""

import re
from typing import Iterable

from cliptails.config import ClipHistorySettings

MIN_KEYWORD_LENGTH = 4

TOKEN_PATTERN = re.compile(r"""[^\s()\[\]'"{}<>,.:;=+*&^%$#@!`~?|\\/]+""")
"""A token is a maximal run of characters outside whitespace and punctuation."""


def tokenize(text: str) -> list[str]:
    return TOKEN_PATTERN.findall(text.strip())


def should_ignore_word(
    word: str, ignored_words: Iterable[str], ignored_regexes: Iterable[str]
) -> bool:
    if word in ignored_words:
        return True

    for pattern in ignored_regexes:
        if re.search(pattern, word):
            return True

    return len(word) < MIN_KEYWORD_LENGTH


def index_clip(raw: str, settings: ClipHistorySettings) -> list[str]:
    """
    Return the distinct keywords of `raw`, in order of first occurrence.

    Example:
        >>> index_clip("user.name = get_name(user)", ClipHistorySettings())
        ['user', 'name', 'get_name']
    """
    ignored_words = set(settings.ignored_words)
    keywords: list[str] = []
    seen: set[str] = set()

    for word in tokenize(raw):
        if word in seen:
            continue
        if should_ignore_word(word, ignored_words, settings.ignored_regexes):
            continue
        seen.add(word)
        keywords.append(word)

    return keywords
