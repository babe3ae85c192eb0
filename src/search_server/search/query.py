"""Query parsing into plus and minus term sets."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass

from search_server.domain.errors import InvalidQueryError
from search_server.search.analyzers import split_into_words


MINUS_PREFIX = "-"


@dataclass(frozen=True, slots=True)
class QueryWord:
    """One raw query word after minus-prefix handling."""

    text: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    """Immutable snapshot of the terms a query requires and excludes."""

    plus_words: frozenset[str]
    minus_words: frozenset[str]


def parse_query_word(word: str, stop_words: Container[str]) -> QueryWord:
    """Classify a single non-empty query word.

    A leading ``-`` marks the word as excluded and is stripped once, so
    ``--cat`` excludes documents holding the token ``-cat``. A lone ``-`` is
    rejected.
    """

    is_minus = False
    text = word
    if text.startswith(MINUS_PREFIX):
        is_minus = True
        text = text[len(MINUS_PREFIX) :]
        if not text:
            raise InvalidQueryError(f"Query word {word!r} has no text after the minus sign")
    return QueryWord(text=text, is_minus=is_minus, is_stop=text in stop_words)


def parse_query(raw_query: str, stop_words: Container[str]) -> Query:
    """Split ``raw_query`` into deduplicated plus and minus words, dropping stop words."""

    plus_words: set[str] = set()
    minus_words: set[str] = set()
    for word in split_into_words(raw_query):
        query_word = parse_query_word(word, stop_words)
        if query_word.is_stop:
            continue
        if query_word.is_minus:
            minus_words.add(query_word.text)
        else:
            plus_words.add(query_word.text)
    return Query(frozenset(plus_words), frozenset(minus_words))
