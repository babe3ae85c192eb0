"""Analyzer utilities for the in-memory search engine.

Documents and queries go through the same composable tokenizer/filter design:
a tokenizer turns raw text into a stream of tokens and filters drop or rewrite
them. Tokens are case-sensitive and keep punctuation; only the space character
separates them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol


WORD_SEPARATOR = " "


@dataclass
class Token:
    """Represents a token emitted by analyzers."""

    text: str
    position: int
    start_char: int
    end_char: int


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:  # pragma: no cover - interface definition
        ...


class WhitespaceTokenizer:
    """Scans text left to right and emits a token at every run of spaces."""

    def __init__(self, separator: str = WORD_SEPARATOR) -> None:
        self.separator = separator

    def __call__(self, text: str) -> Iterator[Token]:
        position = 0
        start: int | None = None
        for index, char in enumerate(text):
            if char == self.separator:
                if start is not None:
                    yield Token(text=text[start:index], position=position, start_char=start, end_char=index)
                    position += 1
                    start = None
            elif start is None:
                start = index
        if start is not None:
            yield Token(text=text[start:], position=position, start_char=start, end_char=len(text))


class StopFilter:
    """Removes stop words from the stream. Matching is exact and case-sensitive."""

    def __init__(self, stop_words: Iterable[str] | None = None) -> None:
        self.stop_words = set(stop_words or ())

    def __call__(self, tokens: Iterable[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.text not in self.stop_words:
                yield token


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[Token]:
        stream: Iterable[Token] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        tokens = list(stream)
        for idx, token in enumerate(tokens):  # normalize positions post-filtering
            token.position = idx
        return tokens


class StandardAnalyzer:
    """Whitespace tokenization followed by stop-word removal.

    The stop-word set is shared by reference, so words registered on it later
    apply to every subsequent call.
    """

    def __init__(self, stop_words: set[str] | None = None) -> None:
        self.stop_filter = StopFilter()
        if stop_words is not None:
            self.stop_filter.stop_words = stop_words
        self.pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [self.stop_filter])

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_filter.stop_words

    def __call__(self, text: str) -> list[Token]:
        return self.pipeline(text)

    def words(self, text: str) -> list[str]:
        return [token.text for token in self(text)]


def split_into_words(text: str) -> list[str]:
    """Split ``text`` on spaces, dropping empty fragments."""

    return [token.text for token in WhitespaceTokenizer()(text)]


def remove_stop_words(words: Iterable[str], stop_words: Iterable[str]) -> list[str]:
    """Return ``words`` without the entries present in ``stop_words``, order preserved."""

    vocab = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
    return [word for word in words if word not in vocab]
