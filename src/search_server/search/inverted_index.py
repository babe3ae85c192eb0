"""Inverted index mapping terms to per-document term frequencies."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from search_server.search.stats import term_weight


_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


class InvertedIndex:
    """Nested ``{term: {document_id: term_frequency}}`` container.

    Term frequency is the share of a document's tokens equal to the term, so the
    frequencies of one document across all terms add up to 1.0.
    """

    def __init__(self) -> None:
        self._postings: defaultdict[str, dict[int, float]] = defaultdict(dict)

    def add(self, document_id: int, words: Sequence[str]) -> None:
        """Index ``words`` for ``document_id``; repeated words accumulate."""

        weight = term_weight(len(words))
        for word in words:
            doc_freqs = self._postings[word]
            doc_freqs[document_id] = doc_freqs.get(document_id, 0.0) + weight

    def remove(self, document_id: int) -> int:
        """Drop ``document_id`` from every posting list and return how many it was in.

        Terms left without postings are deleted.
        """

        terms = self.term_frequencies(document_id)
        for term in terms:
            doc_freqs = self._postings[term]
            del doc_freqs[document_id]
            if not doc_freqs:
                del self._postings[term]
        return len(terms)

    def postings(self, term: str) -> Mapping[int, float]:
        """Return a read-only ``{document_id: tf}`` view, empty for unknown terms."""

        doc_freqs = self._postings.get(term)
        if not doc_freqs:
            return _EMPTY_POSTINGS
        return MappingProxyType(doc_freqs)

    def document_frequency(self, term: str) -> int:
        return len(self._postings.get(term, ()))

    def contains(self, term: str, document_id: int) -> bool:
        doc_freqs = self._postings.get(term)
        return bool(doc_freqs) and document_id in doc_freqs

    def term_frequencies(self, document_id: int) -> dict[str, float]:
        """Return every term of ``document_id`` with its frequency."""

        return {term: doc_freqs[document_id] for term, doc_freqs in self._postings.items() if document_id in doc_freqs}

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)
