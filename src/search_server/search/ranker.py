"""TF-IDF ranking over the inverted index."""

from __future__ import annotations

from collections import defaultdict
from functools import cmp_to_key
import logging

from search_server.domain.model import RankedDocument
from search_server.search.document_store import DocumentStore
from search_server.search.filters import DocumentFilter
from search_server.search.inverted_index import InvertedIndex
from search_server.search.query import Query
from search_server.search.stats import calculate_idf


logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 5
DEFAULT_RELEVANCE_EPSILON = 1e-6


class TfIdfRanker:
    """Score documents for a parsed query and return the best ones.

    Relevance of a document is the sum of ``tf * idf`` over the plus words it
    contains. Documents holding any minus word are dropped outright. Results
    are ordered by relevance, and by rating when two relevances differ by less
    than ``epsilon``.
    """

    def __init__(self, *, limit: int = DEFAULT_RESULT_LIMIT, epsilon: float = DEFAULT_RELEVANCE_EPSILON) -> None:
        self.limit = limit
        self.epsilon = epsilon
        self._sort_key = cmp_to_key(self._compare)

    def _compare(self, lhs: RankedDocument, rhs: RankedDocument) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

    def find_all_documents(
        self,
        index: InvertedIndex,
        store: DocumentStore,
        query: Query,
        doc_filter: DocumentFilter,
    ) -> list[RankedDocument]:
        """Return every document matching ``query`` and ``doc_filter``, unsorted."""

        relevance: dict[int, float] = defaultdict(float)
        total_docs = len(store)

        for word in query.plus_words:
            doc_freq = index.document_frequency(word)
            if not doc_freq:
                continue
            idf = calculate_idf(doc_freq, total_docs)
            postings = index.postings(word)
            for document_id, term_freq in postings.items():
                data = store.find(document_id)
                if data is None or not doc_filter(document_id, data.status, data.rating):
                    continue
                relevance[document_id] += term_freq * idf

        for word in query.minus_words:
            for document_id in index.postings(word):
                relevance.pop(document_id, None)

        return [
            RankedDocument(document_id=document_id, relevance=score, rating=store.get(document_id).rating)
            for document_id, score in relevance.items()
        ]

    def rank(
        self,
        index: InvertedIndex,
        store: DocumentStore,
        query: Query,
        doc_filter: DocumentFilter,
    ) -> list[RankedDocument]:
        """Return at most ``limit`` documents, best first."""

        candidates = self.find_all_documents(index, store, query, doc_filter)
        # The filter is applied again before sorting.
        matched = [
            doc for doc in candidates if doc_filter(doc.document_id, store.get(doc.document_id).status, doc.rating)
        ]
        matched.sort(key=self._sort_key)
        if len(matched) > self.limit:
            logger.debug("Truncating %d matches to %d", len(matched), self.limit)
            del matched[self.limit :]
        return matched
