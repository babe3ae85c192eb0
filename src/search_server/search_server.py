"""In-memory search engine facade.

``SearchServer`` owns one inverted index, one document store and one stop-word
set, and exposes the whole engine through five operations:

- ``set_stop_words``: register words ignored by indexing and query parsing
- ``add_document``: tokenize a document and index its term frequencies
- ``find_top_documents``: rank documents for a query with TF-IDF
- ``match_document``: list the query words a single document contains
- ``document_count``: number of documents added so far

Instances are not thread-safe. Callers sharing one engine across threads must
serialize ``add_document`` against every other call.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager, nullcontext
import logging
from typing import Any

from search_server.config import Settings
from search_server.domain.errors import EmptyDocumentError, InvalidDocumentIdError, SearchServerError
from search_server.domain.model import DocumentStatus, MatchResult, RankedDocument
from search_server.observability.metrics import (
    DOCUMENTS_ADDED,
    ERROR_COUNT,
    INDEX_DOC_COUNT,
    SEARCH_LATENCY,
    track_latency,
)
from search_server.observability.tracing import create_span
from search_server.search.analyzers import StandardAnalyzer, split_into_words
from search_server.search.document_store import DocumentStore
from search_server.search.filters import FilterSpec, resolve_filter
from search_server.search.inverted_index import InvertedIndex
from search_server.search.query import Query, parse_query
from search_server.search.ranker import TfIdfRanker
from search_server.search.stats import compute_average_rating


logger = logging.getLogger(__name__)


class SearchServer:
    """TF-IDF search over short documents tagged with a status and ratings."""

    def __init__(
        self,
        stop_words: str | Iterable[str] | None = None,
        *,
        settings: Settings | None = None,
        name: str = "default",
    ) -> None:
        self.settings = settings or Settings()
        self.name = name
        self._stop_words: set[str] = set()
        self._analyzer = StandardAnalyzer(self._stop_words)
        self._index = InvertedIndex()
        self._documents = DocumentStore()
        self._ranker = TfIdfRanker(
            limit=self.settings.max_result_document_count,
            epsilon=self.settings.relevance_epsilon,
        )

        self._stop_words.update(self.settings.get_stop_words())
        if isinstance(stop_words, str):
            self.set_stop_words(stop_words)
        elif stop_words is not None:
            self._stop_words.update(word for word in stop_words if word)

    @property
    def stop_words(self) -> frozenset[str]:
        return frozenset(self._stop_words)

    @property
    def index(self) -> InvertedIndex:
        return self._index

    def document_count(self) -> int:
        """Return the number of distinct document ids added so far."""
        return len(self._documents)

    def set_stop_words(self, text: str) -> None:
        """Add the space-separated words of ``text`` to the stop-word set.

        Documents indexed earlier keep their tokens; only later calls see the
        new stop words.
        """
        words = split_into_words(text)
        self._stop_words.update(words)
        logger.debug("Registered %d stop words (total %d)", len(words), len(self._stop_words))

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Iterable[int] = (),
    ) -> None:
        """Index ``document`` under ``document_id``.

        Raises:
            InvalidDocumentIdError: ``document_id`` is negative
            EmptyDocumentError: no words remain after stop-word removal

        Re-adding an id replaces its words, rating and status. Nothing is
        mutated when an error is raised.
        """
        with self._operation("add_document", {"search.document_id": document_id}):
            if document_id < 0:
                raise InvalidDocumentIdError(f"Document id must be non-negative, got {document_id}")
            status = DocumentStatus(status)
            words = self._analyzer.words(document)
            if not words:
                raise EmptyDocumentError(f"Document {document_id} has no words after stop-word removal")

            rating = compute_average_rating(ratings)
            if document_id in self._documents:
                dropped = self._index.remove(document_id)
                logger.debug("Replacing document %d: dropped %d terms", document_id, dropped)
            self._index.add(document_id, words)
            self._documents.put(document_id, rating, status)

        DOCUMENTS_ADDED.labels(status=status.value).inc()
        INDEX_DOC_COUNT.labels(engine=self.name).set(len(self._documents))
        logger.debug(
            "Indexed document %d: %d words, rating %d, status %s",
            document_id,
            len(words),
            rating,
            status.value,
        )

    def parse_query(self, raw_query: str) -> Query:
        """Parse ``raw_query`` against the current stop words."""
        return parse_query(raw_query, self._stop_words)

    def find_top_documents(self, raw_query: str, doc_filter: FilterSpec = None) -> list[RankedDocument]:
        """Return the best matching documents for ``raw_query``.

        Args:
            raw_query: Space-separated words; a leading ``-`` excludes documents containing the word
            doc_filter: ``None`` for ACTUAL documents, a ``DocumentStatus``, or a
                ``(document_id, status, rating) -> bool`` predicate

        Returns:
            At most ``max_result_document_count`` documents ordered by relevance,
            then by rating for near-equal relevance
        """
        predicate = resolve_filter(doc_filter)
        with (
            track_latency(SEARCH_LATENCY, operation="find_top_documents"),
            self._operation("find_top_documents", {"search.query": raw_query}) as span,
        ):
            query = self.parse_query(raw_query)
            results = self._ranker.rank(self._index, self._documents, query, predicate)
            if span is not None:
                span.set_attribute("search.result_count", len(results))

        logger.debug(
            "Query %r: %d plus words, %d minus words, %d results",
            raw_query,
            len(query.plus_words),
            len(query.minus_words),
            len(results),
        )
        return results

    def match_document(self, raw_query: str, document_id: int) -> MatchResult:
        """Return the plus words of ``raw_query`` present in ``document_id``.

        The word list is empty when the document contains any minus word.

        Raises:
            DocumentNotFoundError: ``document_id`` was never added
            InvalidQueryError: the query holds a malformed minus word
        """
        with (
            track_latency(SEARCH_LATENCY, operation="match_document"),
            self._operation("match_document", {"search.query": raw_query, "search.document_id": document_id}),
        ):
            data = self._documents.get(document_id)
            query = self.parse_query(raw_query)

            if any(self._index.contains(word, document_id) for word in query.minus_words):
                return MatchResult(words=(), status=data.status)

            matched = sorted(word for word in query.plus_words if self._index.contains(word, document_id))
            return MatchResult(words=tuple(matched), status=data.status)

    @contextmanager
    def _operation(self, name: str, attributes: dict[str, Any]) -> Iterator[Any]:
        span_cm = create_span(f"search_server.{name}", attributes=attributes)
        if not self.settings.tracing_enabled:
            span_cm = nullcontext()
        try:
            with span_cm as span:
                yield span
        except SearchServerError as exc:
            ERROR_COUNT.labels(operation=name, error_type=type(exc).__name__).inc()
            logger.warning("%s rejected: %s", name, exc, extra={"operation": name})
            raise
