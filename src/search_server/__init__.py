"""In-memory TF-IDF document search engine."""

from search_server.domain import (
    DocumentNotFoundError,
    DocumentStatus,
    EmptyDocumentError,
    InvalidDocumentIdError,
    InvalidQueryError,
    MatchResult,
    RankedDocument,
    SearchServerError,
)
from search_server.search.filters import ACTUAL_ONLY, DocumentFilter, StatusFilter
from search_server.search_server import SearchServer


__all__ = [
    "ACTUAL_ONLY",
    "DocumentFilter",
    "DocumentNotFoundError",
    "DocumentStatus",
    "EmptyDocumentError",
    "InvalidDocumentIdError",
    "InvalidQueryError",
    "MatchResult",
    "RankedDocument",
    "SearchServer",
    "SearchServerError",
    "StatusFilter",
]
