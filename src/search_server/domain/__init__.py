"""Domain layer - value objects and errors with no infrastructure dependencies.

This layer contains:
- Value Objects: immutable results handed back to callers (RankedDocument, MatchResult)
- Enumerations: the document lifecycle contract (DocumentStatus)
- Errors: the typed failure modes of every engine operation
"""

from search_server.domain.errors import (
    DocumentNotFoundError,
    EmptyDocumentError,
    InvalidDocumentIdError,
    InvalidQueryError,
    SearchServerError,
)
from search_server.domain.model import DocumentStatus, MatchResult, RankedDocument


__all__ = [
    "DocumentNotFoundError",
    "DocumentStatus",
    "EmptyDocumentError",
    "InvalidDocumentIdError",
    "InvalidQueryError",
    "MatchResult",
    "RankedDocument",
    "SearchServerError",
]
