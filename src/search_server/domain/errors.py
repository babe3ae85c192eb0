"""Error hierarchy raised by the search engine."""


class SearchServerError(Exception):
    """Base error for the search engine."""


class InvalidQueryError(SearchServerError, ValueError):
    """Raised when a query contains a malformed term such as a bare minus sign."""


class EmptyDocumentError(SearchServerError, ValueError):
    """Raised when a document has no tokens left after stop-word removal."""


class InvalidDocumentIdError(SearchServerError, ValueError):
    """Raised when a document id is negative."""


class DocumentNotFoundError(SearchServerError, KeyError):
    """Raised when a lookup targets a document id that was never added."""

    def __init__(self, document_id: int) -> None:
        super().__init__(document_id)
        self.document_id = document_id

    def __str__(self) -> str:
        return f"Document {self.document_id} is not indexed"
