"""Document attribute storage keyed by document id."""

from __future__ import annotations

from search_server.domain.errors import DocumentNotFoundError
from search_server.domain.model import DocumentStatus
from search_server.search.models import DocumentData


class DocumentStore:
    """Maps document ids to their average rating and lifecycle status."""

    def __init__(self) -> None:
        self._documents: dict[int, DocumentData] = {}

    def put(self, document_id: int, rating: int, status: DocumentStatus) -> DocumentData:
        """Store attributes for ``document_id``, replacing any previous entry."""

        data = DocumentData(rating=rating, status=status)
        self._documents[document_id] = data
        return data

    def get(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def find(self, document_id: int) -> DocumentData | None:
        return self._documents.get(document_id)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
