"""Search data models."""

from dataclasses import dataclass

from search_server.domain.model import DocumentStatus


@dataclass(frozen=True, slots=True)
class DocumentData:
    """Per-document attributes kept after indexing."""

    rating: int
    status: DocumentStatus
