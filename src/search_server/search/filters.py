"""Document predicates used to narrow ranked results.

A filter is anything callable as ``(document_id, status, rating) -> bool``.
The ranker never inspects filters beyond calling them, so plain functions and
lambdas work alongside the built-in classes below.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, Union

from search_server.domain.model import DocumentStatus


class DocumentFilter(Protocol):
    """Protocol implemented by document filters."""

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:  # pragma: no cover
        ...


@dataclass(frozen=True)
class StatusFilter:
    """Accepts documents whose status equals ``status``."""

    status: DocumentStatus

    def __call__(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return status == self.status


ACTUAL_ONLY = StatusFilter(DocumentStatus.ACTUAL)

FilterSpec = Union[DocumentStatus, DocumentFilter, Callable[[int, DocumentStatus, int], bool], None]


def resolve_filter(spec: FilterSpec) -> DocumentFilter:
    """Normalize the optional filter argument of ``find_top_documents``.

    ``None`` selects ACTUAL documents, a ``DocumentStatus`` selects that status,
    and any callable is used as-is.
    """

    if spec is None:
        return ACTUAL_ONLY
    if isinstance(spec, DocumentStatus):
        return StatusFilter(spec)
    if callable(spec):
        return spec
    raise TypeError(f"Expected a DocumentStatus or a callable filter, got {type(spec).__name__}")
