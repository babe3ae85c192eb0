"""Unit tests for document filters."""

from __future__ import annotations

import pytest

from search_server.domain.model import DocumentStatus
from search_server.search.filters import ACTUAL_ONLY, StatusFilter, resolve_filter


def test_status_filter_compares_status_only() -> None:
    banned = StatusFilter(DocumentStatus.BANNED)

    assert banned(1, DocumentStatus.BANNED, -10)
    assert not banned(1, DocumentStatus.ACTUAL, 10)


def test_resolve_filter_defaults_to_actual() -> None:
    assert resolve_filter(None) is ACTUAL_ONLY
    assert ACTUAL_ONLY(0, DocumentStatus.ACTUAL, 0)
    assert not ACTUAL_ONLY(0, DocumentStatus.REMOVED, 0)


def test_resolve_filter_wraps_status() -> None:
    assert resolve_filter(DocumentStatus.IRRELEVANT) == StatusFilter(DocumentStatus.IRRELEVANT)


def test_resolve_filter_passes_callables_through() -> None:
    def even_ids(document_id: int, status: DocumentStatus, rating: int) -> bool:
        return document_id % 2 == 0

    assert resolve_filter(even_ids) is even_ids


def test_resolve_filter_rejects_other_values() -> None:
    with pytest.raises(TypeError):
        resolve_filter(42)  # type: ignore[arg-type]
