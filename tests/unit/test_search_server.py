"""Behavioural tests for the SearchServer facade."""

from __future__ import annotations

import logging

import pytest

from search_server import (
    DocumentNotFoundError,
    DocumentStatus,
    EmptyDocumentError,
    InvalidDocumentIdError,
    InvalidQueryError,
    MatchResult,
    SearchServer,
    StatusFilter,
)
from search_server.config import Settings


RATINGS = [1, 2, 3]


@pytest.mark.unit
class TestStopWords:
    def test_stop_words_are_excluded_from_documents(self, server: SearchServer):
        server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
        found = server.find_top_documents("in")
        assert [doc.document_id for doc in found] == [42]

        filtered = SearchServer(settings=Settings())
        filtered.set_stop_words("in the")
        filtered.add_document(42, "cat in the city", DocumentStatus.ACTUAL, RATINGS)

        assert filtered.find_top_documents("in") == []

    def test_only_non_stop_words_are_scored(self, server: SearchServer):
        server.set_stop_words("in the")
        server.add_document(0, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(1, "dog", DocumentStatus.ACTUAL, RATINGS)

        found = server.find_top_documents("cat the")

        assert len(found) == 1
        # "cat" is one of two indexed words: tf = 1/2, idf = ln(2)
        assert found[0].relevance == pytest.approx(0.5 * 0.6931471805599453)

    def test_document_of_only_stop_words_is_rejected(self, server: SearchServer):
        server.set_stop_words("in the")

        with pytest.raises(EmptyDocumentError):
            server.add_document(0, "in the", DocumentStatus.ACTUAL, RATINGS)

        assert server.document_count() == 0
        assert len(server.index) == 0

    def test_constructor_accepts_text_and_iterables(self, settings: Settings):
        assert SearchServer("in  the", settings=settings).stop_words == frozenset({"in", "the"})
        assert SearchServer(["a", "", "b"], settings=settings).stop_words == frozenset({"a", "b"})

    def test_settings_provide_default_stop_words(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SEARCH_SERVER_STOP_WORDS", "and with")

        server = SearchServer("in")

        assert server.stop_words == frozenset({"and", "with", "in"})

    def test_set_stop_words_is_additive_and_not_retroactive(self, server: SearchServer):
        server.add_document(0, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
        server.set_stop_words("in")
        server.set_stop_words("the")

        assert server.stop_words == frozenset({"in", "the"})
        assert server.index.contains("in", 0)
        assert server.find_top_documents("in") == []


@pytest.mark.unit
class TestAddDocument:
    def test_document_count_tracks_added_documents(self, city_server: SearchServer):
        assert city_server.document_count() == 5

    def test_empty_text_is_rejected(self, server: SearchServer):
        with pytest.raises(EmptyDocumentError):
            server.add_document(0, "    ", DocumentStatus.ACTUAL, RATINGS)
        assert server.document_count() == 0

    def test_negative_id_is_rejected(self, server: SearchServer):
        with pytest.raises(InvalidDocumentIdError):
            server.add_document(-1, "cat", DocumentStatus.ACTUAL, RATINGS)
        assert server.document_count() == 0
        assert "cat" not in server.index

    def test_duplicate_id_overwrites_rating_and_status(self, server: SearchServer):
        server.add_document(0, "cat", DocumentStatus.ACTUAL, [1])
        server.add_document(0, "cat", DocumentStatus.BANNED, [5])

        assert server.document_count() == 1
        assert server.find_top_documents("cat") == []
        banned = server.find_top_documents("cat", DocumentStatus.BANNED)
        assert [(doc.document_id, doc.rating) for doc in banned] == [(0, 5)]

    def test_duplicate_id_replaces_indexed_words(self, server: SearchServer):
        server.add_document(0, "cat", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(0, "dog", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(1, "bird", DocumentStatus.ACTUAL, RATINGS)

        assert server.find_top_documents("cat") == []
        assert server.match_document("cat", 0).words == ()
        assert server.match_document("dog", 0).words == ("dog",)
        assert "cat" not in server.index
        assert sum(server.index.term_frequencies(0).values()) == pytest.approx(1.0)

    def test_status_given_as_string_is_coerced(self, server: SearchServer):
        server.add_document(0, "cat", "banned", RATINGS)  # type: ignore[arg-type]

        found = server.find_top_documents("cat", DocumentStatus.BANNED)

        assert [doc.document_id for doc in found] == [0]
        assert server.match_document("cat", 0).status is DocumentStatus.BANNED

    def test_unknown_status_leaves_engine_untouched(self, server: SearchServer):
        with pytest.raises(ValueError):
            server.add_document(0, "cat", "archived", RATINGS)  # type: ignore[arg-type]

        assert server.document_count() == 0
        assert "cat" not in server.index

    def test_defaults_to_actual_without_ratings(self, server: SearchServer):
        server.add_document(3, "lonely cat")

        found = server.find_top_documents("cat")

        assert [(doc.document_id, doc.rating) for doc in found] == [(3, 0)]

    def test_rejection_is_logged(self, server: SearchServer, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.WARNING, logger="search_server.search_server"):
            with pytest.raises(EmptyDocumentError):
                server.add_document(1, "", DocumentStatus.ACTUAL, [])

        assert any("add_document rejected" in record.getMessage() for record in caplog.records)


@pytest.mark.unit
class TestFindTopDocuments:
    def test_simple_search_returns_all_matches(self, city_server: SearchServer):
        found = city_server.find_top_documents("city")

        assert sorted(doc.document_id for doc in found) == [0, 1, 2]

    def test_minus_words_exclude_documents(self, server: SearchServer):
        server.add_document(1, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(2, "dog in the city", DocumentStatus.ACTUAL, RATINGS)

        found = server.find_top_documents("in the city -dog")

        assert [doc.document_id for doc in found] == [1]

    def test_minus_word_beats_any_number_of_plus_words(self, server: SearchServer):
        server.add_document(0, "cat dog city park", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(1, "bird", DocumentStatus.ACTUAL, RATINGS)

        assert server.find_top_documents("cat dog city park -bird -park") == []

    def test_double_minus_excludes_word_with_leading_minus(self, server: SearchServer):
        server.add_document(0, "-cat city", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(1, "city", DocumentStatus.ACTUAL, RATINGS)

        found = server.find_top_documents("city --cat")

        assert [doc.document_id for doc in found] == [1]

    def test_word_given_as_plus_and_minus_excludes(self, server: SearchServer):
        server.add_document(0, "cat", DocumentStatus.ACTUAL, RATINGS)

        assert server.find_top_documents("cat -cat") == []

    def test_ratings_are_truncated_averages(self, server: SearchServer):
        server.add_document(0, "cat in the big city", DocumentStatus.ACTUAL, [1, 2, 3])
        server.add_document(1, "developer in the big chair", DocumentStatus.ACTUAL, [1, -2, 10])
        server.add_document(2, "dog city", DocumentStatus.ACTUAL, [-1, 2, -10])

        found = server.find_top_documents("in the big city")

        assert [doc.document_id for doc in found] == [0, 1, 2]
        assert [doc.rating for doc in found] == [2, 3, -3]

    def test_search_by_status(self, server: SearchServer):
        server.add_document(0, "city and no text!!!!!!!!", DocumentStatus.REMOVED, RATINGS)
        server.add_document(1, "cat in the big city", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(2, "big developer in the big city", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(3, "city dog city", DocumentStatus.BANNED, RATINGS)
        server.add_document(4, "city and the empty document", DocumentStatus.IRRELEVANT, RATINGS)

        actual = server.find_top_documents("city", DocumentStatus.ACTUAL)
        banned = server.find_top_documents("city", StatusFilter(DocumentStatus.BANNED))

        assert sorted(doc.document_id for doc in actual) == [1, 2]
        assert [doc.document_id for doc in banned] == [3]
        assert server.find_top_documents("city") == actual

    def test_custom_predicate(self, server: SearchServer):
        for document_id in range(5):
            server.add_document(document_id, "test text with no dark jokes", DocumentStatus.ACTUAL, RATINGS)

        found = server.find_top_documents("dark jokes", lambda document_id, status, rating: document_id % 2 == 0)

        assert sorted(doc.document_id for doc in found) == [0, 2, 4]

    def test_single_document_relevance_is_zero(self, server: SearchServer):
        server.add_document(0, "test text with no dark jokes", DocumentStatus.ACTUAL, RATINGS)

        found = server.find_top_documents("text")

        assert len(found) == 1
        assert found[0].relevance == pytest.approx(0.0, abs=1e-5)

    def test_relevance_values(self, server: SearchServer):
        server.add_document(0, "test text with no dark jokes text", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(1, "empty jar", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(3, "jar with nutella", DocumentStatus.ACTUAL, RATINGS)

        found = server.find_top_documents("text with")

        assert [doc.document_id for doc in found] == [0, 3]
        assert found[0].relevance == pytest.approx(0.371813, abs=1e-5)
        assert found[1].relevance == pytest.approx(0.135155, abs=1e-5)

    def test_results_are_sorted(self, server: SearchServer):
        texts = ["cat", "cat cat dog", "cat dog bird fish", "cat mouse", "owl", "cat cat"]
        for document_id, text in enumerate(texts):
            server.add_document(document_id, text, DocumentStatus.ACTUAL, [document_id])

        found = server.find_top_documents("cat")

        for current, following in zip(found, found[1:]):
            assert current.relevance >= following.relevance - 1e-6
            if abs(current.relevance - following.relevance) < 1e-6:
                assert current.rating >= following.rating

    def test_result_count_is_capped(self, server: SearchServer):
        for document_id in range(10):
            server.add_document(document_id, f"cat number{document_id}", DocumentStatus.ACTUAL, [document_id])

        found = server.find_top_documents("cat")

        assert len(found) == 5
        assert [doc.document_id for doc in found] == [9, 8, 7, 6, 5]

    def test_cap_comes_from_settings(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SEARCH_SERVER_MAX_RESULT_DOCUMENT_COUNT", "2")
        server = SearchServer()
        for document_id in range(4):
            server.add_document(document_id, "cat", DocumentStatus.ACTUAL, [])

        assert len(server.find_top_documents("cat")) == 2

    def test_unknown_words_and_empty_query(self, city_server: SearchServer):
        assert city_server.find_top_documents("unicorn") == []
        assert city_server.find_top_documents("") == []
        assert city_server.find_top_documents("-city") == []

    def test_malformed_query_is_rejected(self, city_server: SearchServer):
        with pytest.raises(InvalidQueryError):
            city_server.find_top_documents("city -")

    def test_works_without_tracing(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SEARCH_SERVER_TRACING_ENABLED", "false")
        server = SearchServer()
        server.add_document(0, "cat", DocumentStatus.ACTUAL, [])

        assert [doc.document_id for doc in server.find_top_documents("cat")] == [0]
        with pytest.raises(InvalidQueryError):
            server.find_top_documents("-")


@pytest.mark.unit
class TestMatchDocument:
    def test_returns_matched_plus_words(self, server: SearchServer):
        server.add_document(0, "test text with no dark jokes", DocumentStatus.ACTUAL, RATINGS)

        result = server.match_document("test dark jokes", 0)

        assert result == MatchResult(words=("dark", "jokes", "test"), status=DocumentStatus.ACTUAL)
        assert result.matched

    def test_minus_word_clears_matches(self, server: SearchServer):
        server.add_document(0, "test text with no dark jokes", DocumentStatus.ACTUAL, RATINGS)

        result = server.match_document("test -dark jokes", 0)

        assert result.words == ()
        assert not result.matched
        assert result.status == DocumentStatus.ACTUAL

    def test_minus_word_absent_from_document_is_ignored(self, server: SearchServer):
        server.add_document(0, "cat city", DocumentStatus.ACTUAL, RATINGS)
        server.add_document(1, "dog", DocumentStatus.ACTUAL, RATINGS)

        assert server.match_document("cat -dog -unicorn", 0).words == ("cat",)

    def test_reports_document_status(self, server: SearchServer):
        server.add_document(5, "banned cat", DocumentStatus.BANNED, RATINGS)

        result = server.match_document("cat", 5)

        assert result.words == ("cat",)
        assert result.status == DocumentStatus.BANNED

    def test_stop_words_never_match(self, server: SearchServer):
        server.add_document(0, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
        server.set_stop_words("in")

        assert server.match_document("in city", 0).words == ("city",)

    def test_unknown_document_raises(self, city_server: SearchServer):
        with pytest.raises(DocumentNotFoundError):
            city_server.match_document("city", 99)

    def test_unknown_document_is_a_key_error(self, server: SearchServer):
        with pytest.raises(KeyError):
            server.match_document("-", 0)
