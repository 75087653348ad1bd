"""Tests for ranker.py."""

import math

import pytest

from indexer import Document, Index, build
from ranker import idf, rank, tf


@pytest.fixture
def three_docs():
    return build([
        ("a.xhtml", "glClear glClear void"),
        ("b.xhtml", "glBegin void"),
        ("c.xhtml", "glEnd void"),
    ])


class TestTf:
    def test_relative_frequency(self, scenario_index):
        assert tf("GLCLEAR", scenario_index.documents["a.xhtml"]) == pytest.approx(2 / 3)
        assert tf("GLCLEAR", scenario_index.documents["b.xhtml"]) == 0.0

    def test_empty_document(self):
        assert tf("X", Document("empty", {}, 0)) == 0.0


class TestIdf:
    def test_formula(self, three_docs):
        assert idf("GLCLEAR", three_docs) == pytest.approx(math.log(3 / 2))
        assert idf("VOID", three_docs) == pytest.approx(math.log(3 / 4))

    def test_unknown_term(self, three_docs):
        assert idf("MISSING", three_docs) == pytest.approx(math.log(3))

    def test_rarer_terms_weigh_more(self):
        index = build([
            ("1", "rare common"),
            ("2", "common"),
            ("3", "common"),
            ("4", "other"),
        ])
        assert index.document_frequency("RARE") < index.document_frequency("COMMON")
        assert idf("RARE", index) > idf("COMMON", index)


class TestRank:
    def test_scenario_ranks_a_first(self, scenario_index):
        results = rank(scenario_index, "glclear", 10)
        assert [path for path, _ in results] == ["a.xhtml", "b.xhtml"]

    def test_matching_document_scores_positive(self, three_docs):
        results = rank(three_docs, "glclear", 10)
        assert results[0] == ("a.xhtml", pytest.approx(2 / 3 * math.log(3 / 2)))
        assert results[0][1] > 0
        assert results[1:] == [("b.xhtml", 0.0), ("c.xhtml", 0.0)]

    def test_sums_over_query_terms(self, three_docs):
        results = dict(rank(three_docs, "glBegin glEnd", 10))
        assert results["b.xhtml"] == pytest.approx(0.5 * math.log(3 / 2))
        assert results["c.xhtml"] == pytest.approx(0.5 * math.log(3 / 2))

    def test_repeated_query_terms_count_once(self, three_docs):
        assert rank(three_docs, "glclear GLCLEAR glClear", 10) == rank(three_docs, "glclear", 10)

    def test_case_insensitive_query(self, three_docs):
        assert rank(three_docs, "GLCLEAR", 10) == rank(three_docs, "glclear", 10)

    def test_ties_ordered_by_path(self):
        index = build([("z", "same"), ("m", "same"), ("a", "same"), ("r", "other"), ("q", "other")])
        assert [path for path, _ in rank(index, "same", 10)] == ["a", "m", "z", "q", "r"]

    def test_deterministic(self, three_docs):
        first = rank(three_docs, "void glclear", 10)
        assert all(rank(three_docs, "void glclear", 10) == first for _ in range(5))

    def test_limit(self, three_docs):
        assert len(rank(three_docs, "glclear", 1)) == 1
        assert len(rank(three_docs, "glclear", 100)) == 3
        assert rank(three_docs, "glclear", 0) == []

    def test_negative_limit(self, three_docs):
        with pytest.raises(ValueError):
            rank(three_docs, "glclear", -1)

    def test_empty_query(self, three_docs):
        assert rank(three_docs, "", 10) == []
        assert rank(three_docs, "   \n", 10) == []

    def test_empty_index(self):
        assert rank(Index(), "anything", 10) == []

    def test_zero_token_document(self):
        index = build([("blank", ""), ("full", "word")])
        assert dict(rank(index, "word", 10))["blank"] == 0.0
