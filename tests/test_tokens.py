"""Tests for stressgen/templates/tokens.py — :name token substitution."""

import random

import pytest

from stressgen.templates import find_tokens, format_value, pick_param, token_map


@pytest.fixture
def rng():
    return random.Random(42)


class TestTokenMap:

    def test_no_tokens_unchanged(self, rng):
        sql = "select * from t where a = 'x'"
        assert token_map(sql, {"a": [1]}, rng) == sql

    def test_empty_pool_unchanged(self, rng):
        sql = "select :a"
        assert token_map(sql, {}, rng) == sql

    def test_single_token_values(self, rng):
        sql = "select * from t where id = :id"
        seen = {token_map(sql, {"id": [1, 2, 3]}, rng) for _ in range(300)}
        assert seen == {
            "select * from t where id = 1",
            "select * from t where id = 2",
            "select * from t where id = 3",
        }

    def test_repeated_token_drawn_independently(self, rng):
        seen = {token_map(":a + :a", {"a": [1, 2]}, rng) for _ in range(200)}
        assert "1 + 2" in seen or "2 + 1" in seen
        assert seen <= {"1 + 1", "1 + 2", "2 + 1", "2 + 2"}

    def test_unknown_token_left_verbatim(self, rng):
        out = token_map("select :a, :missing", {"a": ["x"]}, rng)
        assert out == "select x, :missing"

    def test_token_word_boundary(self, rng):
        out = token_map(":my and :my_date", {"my": [1], "my_date": ["2020-01-01"]}, rng)
        assert out == "1 and 2020-01-01"

    def test_lone_colon_passes_through(self, rng):
        sql = "select 'a : b', x::text"
        assert token_map(sql, {"a": [1]}, rng) == sql

    def test_float_and_string_values(self, rng):
        assert token_map(":f", {"f": [1.5]}, rng) == "1.5"
        assert token_map("':s'", {"s": ["2018-02-04"]}, rng) == "'2018-02-04'"

    def test_seeded_rng_is_reproducible(self):
        pool = {"a": list(range(100))}
        first = [token_map(":a", pool, random.Random(7)) for _ in range(5)]
        second = [token_map(":a", pool, random.Random(7)) for _ in range(5)]
        assert first == second


class TestHelpers:

    def test_pick_param_in_options(self, rng):
        for _ in range(50):
            assert pick_param(["a", "b"], rng) in ("a", "b")

    def test_format_value(self):
        assert format_value(3) == "3"
        assert format_value(True) == "true"
        assert format_value(False) == "false"
        assert format_value(None) == "null"
        assert format_value("x") == "x"

    def test_find_tokens_ordered_unique(self):
        assert find_tokens(":b + :a + :b") == ["b", "a"]
        assert find_tokens("select 1") == []
