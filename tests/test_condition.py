# SPDX-License-Identifier: MIT
"""Unit tests for condition expression parsing.

Covers:
- Tokenization of clauses
- Exclusive-to-inclusive bound adjustment
- Malformed clause handling and last-write-wins semantics
"""

from __future__ import annotations

import logging

import pytest

from paddy.padding import (
    Condition,
    ConditionParser,
    ConditionTokenizer,
    Dimension,
    normalize_expression,
    parse_clause,
    parse_condition,
)


class TestConditionTokenizer:
    """Tests for the clause tokenizer."""

    def test_tokenize_simple_clause(self) -> None:
        tokens = list(ConditionTokenizer("w>=10").tokenize())
        assert [(t.type, t.value) for t in tokens] == [("WORD", "w"), ("OP", ">="), ("NUMBER", "10")]

    def test_tokenize_prefers_two_char_operators(self) -> None:
        tokens = list(ConditionTokenizer("height<=200").tokenize())
        assert [t.value for t in tokens] == ["height", "<=", "200"]

    def test_tokenize_reports_positions(self) -> None:
        tokens = list(ConditionTokenizer("h<5").tokenize())
        assert [t.position for t in tokens] == [0, 1, 2]

    def test_tokenize_invalid_characters(self) -> None:
        tokens = list(ConditionTokenizer("w>-5").tokenize())
        assert ("INVALID", "-") in [(t.type, t.value) for t in tokens]

    def test_tokenize_non_ascii_digit_does_not_stall(self) -> None:
        tokens = list(ConditionTokenizer("w>²").tokenize())
        assert tokens[-1].type == "INVALID"


class TestParseClause:
    """Tests for single clause parsing."""

    @pytest.mark.parametrize(
        ("text", "dimension"),
        [
            ("w>1", Dimension.WIDTH),
            ("width>1", Dimension.WIDTH),
            ("h>1", Dimension.HEIGHT),
            ("height>1", Dimension.HEIGHT),
        ],
    )
    def test_dimension_words(self, text: str, dimension: Dimension) -> None:
        clause = parse_clause(text)
        assert clause is not None
        assert clause.dimension is dimension

    @pytest.mark.parametrize("text", ["", "w", "w>", ">10", "w10", "x>10", "wide>10", "w>=>10", "w>10px", "w=>10"])
    def test_malformed_clauses(self, text: str) -> None:
        assert parse_clause(text) is None

    def test_clause_bounds(self) -> None:
        clause = parse_clause("w>10")
        assert clause is not None
        assert clause.minimum == 11
        assert clause.maximum is None


class TestConditionParser:
    """Tests for full expression parsing."""

    def test_greater_than_adjusts_minimum(self) -> None:
        condition = parse_condition("w>10")
        assert condition == Condition(expression="w>10", min_width=11)

    def test_less_than_adjusts_maximum(self) -> None:
        condition = parse_condition("w<10")
        assert condition == Condition(expression="w<10", max_width=9)

    def test_equals_sets_both_bounds(self) -> None:
        condition = parse_condition("w=10")
        assert condition is not None
        assert condition.min_width == 10
        assert condition.max_width == 10
        assert condition.min_height is None
        assert condition.max_height is None

    def test_inclusive_operators(self) -> None:
        condition = parse_condition("h>=20;h<=40")
        assert condition is not None
        assert condition.bounds(Dimension.HEIGHT) == (20, 40)
        assert condition.bounds(Dimension.WIDTH) == (None, None)

    def test_zero_bound_is_present(self) -> None:
        condition = parse_condition("w<1")
        assert condition is not None
        assert condition.max_width == 0

    def test_normalizes_whitespace_and_case(self) -> None:
        condition = parse_condition(" Width > 10 ;\tH<=5 ")
        assert condition is not None
        assert condition.expression == "width>10;h<=5"
        assert condition.min_width == 11
        assert condition.max_height == 5

    def test_last_write_wins(self) -> None:
        condition = parse_condition("w>=10;w>=30")
        assert condition is not None
        assert condition.min_width == 30

    def test_malformed_clause_is_dropped(self) -> None:
        condition = parse_condition("w>10;banana;h<5")
        assert condition is not None
        assert condition.expression == "w>10;banana;h<5"
        assert condition.min_width == 11
        assert condition.max_height == 4

    def test_all_clauses_malformed_keeps_expression(self) -> None:
        condition = parse_condition("nope")
        assert condition == Condition(expression="nope")

    def test_malformed_clause_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="paddy.padding.condition"):
            parse_condition("w>10;banana")
        assert "banana" in caplog.text

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_expression(self, text: str | None) -> None:
        assert parse_condition(text) is None

    def test_custom_clause_separator(self) -> None:
        parser = ConditionParser(clause_separator="|")
        condition = parser.parse("w>10|h<10")
        assert condition is not None
        assert condition.min_width == 11
        assert condition.max_height == 9


def test_normalize_expression() -> None:
    assert normalize_expression(" W > 1\n") == "w>1"
