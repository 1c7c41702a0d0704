"""Parser for size-condition expressions embedded in padding strings.

A condition expression is a list of clauses separated by ``;``::

    expr   := clause (';' clause)*
    clause := dimension operator number

- dimension: ``height``, ``h``, ``width`` or ``w`` (case-insensitive),
  classified by its first character
- operator: ``>=``, ``<=``, ``<``, ``>`` or ``=``
- number: unsigned integer literal

Each clause becomes an inclusive bound on the outset width or height.
Exclusive operators are converted by adjusting the literal (``w>10`` is a
minimum width of 11, ``w<10`` a maximum width of 9) and ``=`` sets both
bounds. Later clauses overwrite earlier ones for the same bound. Clauses
that do not match the grammar are dropped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .model import Condition, Dimension

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s")

_DIMENSION_WORDS: dict[str, Dimension] = {
    "height": Dimension.HEIGHT,
    "h": Dimension.HEIGHT,
    "width": Dimension.WIDTH,
    "w": Dimension.WIDTH,
}

# Longest operators first so ">=" is not read as ">" followed by "=".
_OPERATORS: tuple[str, ...] = (">=", "<=", "<", ">", "=")

_MIN_OPERATORS = frozenset({">", ">=", "="})
_MAX_OPERATORS = frozenset({"<", "<=", "="})


@dataclass(frozen=True)
class ConditionToken:
    """Token from the condition tokenizer."""

    type: str  # 'WORD', 'OP', 'NUMBER', 'INVALID'
    value: str
    position: int


@dataclass(frozen=True)
class ConditionClause:
    """A single parsed ``dimension operator number`` clause."""

    dimension: Dimension
    operator: str
    value: int

    @property
    def minimum(self) -> int | None:
        """Inclusive minimum implied by this clause, if any."""
        if self.operator not in _MIN_OPERATORS:
            return None
        return self.value + 1 if self.operator == ">" else self.value

    @property
    def maximum(self) -> int | None:
        """Inclusive maximum implied by this clause, if any."""
        if self.operator not in _MAX_OPERATORS:
            return None
        return self.value - 1 if self.operator == "<" else self.value


class ConditionTokenizer:
    """Tokenizer for a single normalized clause."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def tokenize(self) -> Iterator[ConditionToken]:
        """Generate tokens from the clause text."""
        while self.pos < len(self.text):
            char = self.text[self.pos]
            start = self.pos
            if char.isalpha():
                yield ConditionToken("WORD", self._read_while(str.isalpha), start)
            elif _is_ascii_digit(char):
                yield ConditionToken("NUMBER", self._read_while(_is_ascii_digit), start)
            elif char in "<>=":
                yield ConditionToken("OP", self._read_operator(), start)
            else:
                self.pos += 1
                yield ConditionToken("INVALID", char, start)

    def _read_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self.text) and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start : self.pos]

    def _read_operator(self) -> str:
        operator = next(op for op in _OPERATORS if self.text.startswith(op, self.pos))
        self.pos += len(operator)
        return operator


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


class ConditionParser:
    """Clause-by-clause parser for condition expressions.

    Attributes:
        clause_separator: String separating clauses in an expression.
    """

    def __init__(self, clause_separator: str = ";") -> None:
        self.clause_separator = clause_separator

    def parse(self, text: str | None) -> Condition | None:
        """Parse a condition expression.

        Args:
            text: Raw expression, e.g. ``"W > 10; h<=200"``.

        Returns:
            Condition with the normalized expression and parsed bounds, or
            None when the expression is empty.
        """
        expression = normalize_expression(text)
        if not expression:
            return None

        bounds: dict[str, int] = {}
        for clause_text in expression.split(self.clause_separator):
            clause = parse_clause(clause_text)
            if clause is None:
                if clause_text:
                    logger.debug("Dropping malformed condition clause %r", clause_text)
                continue
            prefix = "width" if clause.dimension is Dimension.WIDTH else "height"
            if clause.minimum is not None:
                bounds[f"min_{prefix}"] = clause.minimum
            if clause.maximum is not None:
                bounds[f"max_{prefix}"] = clause.maximum

        return Condition(expression=expression, **bounds)


def normalize_expression(text: str | None) -> str:
    """Strip all whitespace from an expression and lower-case it."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub("", text).lower()


def parse_clause(text: str) -> ConditionClause | None:
    """Parse one normalized clause, returning None if it is malformed."""
    tokens = list(ConditionTokenizer(text).tokenize())
    if len(tokens) != 3:
        return None
    word, operator, number = tokens
    if word.type != "WORD" or operator.type != "OP" or number.type != "NUMBER":
        return None
    if word.value not in _DIMENSION_WORDS:
        return None
    return ConditionClause(
        dimension=_DIMENSION_WORDS[word.value],
        operator=operator.value,
        value=int(number.value),
    )


_DEFAULT_PARSER = ConditionParser()


def parse_condition(text: str | None) -> Condition | None:
    """Parse a condition expression with the default ``;`` separator."""
    return _DEFAULT_PARSER.parse(text)
