"""Shorthand text encoding for padding values.

Padding strings use CSS box-model shorthand, optionally followed by a
condition expression::

    "10"            all sides 10
    "10 20"         top/bottom 10, left/right 20
    "10 20 30"      top 10, left/right 20, bottom 30
    "10 20 30 40"   top, right, bottom, left
    "10 x;w>100"    left/right fit the current offset, min width 101

Decoding never fails: unknown token counts fall back to zero padding and
malformed condition clauses are dropped.
"""

from __future__ import annotations

from .condition import ConditionParser
from .model import FIT_TO_CURRENT_OFFSET, Padding, SideValue, format_side

DEFAULT_VALUES_SEPARATOR = " "
DEFAULT_EXPRESSION_SEPARATOR = ";"
DEFAULT_FIT_TOKEN = "x"
DEFAULT_PADDING = "10 20"


class PaddingCodec:
    """Encoder/decoder between Padding values and shorthand strings.

    Attributes:
        values_separator: String separating side values.
        expression_separator: String separating values from the condition
            expression and condition clauses from each other.
        fit_token: Token marking a FIT_TO_CURRENT_OFFSET side.
    """

    def __init__(
        self,
        values_separator: str = DEFAULT_VALUES_SEPARATOR,
        expression_separator: str = DEFAULT_EXPRESSION_SEPARATOR,
        fit_token: str = DEFAULT_FIT_TOKEN,
    ) -> None:
        self.values_separator = values_separator
        self.expression_separator = expression_separator
        self.fit_token = fit_token
        self._condition_parser = ConditionParser(clause_separator=expression_separator)

    def encode(self, padding: Padding) -> str:
        """Encode padding as the shortest equivalent shorthand string.

        Args:
            padding: Padding to encode.

        Returns:
            Shorthand string, with ``;<expression>`` appended when the padding
            carries a condition.
        """
        top, right, bottom, left = (format_side(side, self.fit_token) for side in padding.sides())
        values = [top, right, bottom, left]

        if right == left:
            values.pop()
            if top == bottom:
                values.pop()
                if top == right:
                    values.pop()

        text = self.values_separator.join(values)
        conditions = padding.conditions
        if conditions is not None and conditions.expression:
            text += self.expression_separator + conditions.expression
        return text

    def decode(self, text: str | None) -> Padding | None:
        """Decode a shorthand string.

        Args:
            text: Shorthand string, possibly with a condition tail.

        Returns:
            Decoded Padding, or None when ``text`` is empty or None.
        """
        if not text:
            return None

        values_text, _, expression = text.partition(self.expression_separator)
        conditions = self._condition_parser.parse(expression)

        tokens = [self._decode_token(token) for token in values_text.split(self.values_separator) if token != ""]
        top, right, bottom, left = _expand_shorthand(tokens)

        return Padding(top=top, right=right, bottom=bottom, left=left, conditions=conditions)

    def _decode_token(self, token: str) -> SideValue:
        if token == self.fit_token:
            return FIT_TO_CURRENT_OFFSET
        return token


def _expand_shorthand(tokens: list[SideValue]) -> tuple[SideValue, SideValue, SideValue, SideValue]:
    """Expand 1-4 shorthand tokens to (top, right, bottom, left)."""
    count = len(tokens)
    if count == 1:
        return (tokens[0], tokens[0], tokens[0], tokens[0])
    if count == 2:
        vertical, horizontal = tokens
        return (vertical, horizontal, vertical, horizontal)
    if count == 3:
        top, horizontal, bottom = tokens
        return (top, horizontal, bottom, horizontal)
    if count == 4:
        top, right, bottom, left = tokens
        return (top, right, bottom, left)
    # Unsupported counts decode as zero, stored like any other raw token.
    return ("0", "0", "0", "0")


_DEFAULT_CODEC = PaddingCodec()


def encode_padding(padding: Padding) -> str:
    """Encode padding with the default separators."""
    return _DEFAULT_CODEC.encode(padding)


def decode_padding(text: str | None) -> Padding | None:
    """Decode a padding string with the default separators."""
    return _DEFAULT_CODEC.decode(text)


def default_padding() -> Padding:
    """Padding suggested for a layer that has none yet."""
    return _DEFAULT_CODEC.decode(DEFAULT_PADDING) or Padding()
