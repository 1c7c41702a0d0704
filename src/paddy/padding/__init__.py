"""Padding values, their shorthand encoding and the frame computation.

Submodules:
- model: Padding, Condition and side value types
- condition: Condition expression tokenizer and parser
- codec: Shorthand encoding/decoding of padding strings
- evaluator: Clamping of outset dimensions against condition bounds
- geometry: Outset frame computation
"""

from __future__ import annotations

from .codec import (
    PaddingCodec,
    decode_padding,
    default_padding,
    encode_padding,
)
from .condition import (
    ConditionClause,
    ConditionParser,
    ConditionTokenizer,
    normalize_expression,
    parse_clause,
    parse_condition,
)
from .evaluator import clamp, clamp_between
from .geometry import apply_padding, parse_side_value, resolve_sides
from .model import (
    FIT_TO_CURRENT_OFFSET,
    Condition,
    Dimension,
    Padding,
    SideSentinel,
    SideValue,
    format_side,
)

__all__ = [
    # Model
    "Condition",
    "Dimension",
    "FIT_TO_CURRENT_OFFSET",
    "Padding",
    "SideSentinel",
    "SideValue",
    "format_side",
    # Codec
    "PaddingCodec",
    "decode_padding",
    "default_padding",
    "encode_padding",
    # Conditions
    "ConditionClause",
    "ConditionParser",
    "ConditionTokenizer",
    "normalize_expression",
    "parse_clause",
    "parse_condition",
    # Evaluation
    "apply_padding",
    "clamp",
    "clamp_between",
    "parse_side_value",
    "resolve_sides",
]
