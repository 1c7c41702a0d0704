"""paddy: padding stored in layer labels.

A layer label such as ``"Background [10 20;w>100]"`` carries the layer's
padding as CSS-style shorthand plus an optional size condition. This package
decodes that text, computes the padded frame around a container rectangle
and writes padding back into labels.

Public API
----------
- :func:`decode_padding` - Decode a shorthand padding string
- :func:`encode_padding` - Encode a Padding as the shortest shorthand
- :func:`parse_condition` - Parse a condition expression into bounds
- :func:`apply_padding` - Compute the padded frame for a container rectangle
- :func:`get_padding_from_layer` / :func:`save_padding_to_layer` - Label I/O
  through a :class:`PaddingHost`
- :func:`apply_padding_to_layer` - Resize a host layer around its container

Example
-------
>>> from paddy import Rect, apply_padding, decode_padding
>>> padding = decode_padding("10")
>>> apply_padding(padding, Rect(0, 0, 100, 50))
Rect(x=-10.0, y=-10.0, width=120.0, height=70.0)
"""

from __future__ import annotations

from paddy.config import PaddyConfig, PaddyConfigError, load_config
from paddy.geom import Rect, RectParseError, parse_rect
from paddy.label import (
    label_prefix,
    label_with_padding,
    padding_from_label,
    padding_string_from_label,
)
from paddy.layers import (
    PaddingHost,
    apply_padding_to_layer,
    get_padding_from_layer,
    layer_has_padding,
    layer_padding_string,
    save_padding_to_layer,
)
from paddy.padding import (
    FIT_TO_CURRENT_OFFSET,
    Condition,
    ConditionParser,
    Dimension,
    Padding,
    PaddingCodec,
    SideSentinel,
    apply_padding,
    clamp,
    decode_padding,
    default_padding,
    encode_padding,
    parse_condition,
)

__all__ = [
    # Core types
    "Condition",
    "Dimension",
    "FIT_TO_CURRENT_OFFSET",
    "Padding",
    "Rect",
    "SideSentinel",
    # Codec and evaluation
    "ConditionParser",
    "PaddingCodec",
    "apply_padding",
    "clamp",
    "decode_padding",
    "default_padding",
    "encode_padding",
    "parse_condition",
    "parse_rect",
    # Labels and host layers
    "PaddingHost",
    "apply_padding_to_layer",
    "get_padding_from_layer",
    "label_prefix",
    "label_with_padding",
    "layer_has_padding",
    "layer_padding_string",
    "padding_from_label",
    "padding_string_from_label",
    "save_padding_to_layer",
    # Configuration
    "PaddyConfig",
    "PaddyConfigError",
    "load_config",
    # Errors
    "RectParseError",
]
