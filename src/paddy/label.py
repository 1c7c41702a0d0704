"""Read and write the bracketed padding section of a layer label.

Labels keep free text in front of the padding::

    "Background [10 20;w>100]"

The prefix is preserved verbatim when the padding is rewritten.
"""

from __future__ import annotations

from .padding.codec import PaddingCodec
from .padding.model import Padding

_OPEN = "["
_CLOSE = "]"


def label_prefix(label: str) -> str:
    """Return the label text before the first ``[``."""
    return label.split(_OPEN, 1)[0]


def padding_string_from_label(label: str | None) -> str | None:
    """Return the raw text between the first ``[`` and the following ``]``.

    A label with an opening bracket but no closing bracket yields the rest of
    the label. Labels without ``[`` have no padding string.
    """
    if not label or _OPEN not in label:
        return None
    section = label.split(_OPEN, 1)[1]
    return section.split(_CLOSE, 1)[0]


def padding_from_label(label: str | None, codec: PaddingCodec | None = None) -> Padding | None:
    """Decode the padding stored in a label, if any."""
    codec = codec or PaddingCodec()
    return codec.decode(padding_string_from_label(label))


def label_with_padding(label: str, padding: Padding | None, codec: PaddingCodec | None = None) -> str:
    """Return ``label`` with its padding section replaced.

    Args:
        label: Current label.
        padding: Padding to store, or None to remove the bracketed section.
        codec: Codec used to encode the padding.

    Returns:
        The prefix alone when ``padding`` is None, otherwise the prefix
        followed by a single separating space and ``[<encoded padding>]``.
    """
    prefix = label_prefix(label)
    if padding is None:
        return prefix

    codec = codec or PaddingCodec()
    if prefix and not prefix.endswith(" "):
        prefix += " "
    return f"{prefix}{_OPEN}{codec.encode(padding)}{_CLOSE}"
