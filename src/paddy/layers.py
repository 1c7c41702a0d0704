"""Padding operations on host layers.

The host document model is reached only through the PaddingHost port, so the
padding engine can run against any editor (or an in-memory fake in tests).
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from .geom.primitives import Rect
from .label import label_with_padding, padding_from_label, padding_string_from_label
from .padding.codec import PaddingCodec
from .padding.geometry import apply_padding
from .padding.model import Padding

logger = logging.getLogger(__name__)


@runtime_checkable
class PaddingHost(Protocol):
    """Operations the host document model provides for layers."""

    def is_padding_capable(self, layer: Any) -> bool:
        """Return True if the layer may carry padding (shapes, symbol instances)."""
        ...

    def read_label(self, layer: Any) -> str: ...

    def write_label(self, layer: Any, label: str) -> None: ...

    def read_container_rect(self, container: Any) -> Rect: ...

    def read_frame(self, layer: Any) -> Rect: ...

    def write_frame(self, layer: Any, rect: Rect) -> None:
        """Set the layer frame without preserving proportions."""
        ...

    def did_end_resize(self, layer: Any) -> None:
        """Notify the host that the layer was resized."""
        ...


def layer_padding_string(host: PaddingHost, layer: Any) -> str | None:
    """Return the raw padding text stored in a layer label."""
    if layer is None:
        return None
    return padding_string_from_label(host.read_label(layer))


def layer_has_padding(host: PaddingHost, layer: Any) -> bool:
    """Return True if the layer is padding-capable and its label has padding."""
    if layer is None:
        return False
    return host.is_padding_capable(layer) and layer_padding_string(host, layer) is not None


def get_padding_from_layer(
    host: PaddingHost,
    layer: Any,
    codec: PaddingCodec | None = None,
) -> Padding | None:
    """Decode the padding stored in a layer label.

    Returns None for layers that cannot carry padding or have none.
    """
    if layer is None or not host.is_padding_capable(layer):
        return None
    return padding_from_label(host.read_label(layer), codec)


def save_padding_to_layer(
    host: PaddingHost,
    padding: Padding | None,
    layer: Any,
    codec: PaddingCodec | None = None,
) -> None:
    """Store padding in a layer label, keeping the label's free-text prefix.

    Saving None removes the bracketed section. Layers that cannot carry
    padding are left untouched.
    """
    if layer is None or not host.is_padding_capable(layer):
        return
    label = label_with_padding(host.read_label(layer), padding, codec)
    logger.debug("Writing label %r", label)
    host.write_label(layer, label)


def apply_padding_to_layer(
    host: PaddingHost,
    padding: Padding,
    layer: Any,
    container: Any,
) -> Rect:
    """Resize a layer around its container according to ``padding``.

    Args:
        host: Host document port.
        padding: Padding to apply.
        layer: Layer to resize (typically a background shape).
        container: Object whose rectangle the padding is computed against.

    Returns:
        The frame written to the layer.
    """
    if not host.is_padding_capable(layer):
        logger.warning("Applying padding to a layer that cannot carry padding")

    logger.debug("Applying padding to %r: %s", host.read_label(layer), padding)
    container_rect = host.read_container_rect(container)
    frame = apply_padding(padding, container_rect, host.read_frame(layer))

    host.write_frame(layer, frame)
    host.did_end_resize(layer)
    return frame
