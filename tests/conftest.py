# SPDX-License-Identifier: MIT
"""Pytest configuration and shared fixtures for test suite.

This module provides:
- Deterministic test environment setup
- An in-memory fake of the PaddingHost port
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import pytest

from paddy.geom import Rect


# ---------------------------------------------------------------------------
# Environment Setup
# ---------------------------------------------------------------------------


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest environment for determinism."""
    deterministic_env = {
        "LC_ALL": "C",
        "LANG": "C",
        "TZ": "UTC",
        "PYTHONHASHSEED": "0",
    }
    for key, value in deterministic_env.items():
        os.environ.setdefault(key, value)


# ---------------------------------------------------------------------------
# Fixtures: Fake Host
# ---------------------------------------------------------------------------


@dataclass
class FakeLayer:
    """Layer record held by FakeHost."""

    label: str
    frame: Rect
    padding_capable: bool = True


@dataclass
class FakeHost:
    """In-memory PaddingHost recording every write."""

    containers: dict[str, Rect] = field(default_factory=dict)
    label_writes: list[tuple[Any, str]] = field(default_factory=list)
    frame_writes: list[tuple[Any, Rect]] = field(default_factory=list)
    resized: list[Any] = field(default_factory=list)

    def is_padding_capable(self, layer: FakeLayer) -> bool:
        return layer.padding_capable

    def read_label(self, layer: FakeLayer) -> str:
        return layer.label

    def write_label(self, layer: FakeLayer, label: str) -> None:
        self.label_writes.append((layer, label))
        layer.label = label

    def read_container_rect(self, container: str) -> Rect:
        return self.containers[container]

    def read_frame(self, layer: FakeLayer) -> Rect:
        return layer.frame

    def write_frame(self, layer: FakeLayer, rect: Rect) -> None:
        self.frame_writes.append((layer, rect))
        layer.frame = rect

    def did_end_resize(self, layer: FakeLayer) -> None:
        self.resized.append(layer)


@pytest.fixture
def fake_host() -> FakeHost:
    """Fake host with a single 'group' container at (0, 0, 100, 50)."""
    return FakeHost(containers={"group": Rect(0, 0, 100, 50)})


@pytest.fixture
def make_layer():
    """Fixture providing a FakeLayer factory.

    Usage:
        def test_something(make_layer):
            layer = make_layer("Background [10]")
    """

    def _make(
        label: str,
        frame: Rect | None = None,
        *,
        padding_capable: bool = True,
    ) -> FakeLayer:
        return FakeLayer(label=label, frame=frame or Rect(0, 0, 10, 10), padding_capable=padding_capable)

    return _make
