"""Shared fixtures for sortreel tests."""

import threading

import pytest

from sortreel.color import Color, Gradient
from sortreel.types import RenderConfig


class MemoryFrameWriter:
    """Thread-safe in-memory frame sink."""

    def __init__(self):
        self.files: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def write(self, name: str, data: bytes) -> None:
        with self._lock:
            self.files[name] = data


class RecordingRenderer:
    """Renderer stub that keeps every snapshot it was handed."""

    def __init__(self):
        self.snapshots = []

    def __call__(self, snapshot, config) -> bytes:
        self.snapshots.append(snapshot)
        return f"frame {snapshot.frame}".encode()

    def by_frame(self):
        return {s.frame: s for s in self.snapshots}


@pytest.fixture
def memory_writer():
    return MemoryFrameWriter()


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture
def small_config():
    """Tiny canvas: 1px margins, 2px bars, 1px gaps, 4px chart, blue->red."""
    return RenderConfig(
        bar_width=2,
        chart_height=4,
        margin=1,
        margin_top=1,
        spacing=1,
        background=Color(0x000000),
        gradient=Gradient((Color(0x0000FF), Color(0xFF0000))),
    )
