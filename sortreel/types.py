"""Core data types for sortreel."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from sortreel import defaults
from sortreel.color import Color, Gradient, default_gradient


@dataclass(frozen=True)
class RenderConfig:
    """Immutable geometry and colors shared by every frame of a run.

    Attributes:
        bar_width: Width of each bar in pixels
        chart_height: Height of the bar area (tallest bar) in pixels
        margin: Left and right margin in pixels
        margin_top: Top and bottom margin in pixels
        spacing: Gap between neighbouring bars in pixels
        background: Fill for margins, gaps and empty bar cells
        gradient: Maps value/max to the bar color, low to high
    """

    bar_width: int = defaults.DEFAULT_BAR_WIDTH
    chart_height: int = defaults.DEFAULT_CHART_HEIGHT
    margin: int = defaults.DEFAULT_MARGIN
    margin_top: int = defaults.DEFAULT_MARGIN_TOP
    spacing: int = defaults.DEFAULT_SPACING
    background: Color = Color(defaults.DEFAULT_BACKGROUND)
    gradient: Gradient = field(default_factory=default_gradient)


@dataclass(frozen=True)
class FrameSnapshot:
    """Value copy of the sort state at the moment a frame was issued.

    Built only through :meth:`capture`, which copies its inputs, so later
    mutation of the live array or highlight map never reaches a snapshot
    that is still waiting to be rendered.
    """

    frame: int
    values: tuple[int, ...]
    highlights: Mapping[int, float]

    @classmethod
    def capture(
        cls,
        frame: int,
        values: list[int],
        highlights: Mapping[int, float],
        marks: Mapping[int, float] | None = None,
    ) -> "FrameSnapshot":
        """Copy ``values`` and ``highlights`` (overlaid with ``marks``)."""
        merged = dict(highlights)
        if marks:
            merged.update(marks)
        return cls(
            frame=frame,
            values=tuple(values),
            highlights=MappingProxyType(merged),
        )

    def highlight(self, index: int) -> float:
        return self.highlights.get(index, 0.0)

    def __len__(self) -> int:
        return len(self.values)
