"""Rasterize sort snapshots into RGB bar charts and encode them as PNG."""

from io import BytesIO

import numpy as np
from PIL import Image

from sortreel.color import WHITE, Color
from sortreel.types import FrameSnapshot, RenderConfig


def canvas_size(config: RenderConfig, bar_count: int) -> tuple[int, int]:
    """Return (width, height) of a frame for ``bar_count`` bars."""
    width = (
        2 * config.margin
        + config.spacing * (bar_count - 1)
        + config.bar_width * bar_count
    )
    height = config.chart_height + 2 * config.margin_top
    return width, height


def fill_fractions(values: tuple[int, ...] | list[int]) -> list[float]:
    """Each value divided by the maximum value.

    An all-zero array divides by zero; callers must supply at least one
    positive value.
    """
    max_value = max(values)
    return [v / max_value for v in values]


def bar_colors(snapshot: FrameSnapshot, config: RenderConfig) -> list[Color]:
    """Gradient color per bar, blended toward white by its highlight."""
    return [
        config.gradient.sample(frac).lerp(WHITE, snapshot.highlight(i))
        for i, frac in enumerate(fill_fractions(snapshot.values))
    ]


def _column_bar_index(config: RenderConfig, bar_count: int) -> np.ndarray:
    """Map each output column to its bar index, or -1 for margin/spacing."""
    width, _ = canvas_size(config, bar_count)
    columns = np.full(width, -1, dtype=np.int64)
    x = config.margin
    for i in range(bar_count):
        if i != 0:
            x += config.spacing
        columns[x:x + config.bar_width] = i
        x += config.bar_width
    return columns


def render_frame_rgb(snapshot: FrameSnapshot, config: RenderConfig) -> np.ndarray:
    """Rasterize a snapshot into a (height, width, 3) uint8 buffer.

    Bars grow upward from the bottom of the chart: bar ``i`` covers chart
    row ``bar_y`` when ``value[i] / max >= 1 - bar_y / chart_height``. Rows
    in the top and bottom margin bands are pure background.

    Every row reads only the snapshot and writes its own slice, so all rows
    are evaluated together with broadcasting.
    """
    bar_count = len(snapshot)
    width, height = canvas_size(config, bar_count)
    background = np.array(config.background.to_rgb(), dtype=np.uint8)

    fractions = np.asarray(fill_fractions(snapshot.values), dtype=np.float64)
    palette = np.array(
        [c.to_rgb() for c in bar_colors(snapshot, config)], dtype=np.uint8
    ).reshape(bar_count, 3)

    # (chart_height, bar_count): which bar cells are filled on each chart row
    bar_y = np.arange(config.chart_height, dtype=np.float64)
    thresholds = 1.0 - bar_y / config.chart_height
    filled = fractions[np.newaxis, :] >= thresholds[:, np.newaxis]

    columns = _column_bar_index(config, bar_count)
    is_bar = columns >= 0
    safe_columns = np.where(is_bar, columns, 0)

    # (chart_height, width)
    pixel_filled = filled[:, safe_columns] & is_bar[np.newaxis, :]
    chart = np.where(
        pixel_filled[:, :, np.newaxis],
        palette[safe_columns][np.newaxis, :, :],
        background,
    ).astype(np.uint8)

    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:, :] = background
    rgb[config.margin_top:config.margin_top + config.chart_height] = chart
    return rgb


def encode_png(rgb: np.ndarray) -> bytes:
    """Encode a (height, width, 3) uint8 buffer as 8-bit RGB PNG bytes."""
    # (H, W, 3) uint8 is inferred as mode "RGB"
    img = Image.fromarray(np.ascontiguousarray(rgb, dtype=np.uint8))
    buf = BytesIO()
    img.save(buf, format='PNG')
    return buf.getvalue()


def render_frame_png(snapshot: FrameSnapshot, config: RenderConfig) -> bytes:
    """Render and encode one frame."""
    return encode_png(render_frame_rgb(snapshot, config))
