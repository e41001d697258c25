"""Pure run orchestration - build state, drive the sort, drain frames."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from sortreel import defaults
from sortreel.algorithms import SortFunction
from sortreel.errors import FrameRenderError
from sortreel.state import FrameWriter, VisualizationState
from sortreel.types import RenderConfig

logger = logging.getLogger(__name__)


@dataclass
class SortRunResult:
    """Result from a completed run."""

    sorted_values: list[int]
    frame_count: int
    elapsed: float  # Seconds, sort + drain


def run_sort(
    values: list[int],
    algorithm: SortFunction,
    config: RenderConfig,
    writer: FrameWriter,
    run_name: str = defaults.DEFAULT_RUN_NAME,
    concurrency: int = defaults.DEFAULT_CONCURRENCY,
) -> SortRunResult:
    """Sort ``values`` with ``algorithm`` and write one frame per step.

    Raises:
        FrameRenderError: If any frame failed to render or write
    """
    start = time.perf_counter()
    state = VisualizationState(
        values,
        config,
        writer,
        run_name=run_name,
        concurrency=concurrency,
    )
    logger.info(
        "Sorting %d values with %s (%d concurrent frames)",
        len(state), algorithm.__name__, concurrency,
    )

    try:
        algorithm(state)
    except BaseException:
        # Drain spawned frames, but the driver error is the one to report
        try:
            state.finish()
        except FrameRenderError as e:
            logger.error("Frame failure during aborted run %r: %s", run_name, e)
        raise
    frame_count = state.finish()

    return SortRunResult(
        sorted_values=list(state.values),
        frame_count=frame_count,
        elapsed=time.perf_counter() - start,
    )
