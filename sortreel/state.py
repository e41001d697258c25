"""Live sort state that emits one rendered frame per swap/compare.

The driver (a sorting algorithm) runs on a single thread and mutates the
array only through :class:`VisualizationState`. Every frame-emitting call:

1. copies the array and highlight map into a :class:`FrameSnapshot`
2. assigns it the next frame number (issue order, so file names are stable)
3. submits render + encode + write to a thread pool and returns at once

Tasks take a permit from a shared bounded semaphore before doing any work,
which caps how many frames are rendered or written at the same time.
``finish()`` is the single join point.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Optional, Protocol

from sortreel import defaults
from sortreel.errors import FrameRenderError
from sortreel.render import render_frame_png
from sortreel.types import FrameSnapshot, RenderConfig

logger = logging.getLogger(__name__)

Renderer = Callable[[FrameSnapshot, RenderConfig], bytes]


class FrameWriter(Protocol):
    def write(self, name: str, data: bytes) -> None: ...


class Gate(Protocol):
    """Counting gate; ``threading.BoundedSemaphore`` satisfies this."""

    def acquire(self, blocking: bool = True, timeout: float | None = None) -> bool: ...

    def release(self) -> None: ...


class DirectoryFrameWriter:
    """Write frame files into a directory, creating it on first use."""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)
        self._mkdir_lock = threading.Lock()
        self._ready = False

    def write(self, name: str, data: bytes) -> None:
        if not self._ready:
            with self._mkdir_lock:
                self.output_dir.mkdir(parents=True, exist_ok=True)
                self._ready = True
        (self.output_dir / name).write_bytes(data)


def frame_filename(run_name: str, frame: int) -> str:
    return f"{run_name}-{frame}{defaults.FRAME_EXTENSION}"


class VisualizationState:
    """Owns the array being sorted and schedules a frame per operation.

    Args:
        values: Initial permutation (copied; must be non-empty)
        config: Geometry and colors shared by every frame
        writer: Destination for encoded frames
        run_name: Prefix of every frame file name
        concurrency: Permits in the default gate
        gate: Shared gate to use instead of a fresh BoundedSemaphore
        renderer: Snapshot -> encoded bytes (defaults to PNG rendering)
        max_workers: Thread pool size (defaults to ``concurrency``)
    """

    def __init__(
        self,
        values: list[int],
        config: RenderConfig,
        writer: FrameWriter,
        run_name: str = defaults.DEFAULT_RUN_NAME,
        concurrency: int = defaults.DEFAULT_CONCURRENCY,
        gate: Optional[Gate] = None,
        renderer: Renderer = render_frame_png,
        max_workers: Optional[int] = None,
    ):
        if not values:
            raise ValueError("Cannot visualize an empty array")
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1, got {concurrency}")

        self._values: list[int] = list(values)
        self._highlights: dict[int, float] = {}
        self.config = config
        self.writer = writer
        self.run_name = run_name
        self.renderer = renderer

        self._gate: Gate = gate if gate is not None else threading.BoundedSemaphore(concurrency)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or concurrency,
            thread_name_prefix=f"{run_name}-frames",
        )
        self._tasks: list[tuple[int, Future]] = []
        self._next_frame = 0
        self._finished = False

    # ------------------------------------------------------------------
    # Read access for drivers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    @property
    def values(self) -> tuple[int, ...]:
        return tuple(self._values)

    @property
    def highlights(self) -> dict[int, float]:
        return dict(self._highlights)

    def highlight(self, index: int) -> float:
        return self._highlights.get(index, 0.0)

    @property
    def frame_count(self) -> int:
        """Frames assigned so far (numbered 0..frame_count-1)."""
        return self._next_frame

    @property
    def finished(self) -> bool:
        return self._finished

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def swap(self, x: int, y: int) -> None:
        """Exchange positions ``x`` and ``y`` and emit the post-swap frame."""
        self._check_open()
        self._check_index(x)
        self._check_index(y)
        values = self._values
        values[x], values[y] = values[y], values[x]
        self._emit({x: defaults.OPERATION_HIGHLIGHT, y: defaults.OPERATION_HIGHLIGHT})

    def compare(self, x: int, y: int) -> int:
        """Emit a frame marking ``x`` and ``y``; return their ordering.

        Returns -1, 0 or 1 as ``self[x]`` is less than, equal to or greater
        than ``self[y]``. Does not wait for the frame to be written.
        """
        self._check_open()
        self._check_index(x)
        self._check_index(y)
        a, b = self._values[x], self._values[y]
        self._emit({x: defaults.OPERATION_HIGHLIGHT, y: defaults.OPERATION_HIGHLIGHT})
        return (a > b) - (a < b)

    def set_highlight(self, index: int, value: float) -> None:
        """Set the highlight intensity of ``index``; 0 removes it. No frame."""
        self._check_open()
        self._check_index(index)
        if value != 0:
            self._highlights[index] = value
        else:
            self._highlights.pop(index, None)

    def finish(self) -> int:
        """Wait for every spawned frame, in spawn order.

        All tasks are drained before returning or raising, since there is no
        way to abandon in-flight work.

        Returns:
            Number of frames written

        Raises:
            FrameRenderError: For the earliest-spawned task that failed
        """
        self._check_open()
        self._finished = True
        failure: Optional[tuple[int, BaseException]] = None
        try:
            for frame, future in self._tasks:
                exc = future.exception()
                if exc is not None and failure is None:
                    logger.error("Frame %d of %r failed: %s", frame, self.run_name, exc)
                    failure = (frame, exc)
        finally:
            self._executor.shutdown(wait=True)

        if failure is not None:
            frame, exc = failure
            raise FrameRenderError(frame, exc) from exc
        logger.info("Wrote %d frames for %r", self._next_frame, self.run_name)
        return self._next_frame

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self._finished:
            raise RuntimeError(f"Run {self.run_name!r} is already finished")

    def _check_index(self, index: int) -> None:
        # Negative indices would otherwise wrap
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range for {len(self._values)} values")

    def _emit(self, marks: dict[int, float]) -> None:
        frame = self._next_frame
        snapshot = FrameSnapshot.capture(frame, self._values, self._highlights, marks)
        future = self._executor.submit(self._render_task, snapshot)
        self._tasks.append((frame, future))
        self._next_frame += 1

    def _render_task(self, snapshot: FrameSnapshot) -> None:
        self._gate.acquire()
        try:
            data = self.renderer(snapshot, self.config)
            name = frame_filename(self.run_name, snapshot.frame)
            self.writer.write(name, data)
            logger.debug("Wrote %s (%d bytes)", name, len(data))
        finally:
            self._gate.release()
