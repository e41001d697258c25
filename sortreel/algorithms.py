"""Sorting algorithms instrumented to drive a VisualizationState.

Drivers read values through ``state[i]`` and change the array only with
``state.swap``; every swap (and every ``state.compare``) becomes a frame.
"""

from typing import Callable

from sortreel import defaults
from sortreel.state import VisualizationState

SortFunction = Callable[[VisualizationState], None]


def bubble_sort(state: VisualizationState) -> None:
    """Naive O(n^2) exchange sort; one frame per corrective swap.

    Plain reads are used for the comparisons, so no compare frames or
    highlights are emitted.
    """
    n = len(state)
    for i in range(n):
        for j in range(i + 1, n):
            if state[j] < state[i]:
                state.swap(i, j)


def quicksort(state: VisualizationState) -> None:
    """Recursive quicksort with Lomuto partitioning."""
    _quicksort(state, 0, len(state) - 1)


def _quicksort(state: VisualizationState, lo: int, hi: int) -> None:
    if lo >= hi:
        return
    pivot = _partition(state, lo, hi)
    # Pivot at lo leaves nothing below it
    if pivot > lo:
        _quicksort(state, lo, pivot - 1)
    _quicksort(state, pivot + 1, hi)


def _partition(state: VisualizationState, lo: int, hi: int) -> int:
    state.set_highlight(hi, defaults.PIVOT_HIGHLIGHT)
    i = lo
    for j in range(lo, hi):
        # Compare and swap mark j in their own frames, so this scan
        # intensity shows up only in the live highlight map
        state.set_highlight(j, defaults.SCAN_HIGHLIGHT)
        if state.compare(j, hi) < 0:
            state.swap(i, j)
            i += 1
        state.set_highlight(j, 0.0)
    state.set_highlight(hi, 0.0)
    state.swap(i, hi)
    return i


ALGORITHMS: dict[str, SortFunction] = {
    "bubble": bubble_sort,
    "quick": quicksort,
}


def get_algorithm(name: str) -> SortFunction:
    """Look up a sorting driver by name.

    Raises:
        ValueError: If the name is not registered
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm {name!r} (available: {', '.join(ALGORITHMS)})"
        ) from None
