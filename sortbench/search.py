"""Sequential and binary search with comparison counting, plus float file I/O."""

from __future__ import annotations

import time
from array import array
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Sequence

_ITEM_SIZE = array("f").itemsize


@dataclass(frozen=True)
class SearchResult:
    """Position found (None if absent), elapsed milliseconds and comparisons made."""

    position: int | None
    elapsed_ms: float
    comparisons: int

    @property
    def found(self) -> bool:
        return self.position is not None


def sequential_search(values: Sequence[float], target: float) -> tuple[int | None, int]:
    """Scan left to right; return (index or None, comparisons)."""
    comparisons = 0
    for index, value in enumerate(values):
        comparisons += 1
        if value == target:
            return index, comparisons
    return None, comparisons


def binary_search(values: Sequence[float], target: float) -> tuple[int | None, int]:
    """Search a sorted sequence; return (index or None, comparisons)."""
    comparisons = 0
    low, high = 0, len(values) - 1
    while low <= high:
        comparisons += 1
        middle = low + (high - low) // 2
        comparisons += 1
        if values[middle] == target:
            return middle, comparisons
        if values[middle] < target:
            comparisons += 1
            low = middle + 1
        else:
            high = middle - 1
    return None, comparisons


def _timed(search, values: Sequence[float], target: float) -> SearchResult:
    start = time.perf_counter_ns()
    position, comparisons = search(values, target)
    elapsed_ms = (time.perf_counter_ns() - start) / 1_000_000
    return SearchResult(position, elapsed_ms, comparisons)


def run_sequential_search(values: Sequence[float], target: float) -> SearchResult:
    """Timed sequential search."""
    return _timed(sequential_search, values, target)


def run_binary_search(values: Sequence[float], target: float) -> SearchResult:
    """Timed binary search."""
    return _timed(binary_search, values, target)


def read_floats(path: str | PathLike[str]) -> list[float]:
    """Read a file of native 32-bit floats; trailing partial values are ignored."""
    raw = Path(path).read_bytes()
    usable = len(raw) - len(raw) % _ITEM_SIZE
    data = array("f")
    data.frombytes(raw[:usable])
    return data.tolist()


def save_floats(path: str | PathLike[str], values: Iterable[float]) -> None:
    """Write values as native 32-bit floats."""
    Path(path).write_bytes(array("f", values).tobytes())