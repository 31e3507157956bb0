"""Classic quadratic sorting algorithms that count comparisons and swaps."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from os import PathLike
from typing import Callable, MutableSequence, Sequence

DEFAULT_RESULTS_PATH = "resultados.csv"


@dataclass
class Counter:
    """Running tally of element comparisons and swaps/shifts."""

    comparisons: int = 0
    swaps: int = 0


@dataclass
class SortReport:
    """Outcome of a timed sorting run."""

    name: str
    source_name: str
    elapsed_ms: int
    comparisons: int
    swaps: int
    values: list[float] = field(default_factory=list, repr=False)

    def csv_line(self) -> str:
        """Return the CSV record written to the results file."""
        return (
            f"{self.name},{self.source_name},{self.elapsed_ms},"
            f"{self.comparisons},{self.swaps}\n"
        )

    def render(self) -> str:
        """Return the boxed summary shown on the console."""
        return "\n".join(
            [
                "",
                "┌───────────────────────────────────────┐",
                f"   Resultados do {self.name}",
                "├───────────────────────────────────────┤",
                f"   Tempo de execução: {self.elapsed_ms}ms",
                f"   Comparações:      {self.comparisons}",
                f"   Trocas:           {self.swaps}",
                "└───────────────────────────────────────┘",
            ]
        )


Algorithm = Callable[[MutableSequence[float], Counter], None]


def _index_of_max(values: Sequence[float], first: int, last: int, counter: Counter) -> int:
    """Index of the largest element in values[first..last], inclusive."""
    best = first
    for i in range(first + 1, last + 1):
        counter.comparisons += 1
        if values[i] > values[best]:
            best = i
    return best


def _swap(values: MutableSequence[float], a: int, b: int, counter: Counter) -> None:
    values[a], values[b] = values[b], values[a]
    counter.swaps += 1


def selection_sort(values: MutableSequence[float], counter: Counter) -> None:
    """Sort in place by moving the maximum of the unsorted prefix to its end."""
    for end in range(len(values) - 1, 0, -1):
        _swap(values, _index_of_max(values, 0, end, counter), end, counter)


def selection_sort_opt(values: MutableSequence[float], counter: Counter) -> None:
    """Selection sort that skips swaps of an element already in place."""
    for end in range(len(values) - 1, 0, -1):
        largest = _index_of_max(values, 0, end, counter)
        if largest != end:
            _swap(values, largest, end, counter)


def bubble_sort(values: MutableSequence[float], counter: Counter) -> None:
    """Sort in place by repeatedly swapping adjacent out-of-order pairs."""
    for end in range(len(values) - 1, 0, -1):
        for i in range(end):
            counter.comparisons += 1
            if values[i] > values[i + 1]:
                _swap(values, i, i + 1, counter)


def bubble_sort_opt(values: MutableSequence[float], counter: Counter) -> None:
    """Bubble sort that stops after a pass with no swaps."""
    for end in range(len(values) - 1, 0, -1):
        swapped = False
        for i in range(end):
            counter.comparisons += 1
            if values[i] > values[i + 1]:
                _swap(values, i, i + 1, counter)
                swapped = True
        if not swapped:
            break


def _insert(values: MutableSequence[float], k: int, counter: Counter) -> None:
    x = values[k]
    i = k - 1
    while i >= 0:
        counter.comparisons += 1
        if values[i] > x:
            values[i + 1] = values[i]
            counter.swaps += 1
            i -= 1
        else:
            break
    values[i + 1] = x


def insertion_sort(values: MutableSequence[float], counter: Counter) -> None:
    """Sort in place by inserting each element into the sorted prefix."""
    for k in range(1, len(values)):
        _insert(values, k, counter)


def measure_time(
    name: str,
    algorithm: Algorithm,
    data: Sequence[float],
    source_name: str,
    results_path: str | PathLike[str] = DEFAULT_RESULTS_PATH,
) -> SortReport:
    """Sort a copy of data with algorithm, print a summary and append it to a CSV file."""
    values = list(data)
    counter = Counter()
    start = time.perf_counter_ns()
    algorithm(values, counter)
    elapsed_ms = (time.perf_counter_ns() - start) // 1_000_000

    report = SortReport(
        name=name,
        source_name=source_name,
        elapsed_ms=elapsed_ms,
        comparisons=counter.comparisons,
        swaps=counter.swaps,
        values=values,
    )
    print(report.render())
    with open(results_path, "a", encoding="utf-8") as out:
        out.write(report.csv_line())
    return report