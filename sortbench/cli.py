"""Interactive menu that benchmarks the sorting and searching routines."""

from __future__ import annotations

import argparse
import os
import sys
import time
from os import PathLike
from pathlib import Path
from typing import Sequence

from .generator import DEFAULT_DATA_DIR, generate
from .search import SearchResult, read_floats, run_binary_search, run_sequential_search, save_floats
from .sorting import (
    DEFAULT_RESULTS_PATH,
    Algorithm,
    Counter,
    SortReport,
    bubble_sort,
    bubble_sort_opt,
    insertion_sort,
    measure_time,
    selection_sort,
    selection_sort_opt,
)

DEFAULT_RESULTS_DIR = Path("../resultados")

DATASET_CHOICES = {1: "pequeno", 2: "medio", 3: "grande"}
GENERATE_CHOICE = 4
EXIT_CHOICE = 5

# (name shown and logged, prefix of the result file, algorithm)
ALGORITHMS: list[tuple[str, str, Algorithm]] = [
    ("SelectionSort", "Selection", selection_sort),
    ("SelectionSortOptimized", "SelectionOpt", selection_sort_opt),
    ("BubbleSort", "Bubble", bubble_sort),
    ("BubbleSortOptimized", "BubbleOpt", bubble_sort_opt),
    ("InsertionSort", "Insertion", insertion_sort),
]

_MENU = "\n".join(
    [
        "",
        "╔════════════════════════════╗",
        "║        MENU PRINCIPAL      ║",
        "╠════════════════════════════╣",
        "║  1. Arquivo Pequeno        ║",
        "║  2. Arquivo Médio          ║",
        "║  3. Arquivo Grande         ║",
        "║ ━━━━━━━━━━━━━━━━━━━━━━━━━━ ║",
        "║  4. Gerar Arquivos Novos   ║",
        "║  5. Sair                   ║",
        "╚════════════════════════════╝",
        "",
        "  ➤ Escolha uma opção: ",
    ]
)

_TOP = "┌───────────────────────────────────────┐"
_MID = "├───────────────────────────────────────┤"
_BOTTOM = "└───────────────────────────────────────┘"


def show_menu() -> None:
    """Print the main menu followed by the choice prompt."""
    print(_MENU, end="", flush=True)


def _describe_search(title: str, result: SearchResult) -> list[str]:
    position = str(result.position) if result.found else "Não encontrado"
    return [
        f"   {title}",
        f"   Posição:       {position}",
        f"   Tempo:         {result.elapsed_ms:g}ms",
        f"   Comparações:   {result.comparisons}",
    ]


def run_dataset(
    label: str,
    data_dir: str | PathLike[str] = DEFAULT_DATA_DIR,
    results_dir: str | PathLike[str] = DEFAULT_RESULTS_DIR,
    csv_path: str | PathLike[str] = DEFAULT_RESULTS_PATH,
) -> tuple[list[SortReport], SearchResult, SearchResult]:
    """Sort the named dataset with every algorithm, save the results and run both searches.

    Returns the sort reports and the sequential and binary search results.
    """
    source = Path(data_dir) / f"{label}.bin"
    data = read_floats(source)
    if not data:
        raise ValueError(f"dataset '{source}' is empty")

    suffix = label.capitalize()
    start = time.perf_counter_ns()
    reports = []
    for name, prefix, algorithm in ALGORITHMS:
        report = measure_time(name, algorithm, data, str(source), csv_path)
        save_floats(Path(results_dir) / f"{prefix}{suffix}.bin", report.values)
        reports.append(report)
    elapsed_ns = time.perf_counter_ns() - start
    print(
        f"\nDuração completa das ordenações: {elapsed_ns // 1_000_000_000}s "
        f"({elapsed_ns // 1_000_000}ms)"
    )

    ordered = list(data)
    selection_sort(ordered, Counter())
    target = data[len(data) // 2]

    sequential = run_sequential_search(ordered, target)
    binary = run_binary_search(ordered, target)

    lines = [
        "",
        "",
        _TOP,
        f"   Valor alvo (meio do vetor): {target:g}",
        _MID,
        *_describe_search("BUSCA SEQUENCIAL", sequential),
        _MID,
        *_describe_search("BUSCA BINÁRIA", binary),
        _BOTTOM,
        "",
    ]
    print("\n".join(lines))
    return reports, sequential, binary


def _read_choice() -> int | None:
    """Read one menu choice; None on end of input, 0 for unreadable input."""
    try:
        line = input()
    except EOFError:
        return None
    try:
        return int(line.strip())
    except ValueError:
        return 0


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Benchmark quadratic sorts and sequential/binary search.",
    )
    parser.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR)
    parser.add_argument("--results-dir", type=Path, default=DEFAULT_RESULTS_DIR)
    parser.add_argument("--csv", type=Path, default=Path(DEFAULT_RESULTS_PATH))
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user chooses to leave."""
    args = _parse_args(argv)
    while True:
        show_menu()
        choice = _read_choice()
        if choice is None or choice == EXIT_CHOICE:
            break
        try:
            if choice in DATASET_CHOICES:
                run_dataset(DATASET_CHOICES[choice], args.data_dir, args.results_dir, args.csv)
            elif choice == GENERATE_CHOICE:
                generate(args.data_dir)
        except OSError as exc:
            name = exc.filename if exc.filename is not None else ""
            reason = exc.strerror or str(exc)
            print(f"Erro ao abrir o arquivo '{name}': {reason}", file=sys.stderr)
            return 1

    print("\n Finalizando sessão...")
    print(
        "\n".join(
            [
                "",
                "╔════════════════════════════╗",
                "║    Programa encerrado      ║",
                "╚════════════════════════════╝",
                "",
            ]
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())