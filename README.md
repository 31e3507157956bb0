# sortbench

sortbench is a small interactive benchmark for teaching sorting and searching.
It reads data sets of 32-bit floats that are stored as raw binary files. It sorts
each data set with five quadratic algorithms. For each algorithm it reports the
running time, the number of comparisons and the number of swaps. It then runs a
sequential search and a binary search on the sorted data and compares them.

The console output is in Portuguese.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
sortbench
```

The menu offers these choices:

1. Small data set (`pequeno.bin`)
2. Medium data set (`medio.bin`)
3. Large data set (`grande.bin`)
4. Generate new random data sets: 25,000, 110,000 and 270,000 floats in the range [-1e6, 1e6]
5. Quit

The program also quits at end of input. A choice that is not a number is ignored.

When you choose a data set, sortbench does the following:

- It sorts a copy of the data set with every algorithm and prints a summary box for each one.
- It writes each sorted copy to the results directory, for example
  `SelectionPequeno.bin` or `InsertionGrande.bin`.
- It adds one line per algorithm to the CSV file in the form
  `algorithm,source file,milliseconds,comparisons,swaps`.
- It prints the total time taken by the sorts.
- It takes the value in the middle of the unsorted data as the target and
  searches for it in the sorted data with both searches.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--data-dir` | `../dados` | where the data sets are read from and generated into |
| `--results-dir` | `../resultados` | where the sorted copies are written |
| `--csv` | `resultados.csv` | CSV file that the per-algorithm results are appended to |

Choose option 4 first to create the data files that options 1 to 3 read. The
program does not create the data and results directories, so they must
already exist. If a file cannot be opened, the program prints an error and
exits with status 1.

## Library use

```python
from sortbench.sorting import Counter, insertion_sort, measure_time, bubble_sort_opt
from sortbench.search import binary_search, run_sequential_search, read_floats, save_floats
from sortbench.generator import create_file, generate

values = [3.0, 1.0, 2.0]
counter = Counter()
insertion_sort(values, counter)              # sorts in place
print(values, counter.comparisons, counter.swaps)

position, comparisons = binary_search(values, 2.0)   # position is None when absent
result = run_sequential_search(values, 2.0)          # SearchResult(position, elapsed_ms, comparisons)

report = measure_time("BubbleSortOptimized", bubble_sort_opt, [2.0, 1.0], "demo", "out.csv")
print(report.elapsed_ms, report.comparisons, report.swaps, report.values)
```

- `sortbench.sorting` provides `selection_sort`, `selection_sort_opt`,
  `bubble_sort`, `bubble_sort_opt` and `insertion_sort`, the `Counter` they
  update, and `measure_time`. `measure_time` sorts a copy of the data, prints a
  summary, appends a line to a CSV file and returns a `SortReport`.
- `sortbench.search` provides `sequential_search` and `binary_search`, which
  return `(index or None, comparisons)`. It also provides their timed forms
  `run_sequential_search` and `run_binary_search`, which return a
  `SearchResult`. Finally it provides `read_floats` and `save_floats`.
- `sortbench.generator` provides `create_file(path, size, rng=None)` and
  `generate(data_dir, rng=None)`. Both take an optional `random.Random`, so the
  output can be reproduced.

Floats are stored on disk as native 32-bit values with no header. Any file
written by `save_floats` or `create_file` can be read back with `read_floats`.
Trailing bytes that do not make up a whole float are ignored.

## What it does not do

sortbench only writes the CSV file. It does not draw charts or analyse the CSV
in any other way.

## Tests

```
pip install .[test]
pytest
```