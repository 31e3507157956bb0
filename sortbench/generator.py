"""Generation of binary files filled with random single-precision floats."""

from __future__ import annotations

import random
from array import array
from os import PathLike
from pathlib import Path

LOWER = -1e6
UPPER = 1e6
DEFAULT_DATA_DIR = Path("../dados")
DATASETS = {
    "pequeno.bin": 25_000,
    "medio.bin": 110_000,
    "grande.bin": 270_000,
}


def create_file(
    path: str | PathLike[str],
    size: int,
    rng: random.Random | None = None,
) -> Path:
    """Write size uniformly random floats in [-1e6, 1e6] to path."""
    rng = rng or random.Random()
    values = array("f", (rng.uniform(LOWER, UPPER) for _ in range(size)))
    target = Path(path)
    target.write_bytes(values.tobytes())
    print(f"Arquivo '{path}' criado com {size} floats.")
    return target


def generate(
    data_dir: str | PathLike[str] = DEFAULT_DATA_DIR,
    rng: random.Random | None = None,
) -> list[Path]:
    """Create the small, medium and large data files in data_dir."""
    rng = rng or random.Random()
    base = Path(data_dir)
    return [create_file(base / name, size, rng) for name, size in DATASETS.items()]