"""Benchmark of quadratic sorts and sequential/binary search on binary float data sets."""

__version__ = "0.1.0"
__all__ = ["__version__"]