"""Ring queue, stable vector, futures, thread and object pools, interval sets and bit helpers."""

__version__ = "1.17.0"