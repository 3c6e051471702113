"""Benchmarks for the SURD-states decomposition."""

from .bench_surd_states import BenchSurdStates

__all__ = [
    "BenchSurdStates",
]
