"""Benchmarks for the SURD-states decomposition.

This module times surd_states across system sizes and interaction orders,
and compares sequential against threaded evaluation of the target states.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

from torchsurd import MaxOrder, surd_states


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Time ``func(*args, **kwargs)``; returns mean, median and interquartile range."""
    for _ in range(warmup):
        func(*args, **kwargs)

    samples = np.empty(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        samples[i] = time.perf_counter() - start

    q1, median, q3 = np.percentile(samples, [25, 50, 75])

    return {
        "mean": float(samples.mean()),
        "median": float(median),
        "iqr": float(q3 - q1),
    }


def format_time(seconds: float) -> str:
    for scale, unit in ((1.0, "s"), (1e-3, "ms"), (1e-6, "us")):
        if seconds >= scale:
            return f"{seconds / scale:.3f}{unit}"
    return f"{seconds * 1e9:.3f}ns"


def print_comparison(
    name: str,
    sequential_time: dict[str, float],
    parallel_time: dict[str, float] | None = None,
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  sequential: {format_time(sequential_time['median'])} "
        f"(iqr {format_time(sequential_time['iqr'])})"
    )
    if parallel_time is not None:
        print(
            f"  threaded:   {format_time(parallel_time['median'])} "
            f"(iqr {format_time(parallel_time['iqr'])})"
        )
        speedup = sequential_time["median"] / parallel_time["median"]
        if speedup >= 1:
            print(f"  Speedup:    {speedup:.2f}x faster")
        else:
            print(f"  Speedup:    {1 / speedup:.2f}x slower")


def random_distribution(
    n_vars: int, n_states: int, n_target_states: int, seed: int = 0
) -> torch.Tensor:
    """Random normalized joint distribution of a target and ``n_vars`` sources."""
    generator = torch.Generator().manual_seed(seed)
    p = torch.rand(
        n_target_states,
        *([n_states] * n_vars),
        generator=generator,
        dtype=torch.float64,
    )
    return p / p.sum()


class BenchSurdStates:
    """Benchmarks for surd_states."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_full(
        self, n_vars: int = 3, n_states: int = 4, n_target_states: int = 4
    ) -> None:
        """Benchmark the full decomposition, sequential and threaded.

        Parameters
        ----------
        n_vars : int, optional
            Number of source variables. Default is 3.
        n_states : int, optional
            Number of states of each source. Default is 4.
        n_target_states : int, optional
            Number of target states. Default is 4.
        """
        p = random_distribution(n_vars, n_states, n_target_states)

        sequential_time = self._bench(surd_states, p)
        parallel_time = self._bench(
            surd_states, p, num_workers=n_target_states
        )

        print_comparison(
            f"surd_states full (n_vars={n_vars}, states={n_states}, "
            f"target_states={n_target_states})",
            sequential_time,
            parallel_time,
        )

    def bench_capped(
        self, n_vars: int = 6, n_states: int = 2, k: int = 2
    ) -> None:
        """Benchmark a capped decomposition against the full one.

        Parameters
        ----------
        n_vars : int, optional
            Number of source variables. Default is 6.
        n_states : int, optional
            Number of states of each variable. Default is 2.
        k : int, optional
            Maximum interaction order. Default is 2.
        """
        p = random_distribution(n_vars, n_states, n_states)

        full_time = self._bench(surd_states, p)
        capped_time = self._bench(surd_states, p, MaxOrder.capped(k))

        name = f"surd_states capped (n_vars={n_vars}, k={k})"
        print(f"\n{name}")
        print("-" * len(name))
        print(f"  full:   {format_time(full_time['median'])}")
        print(f"  capped: {format_time(capped_time['median'])}")

    def run_all(self) -> None:
        """Run all decomposition benchmarks."""
        print("=" * 60)
        print("SURD-STATES BENCHMARKS")
        print("=" * 60)

        print("\n--- Full Decomposition ---")
        self.bench_full()

        print("\n--- Interaction Order Cap ---")
        self.bench_capped()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Source Count Scaling ---")
        for n_vars in [2, 3, 4, 5]:
            self.bench_full(n_vars=n_vars, n_states=3)

        print("\n--- Target State Scaling ---")
        for n_target_states in [2, 8, 32]:
            self.bench_full(n_target_states=n_target_states)

        print("\n--- Pairwise Scaling ---")
        for n_vars in [4, 6, 8]:
            self.bench_capped(n_vars=n_vars)


if __name__ == "__main__":
    bench = BenchSurdStates(warmup=2, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
