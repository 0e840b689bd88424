"""Benchmark harness: time repeated independent SPF queries.

Each iteration runs :func:`~sssp.algorithms.spf.compute` on the same shared,
read-only graph. Queries own their distance tables and heaps, so several may
run at once on a thread pool without any locking. An optional wall-clock budget
stops issuing new queries once it is spent; the engine itself is never
interrupted.
"""

from __future__ import annotations

import statistics
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from time import perf_counter_ns
from typing import Any, Dict, List, Optional

from sssp.algorithms.spf import compute
from sssp.graph.adjacency import Graph, Vertex
from sssp.logging import get_logger

logger = get_logger(__name__)


@dataclass
class BenchmarkResult:
    """Timings of a benchmark run, in nanoseconds.

    Attributes:
        requested: Iterations asked for.
        timings_ns: Duration of each completed query.
        workers: Number of worker threads used.
        wall_time_ns: Wall-clock duration of the whole run.
        budget_exhausted: True when the wall-clock budget stopped the run early.
    """

    requested: int
    timings_ns: List[int] = field(default_factory=list)
    workers: int = 1
    wall_time_ns: int = 0
    budget_exhausted: bool = False

    @property
    def completed(self) -> int:
        return len(self.timings_ns)

    @property
    def total_ns(self) -> int:
        return sum(self.timings_ns)

    @property
    def mean_ns(self) -> float:
        return statistics.fmean(self.timings_ns) if self.timings_ns else 0.0

    @property
    def median_ns(self) -> float:
        return statistics.median(self.timings_ns) if self.timings_ns else 0.0

    @property
    def min_ns(self) -> int:
        return min(self.timings_ns, default=0)

    @property
    def max_ns(self) -> int:
        return max(self.timings_ns, default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Return summary statistics without the per-query timings."""
        return {
            "requested": self.requested,
            "completed": self.completed,
            "workers": self.workers,
            "budget_exhausted": self.budget_exhausted,
            "wall_time_ns": self.wall_time_ns,
            "total_ns": self.total_ns,
            "mean_ns": self.mean_ns,
            "median_ns": self.median_ns,
            "min_ns": self.min_ns,
            "max_ns": self.max_ns,
        }


def _timed_query(graph: Graph, source: Vertex) -> int:
    start = perf_counter_ns()
    compute(graph, source)
    return perf_counter_ns() - start


def run_benchmark(
    graph: Graph,
    source: Vertex,
    iterations: int,
    workers: int = 1,
    max_seconds: Optional[float] = None,
) -> BenchmarkResult:
    """Run ``iterations`` independent queries from ``source`` and time each.

    Args:
        graph: Graph to query; shared read-only by all workers.
        source: Source vertex for every query.
        iterations: Number of queries to run.
        workers: Worker threads; 1 runs the queries serially.
        max_seconds: Optional wall-clock budget for the whole run.

    Returns:
        Per-query timings and summary statistics.

    Raises:
        ValueError: If ``iterations`` or ``workers`` is below 1, or
            ``max_seconds`` is not positive.
        InvalidSource: If ``source`` is not a vertex of ``graph``.
    """
    if iterations < 1:
        raise ValueError("iterations must be at least 1")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    if max_seconds is not None and max_seconds <= 0:
        raise ValueError("max_seconds must be positive")

    # Fail on a bad source before starting any timing.
    compute(graph, source)

    result = BenchmarkResult(requested=iterations, workers=workers)
    deadline = (
        None
        if max_seconds is None
        else perf_counter_ns() + int(max_seconds * 1_000_000_000)
    )

    def out_of_time() -> bool:
        return deadline is not None and perf_counter_ns() >= deadline

    logger.info(
        f"Benchmarking {iterations} queries from source {source} "
        f"on {graph.n_vertices} vertices / {graph.n_edges} edges "
        f"with {workers} worker(s)"
    )
    started = perf_counter_ns()

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(_timed_query, graph, source) for _ in range(iterations)
            ]
            for future in as_completed(futures):
                if future.cancelled():
                    continue
                result.timings_ns.append(future.result())
                if not result.budget_exhausted and out_of_time():
                    # Queries already running finish; queued ones are dropped.
                    cancelled = sum(1 for f in futures if f.cancel())
                    result.budget_exhausted = cancelled > 0
    else:
        for _ in range(iterations):
            if out_of_time():
                result.budget_exhausted = True
                break
            result.timings_ns.append(_timed_query(graph, source))

    result.wall_time_ns = perf_counter_ns() - started
    if result.budget_exhausted:
        logger.warning(
            f"Time budget of {max_seconds} s exhausted after "
            f"{result.completed} of {iterations} queries"
        )
    logger.debug(f"Benchmark finished: {result.to_dict()}")
    return result
