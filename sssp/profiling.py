"""CPU profiling for benchmark runs.

Wraps a block of work in ``cProfile`` and keeps the resulting statistics so the
benchmark command can print the functions that dominate query time.
"""

from __future__ import annotations

import cProfile
import io
import pstats
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Generator, List, Optional, Tuple

from sssp.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ProfileResult:
    """CPU profile of one profiled block.

    Attributes:
        label: Name of the profiled block.
        wall_time: Wall-clock seconds spent in the block.
        cpu_time: Seconds attributed to profiled functions.
        function_calls: Number of profiled function calls.
        stats: Raw ``pstats`` statistics.
    """

    label: str
    wall_time: float = 0.0
    cpu_time: float = 0.0
    function_calls: int = 0
    stats: Optional[pstats.Stats] = field(default=None, repr=False)

    def top_functions(self, limit: int = 10) -> List[Tuple[str, int, float]]:
        """Return ``(function, calls, cumulative_seconds)`` sorted by cumulative time."""
        if self.stats is None:
            return []
        # pstats values: (primitive calls, total calls, total time, cumulative time, callers)
        rows = []
        for (filename, lineno, func), (_cc, nc, _tt, ct, _callers) in getattr(
            self.stats, "stats", {}
        ).items():
            rows.append((f"{func} ({filename}:{lineno})", nc, ct))
        rows.sort(key=lambda row: row[2], reverse=True)
        return rows[:limit]

    def report(self, limit: int = 10) -> str:
        """Return a plain-text summary of the profile."""
        lines = [
            f"Profile: {self.label}",
            f"   wall {self.wall_time:.3f} s, cpu {self.cpu_time:.3f} s, "
            f"{self.function_calls:,} calls",
        ]
        for name, calls, cumulative in self.top_functions(limit):
            lines.append(f"   {cumulative:9.4f} s {calls:>10,}  {name}")
        return "\n".join(lines)


@contextmanager
def profile_block(label: str) -> Generator[ProfileResult, None, None]:
    """Profile the body of a ``with`` block.

    The yielded :class:`ProfileResult` is filled in when the block exits.

    Example:
        >>> with profile_block("spf") as result:
        ...     compute(graph, 0)
        >>> print(result.report())
    """
    result = ProfileResult(label=label)
    logger.debug(f"Starting profiling for: {label}")
    start = time.perf_counter()
    profiler = cProfile.Profile()
    profiler.enable()
    try:
        yield result
    finally:
        profiler.disable()
        result.wall_time = time.perf_counter() - start
        stats = pstats.Stats(profiler, stream=io.StringIO())
        stats_data = getattr(stats, "stats", {})
        result.cpu_time = sum(row[2] for row in stats_data.values())
        result.function_calls = sum(row[1] for row in stats_data.values())
        result.stats = stats
        logger.debug(
            f"Completed profiling for: {label} "
            f"({result.wall_time:.3f}s wall, {result.function_calls:,} calls)"
        )
