"""Command-line interface for sssp."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from sssp.algorithms.spf import compute
from sssp.bench import BenchmarkResult, run_benchmark
from sssp.config import RunConfig, load_config
from sssp.exceptions import SSSPError
from sssp.graph.builder import HeaderOrder, ParsedInput, read_graph
from sssp.logging import get_logger, set_global_log_level
from sssp.profiling import profile_block
from sssp.report import render_text, to_dict

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.000000512 -> "512 ns"; 0.0042 -> "4.20 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f} ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f} us"
    if seconds < 1.0:
        return f"{seconds * 1e3:.2f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _fail(exc: BaseException) -> None:
    """Report an error on stderr and exit with status 1."""
    message = f"{type(exc).__name__}: {exc}"
    # The ERROR line is the user-facing report; the traceback shows with -v.
    logger.debug(message, exc_info=exc)
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _load_run_config(config_path: Optional[Path], header_order: Optional[str]) -> RunConfig:
    config = load_config(config_path) if config_path is not None else RunConfig()
    if header_order is not None:
        config = config.with_overrides(header_order=HeaderOrder.from_string(header_order))
    return config


def _load_input(path: Path, config: RunConfig, source: Optional[int]) -> ParsedInput:
    logger.info(f"Loading graph from: {path}")
    parsed = read_graph(path, header_order=config.header_order)
    if source is not None and source != parsed.source:
        logger.info(f"Overriding source {parsed.source} with {source}")
        parsed = ParsedInput(source=source, graph=parsed.graph)
    logger.debug(
        f"Graph has {parsed.graph.n_vertices} vertices and "
        f"{parsed.graph.n_edges} edges; source {parsed.source}"
    )
    return parsed


def _run(
    path: Path,
    source: Optional[int] = None,
    header_order: Optional[str] = None,
    as_json: bool = False,
    config_path: Optional[Path] = None,
) -> None:
    """Compute shortest paths for an input file and print them.

    All output is produced after the computation succeeds, so a failure never
    leaves partial results on stdout.
    """
    try:
        config = _load_run_config(config_path, header_order)
        parsed = _load_input(path, config, source)

        start = perf_counter()
        table = compute(parsed.graph, parsed.source)
        elapsed = perf_counter() - start
        logger.info(
            f"Computed shortest paths from {parsed.source} in {_format_duration(elapsed)}"
        )

        if as_json:
            output = json.dumps(to_dict(table), indent=2) + "\n"
        else:
            output = render_text(
                table,
                unreachable_label=config.unreachable_label,
                separator=config.path_separator,
            )
    except (SSSPError, OSError, ValueError) as exc:
        _fail(exc)
        return

    sys.stdout.write(output)


def _format_benchmark(result: BenchmarkResult) -> str:
    ns = 1e-9
    lines = [
        f"Queries: {result.completed} of {result.requested}"
        f" ({result.workers} worker{'s' if result.workers != 1 else ''})",
        f"Total:   {_format_duration(result.total_ns * ns)}",
        f"Mean:    {_format_duration(result.mean_ns * ns)}",
        f"Median:  {_format_duration(result.median_ns * ns)}",
        f"Min:     {_format_duration(result.min_ns * ns)}",
        f"Max:     {_format_duration(result.max_ns * ns)}",
    ]
    if result.budget_exhausted:
        lines.append("Stopped early: time budget exhausted")
    return "\n".join(lines)


def _benchmark(
    path: Path,
    iterations: Optional[int] = None,
    workers: Optional[int] = None,
    max_seconds: Optional[float] = None,
    source: Optional[int] = None,
    header_order: Optional[str] = None,
    profile: bool = False,
    config_path: Optional[Path] = None,
) -> None:
    """Time repeated queries on an input file and print a summary."""
    try:
        config = _load_run_config(config_path, header_order).with_overrides(
            benchmark_iterations=iterations, benchmark_workers=workers
        )
        parsed = _load_input(path, config, source)

        if profile:
            with profile_block(f"benchmark {path.name}") as profile_result:
                result = run_benchmark(
                    parsed.graph,
                    parsed.source,
                    config.benchmark_iterations,
                    workers=config.benchmark_workers,
                    max_seconds=max_seconds,
                )
            report = _format_benchmark(result) + "\n\n" + profile_result.report()
        else:
            result = run_benchmark(
                parsed.graph,
                parsed.source,
                config.benchmark_iterations,
                workers=config.benchmark_workers,
                max_seconds=max_seconds,
            )
            report = _format_benchmark(result)
    except (SSSPError, OSError, ValueError) as exc:
        _fail(exc)
        return

    print(report)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``sssp`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="sssp",
        description="Single-source shortest paths with Dijkstra's algorithm.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,benchmark}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser(
        "run", help="Print distance and path for every vertex"
    )
    run_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )

    bench_parser = subparsers.add_parser(
        "benchmark", help="Time repeated shortest-path queries"
    )
    bench_parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=None,
        help="Number of queries to run (default: 1000)",
    )
    bench_parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Worker threads issuing queries concurrently (default: 1)",
    )
    bench_parser.add_argument(
        "--max-seconds",
        type=float,
        default=None,
        help="Stop issuing queries once this wall-clock budget is spent",
    )
    bench_parser.add_argument(
        "--profile",
        action="store_true",
        help="Profile the benchmark with cProfile and print the hottest functions",
    )

    for p in (run_parser, bench_parser):
        p.add_argument("input", type=Path, help="Path to the graph input file")
        p.add_argument(
            "--source",
            "-s",
            type=int,
            default=None,
            help="Source vertex (overrides the one in the input header)",
        )
        p.add_argument(
            "--header-order",
            choices=[order.value for order in HeaderOrder],
            default=None,
            help="Order of the two header integers (default: source-first)",
        )
        p.add_argument(
            "--config",
            "-c",
            type=Path,
            default=None,
            help="YAML file with default settings",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run(
            path=args.input,
            source=args.source,
            header_order=args.header_order,
            as_json=args.json,
            config_path=args.config,
        )
    elif args.command == "benchmark":
        _benchmark(
            path=args.input,
            iterations=args.iterations,
            workers=args.workers,
            max_seconds=args.max_seconds,
            source=args.source,
            header_order=args.header_order,
            profile=args.profile,
            config_path=args.config,
        )


if __name__ == "__main__":
    main()
