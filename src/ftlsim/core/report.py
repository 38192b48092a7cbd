"""Text reports for simulation runs."""

from ..flash.engine import RunResult
from ..flash.statistics import RunStatistics
from .controller import BenchmarkResult

UNITS_PER_LINE = 8


def format_header(title: str) -> str:
    """Format a section header."""
    rule = "=" * 60
    return f"\n{rule}\n  {title}\n{rule}\n"


def format_write_table(write_counts: tuple[int, ...]) -> str:
    """Per-unit write counts, UNITS_PER_LINE per line."""
    cells = [f"{i:3d}:{count}" for i, count in enumerate(write_counts)]
    lines = [
        "  ".join(cells[i : i + UNITS_PER_LINE])
        for i in range(0, len(cells), UNITS_PER_LINE)
    ]
    return "\n".join(lines)


def format_run_report(result: RunResult, stats: RunStatistics) -> str:
    """Full report for one run."""
    half = len(stats.write_counts) // 2
    parts = [
        format_header("FTL Simulation Statistics"),
        "Unit writes:",
        format_write_table(stats.write_counts),
        "",
        f"Total logical writes : {result.logical_writes}",
        f"Skipped requests     : {result.skipped}",
        f"Total physical writes: {stats.total_writes}",
        f"Dead units           : {stats.dead_count}",
        f"Write distribution   : min={stats.min_writes}  max={stats.max_writes}"
        f"  avg={stats.avg_writes:.2f}",
        f"Avg first {half} units : {stats.first_half_avg:.2f}",
        f"Avg last {len(stats.write_counts) - half} units  : {stats.second_half_avg:.2f}",
    ]

    if not result.completed:
        parts.append(f"\nRun abandoned: {result.error}")

    parts.extend(
        [
            "",
            "Interpretation:",
            "- If both half averages match and min/max are close,",
            "  writes are spread evenly across the device.",
        ]
    )

    return "\n".join(parts)


def format_benchmark_report(bench: BenchmarkResult) -> str:
    return "\n".join(
        [
            format_header(f"Benchmark: {bench.runs} runs"),
            f"Completed runs: {bench.completed_runs}/{bench.runs}",
            f"Total time    : {bench.total_seconds:.6f} seconds",
            f"Avg per run   : {bench.avg_seconds:.6f} seconds",
        ]
    )
