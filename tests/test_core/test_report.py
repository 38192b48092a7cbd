"""Tests for text reports."""

from ftlsim.core.controller import BenchmarkResult
from ftlsim.core.exceptions import NoHealthyUnitError
from ftlsim.core.report import (
    format_benchmark_report,
    format_run_report,
    format_write_table,
)
from ftlsim.flash.allocator import WearLevelingAllocator
from ftlsim.flash.engine import RunResult
from ftlsim.flash.statistics import summarize


class TestReports:
    """Report formatting tests."""

    def test_write_table_rows(self):
        """Test eight units per line."""
        table = format_write_table(tuple(range(10)))
        lines = table.splitlines()

        assert len(lines) == 2
        assert lines[0].startswith("  0:0")
        assert "  9:9" in lines[1]

    def test_run_report(self):
        allocator = WearLevelingAllocator(num_blocks=16, lifespan=5)
        for unit_id in range(3):
            allocator.record_write(unit_id)
        result = RunResult(requests=4, logical_writes=3, skipped=1, allocations=[0, 1, 2])

        report = format_run_report(result, summarize(allocator))

        assert "Total logical writes : 3" in report
        assert "Total physical writes: 3" in report
        assert "Dead units           : 0" in report
        assert "Avg first 8 units" in report
        assert "Run abandoned" not in report

    def test_abandoned_run_report(self):
        allocator = WearLevelingAllocator(num_blocks=2, lifespan=1)
        result = RunResult(requests=3, logical_writes=2, error=NoHealthyUnitError(2, 1))

        report = format_run_report(result, summarize(allocator))

        assert "Run abandoned" in report

    def test_benchmark_report(self):
        report = format_benchmark_report(
            BenchmarkResult(runs=4, completed_runs=4, total_seconds=2.0)
        )

        assert "Benchmark: 4 runs" in report
        assert "Avg per run   : 0.500000 seconds" in report
