"""Simulation Controller - Drives the reference workflow."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Sequence

from ..flash.engine import FTLEngine, RunResult
from ..flash.statistics import RunStatistics
from ..storage.backend import PersistenceSink
from ..storage.file_backend import FileSink
from ..workload.reference import reference_requests
from .config import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class SimulationOutcome:
    """Result of a single simulation run."""

    result: RunResult
    statistics: RunStatistics


@dataclass
class BenchmarkResult:
    """Timing of repeated simulation runs."""

    runs: int
    completed_runs: int
    total_seconds: float

    @property
    def avg_seconds(self) -> float:
        return self.total_seconds / self.runs if self.runs else 0.0


class SimulationController:
    """
    Main simulation controller.

    Owns the persistence sink and the engine, and serializes runs so that no
    two runs ever share engine state. Each run starts from a fresh allocator
    and translation table.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        sink: PersistenceSink | None = None,
    ):
        self.settings = settings or get_settings()
        self.sink = sink or FileSink(self.settings)
        self.engine = FTLEngine(sink=self.sink, settings=self.settings)

        self._initialized = False
        self._lock = asyncio.Lock()
        self._runs = 0
        self._failed_runs = 0

    async def initialize(self) -> None:
        """Format the sink before first use."""
        if self._initialized:
            return

        await self.sink.format()
        self._initialized = True
        logger.info(
            "Device ready: %d units x %d bytes, %d logical addresses, lifespan %d",
            self.settings.num_blocks,
            self.settings.unit_size,
            self.settings.num_logical,
            self.settings.lifespan,
        )

    async def shutdown(self) -> None:
        await self.sink.close()
        self._initialized = False

    async def _run_once(self, workload: Sequence[int]) -> RunResult:
        result = await self.engine.run(workload)
        self._runs += 1
        if not result.completed:
            self._failed_runs += 1
        return result

    async def run_simulation(
        self,
        workload: Sequence[int] | None = None,
        format_sink: bool = True,
    ) -> SimulationOutcome:
        """
        Run one simulation.

        Args:
            workload: Flat request list (defaults to the reference workload)
            format_sink: Zero the sink before the run

        Returns:
            SimulationOutcome with the run result and statistics
        """
        if workload is None:
            workload = reference_requests()

        async with self._lock:
            if format_sink:
                await self.sink.format()
                self._initialized = True
            elif not self._initialized:
                await self.initialize()

            result = await self._run_once(workload)
            statistics = self.engine.statistics()

        logger.info(
            "Run finished: %d logical writes, %d skipped, %d dead units",
            result.logical_writes,
            result.skipped,
            statistics.dead_count,
        )

        return SimulationOutcome(result=result, statistics=statistics)

    async def benchmark(
        self,
        runs: int | None = None,
        workload: Sequence[int] | None = None,
    ) -> BenchmarkResult:
        """
        Time repeated independent runs over the same sink.

        The sink is formatted once, outside the timed loop; every run fully
        rewrites the units it touches.
        """
        runs = runs if runs is not None else self.settings.bench_runs
        if runs <= 0:
            raise ValueError(f"runs must be positive, got {runs}")

        if workload is None:
            workload = reference_requests()
        workload = list(workload)

        async with self._lock:
            await self.sink.format()
            self._initialized = True

            completed = 0
            start = time.perf_counter()
            for _ in range(runs):
                result = await self._run_once(workload)
                if result.completed:
                    completed += 1
            elapsed = time.perf_counter() - start

        logger.info("Benchmark: %d runs in %.6f seconds", runs, elapsed)

        return BenchmarkResult(runs=runs, completed_runs=completed, total_seconds=elapsed)

    def get_device_info(self) -> dict:
        """Get device geometry and endurance settings."""
        return {
            "num_blocks": self.settings.num_blocks,
            "unit_size": self.settings.unit_size,
            "num_logical": self.settings.num_logical,
            "lifespan": self.settings.lifespan,
            "filler_byte": self.settings.filler_byte,
            "device_size": self.settings.device_size,
        }

    async def get_stats(self) -> dict:
        """Get controller and sink statistics."""
        return {
            "runs": self._runs,
            "failed_runs": self._failed_runs,
            "sink": await self.sink.get_stats(),
        }


# Singleton controller instance
_controller: SimulationController | None = None


async def get_controller() -> SimulationController:
    """Get or create the simulation controller singleton."""
    global _controller
    if _controller is None:
        _controller = SimulationController()
        await _controller.initialize()
    return _controller
