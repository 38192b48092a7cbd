"""Simulation API routes."""

from fastapi import APIRouter

from ..schemas.simulation import (
    BenchmarkRequest,
    BenchmarkResponse,
    SimulationRequest,
    SimulationResponse,
    StatisticsResponse,
)
from ...core.controller import get_controller
from ...workload.loader import parse_workload

router = APIRouter(prefix="/simulations", tags=["simulations"])


@router.post("", response_model=SimulationResponse)
async def run_simulation(request: SimulationRequest):
    """Run one simulation on a freshly formatted device."""
    controller = await get_controller()

    workload = None
    if request.workload is not None:
        workload = parse_workload(request.workload)

    outcome = await controller.run_simulation(workload=workload)
    result = outcome.result

    return SimulationResponse(
        completed=result.completed,
        error=str(result.error) if result.error else None,
        requests=result.requests,
        logical_writes=result.logical_writes,
        skipped=result.skipped,
        statistics=StatisticsResponse(
            **outcome.statistics.to_dict(include_counts=request.include_counts)
        ),
        allocations=result.allocations if request.include_trace else None,
    )


@router.post("/benchmark", response_model=BenchmarkResponse)
async def run_benchmark(request: BenchmarkRequest):
    """Time repeated independent runs."""
    controller = await get_controller()

    workload = None
    if request.workload is not None:
        workload = parse_workload(request.workload)

    bench = await controller.benchmark(runs=request.runs, workload=workload)

    return BenchmarkResponse(
        runs=bench.runs,
        completed_runs=bench.completed_runs,
        total_seconds=bench.total_seconds,
        avg_seconds=bench.avg_seconds,
    )
