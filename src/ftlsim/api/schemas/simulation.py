"""Simulation API schemas."""

from pydantic import BaseModel, Field, StrictInt


class SimulationRequest(BaseModel):
    """Request to run one simulation."""

    workload: list[StrictInt] | list[list[StrictInt]] | None = Field(
        default=None,
        description="Flat address list or list of sequences; reference workload if omitted",
    )
    include_trace: bool = False
    include_counts: bool = False


class StatisticsResponse(BaseModel):
    """Wear statistics of a run."""

    total_writes: int
    dead_count: int
    min_writes: int
    max_writes: int
    avg_writes: float
    first_half_avg: float
    second_half_avg: float
    write_counts: list[int] | None = None


class SimulationResponse(BaseModel):
    """Simulation run response."""

    completed: bool
    error: str | None = None
    requests: int
    logical_writes: int
    skipped: int
    statistics: StatisticsResponse
    allocations: list[int] | None = None


class BenchmarkRequest(BaseModel):
    """Request to benchmark repeated runs."""

    runs: int = Field(default=100, ge=1, le=10000)
    workload: list[StrictInt] | list[list[StrictInt]] | None = None


class BenchmarkResponse(BaseModel):
    """Benchmark response."""

    runs: int
    completed_runs: int
    total_seconds: float
    avg_seconds: float


class DeviceResponse(BaseModel):
    """Device geometry response."""

    num_blocks: int
    unit_size: int
    num_logical: int
    lifespan: int
    filler_byte: int
    device_size: int


class WorkloadResponse(BaseModel):
    """Workload corpus response."""

    sequences: list[list[int]]
    total_requests: int
