"""Workload API routes."""

from fastapi import APIRouter

from ..schemas.simulation import WorkloadResponse
from ...workload.reference import REFERENCE_WORKLOAD

router = APIRouter(prefix="/workloads", tags=["workloads"])


@router.get("/reference", response_model=WorkloadResponse)
async def get_reference_workload():
    """Get the reference workload corpus."""
    sequences = [list(sequence) for sequence in REFERENCE_WORKLOAD]
    return WorkloadResponse(
        sequences=sequences,
        total_requests=sum(len(s) for s in sequences),
    )
