"""Device and metrics API routes."""

from fastapi import APIRouter

from ..schemas.simulation import DeviceResponse
from ...core.controller import get_controller

router = APIRouter(tags=["metrics"])


@router.get("/device", response_model=DeviceResponse)
async def get_device():
    """Get device geometry and endurance settings."""
    controller = await get_controller()
    return DeviceResponse(**controller.get_device_info())


@router.get("/metrics")
async def get_metrics():
    """Get run counters and sink statistics."""
    controller = await get_controller()
    return await controller.get_stats()
