"""API routes."""

from .metrics import router as metrics_router
from .simulations import router as simulations_router
from .workloads import router as workloads_router

__all__ = [
    "simulations_router",
    "workloads_router",
    "metrics_router",
]
