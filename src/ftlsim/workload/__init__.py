"""Workload sources."""

from .loader import load_workload, parse_workload
from .reference import REFERENCE_WORKLOAD, flatten, reference_requests

__all__ = [
    "REFERENCE_WORKLOAD",
    "flatten",
    "reference_requests",
    "load_workload",
    "parse_workload",
]
