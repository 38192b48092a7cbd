"""Flash translation layer core."""

from .allocator import PhysicalUnit, WearLevelingAllocator
from .engine import FTLEngine, RunResult
from .statistics import RunStatistics, summarize
from .translation import TranslationTable

__all__ = [
    "FTLEngine",
    "RunResult",
    "WearLevelingAllocator",
    "PhysicalUnit",
    "TranslationTable",
    "RunStatistics",
    "summarize",
]
