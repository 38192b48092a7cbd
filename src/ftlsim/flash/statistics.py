"""Run statistics derived from the allocator's wear counters."""

from dataclasses import dataclass

from .allocator import WearLevelingAllocator


@dataclass(frozen=True)
class RunStatistics:
    """Summary of unit wear after a run."""

    total_writes: int
    dead_count: int
    min_writes: int
    max_writes: int
    avg_writes: float
    first_half_avg: float  # Units [0, num_blocks // 2)
    second_half_avg: float  # Units [num_blocks // 2, num_blocks)
    write_counts: tuple[int, ...]

    @property
    def spread(self) -> int:
        return self.max_writes - self.min_writes

    def to_dict(self, include_counts: bool = False) -> dict:
        data = {
            "total_writes": self.total_writes,
            "dead_count": self.dead_count,
            "min_writes": self.min_writes,
            "max_writes": self.max_writes,
            "avg_writes": self.avg_writes,
            "first_half_avg": self.first_half_avg,
            "second_half_avg": self.second_half_avg,
        }
        if include_counts:
            data["write_counts"] = list(self.write_counts)
        return data


def _mean(values: tuple[int, ...]) -> float:
    return sum(values) / len(values) if values else 0.0


def summarize(allocator: WearLevelingAllocator) -> RunStatistics:
    """Aggregate the allocator's counters. Read-only."""
    counts = allocator.write_counts
    half = allocator.num_blocks // 2

    return RunStatistics(
        total_writes=sum(counts),
        dead_count=allocator.dead_count,
        min_writes=min(counts),
        max_writes=max(counts),
        avg_writes=_mean(counts),
        first_half_avg=_mean(counts[:half]),
        second_half_avg=_mean(counts[half:]),
        write_counts=counts,
    )
