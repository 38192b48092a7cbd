"""FTL Engine - Orchestrates allocation, mapping and persistence per write."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..core.config import Settings, get_settings
from ..core.exceptions import NoHealthyUnitError
from ..storage.backend import PersistenceSink
from .allocator import WearLevelingAllocator
from .statistics import RunStatistics, summarize
from .translation import TranslationTable

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of one simulation run."""

    requests: int = 0  # Requests consumed, including skipped ones
    logical_writes: int = 0
    skipped: int = 0
    allocations: list[int] = field(default_factory=list)
    error: NoHealthyUnitError | None = None

    @property
    def completed(self) -> bool:
        return self.error is None


class FTLEngine:
    """
    Flash translation layer engine.

    For each logical write:
    1. Skip it if the address is outside the logical range
    2. Pick the least-worn live unit
    3. Point the address at that unit
    4. Write the filler payload at the unit's offset on the sink
    5. Count the write against the unit

    Requests are processed strictly in order; each allocation depends on the
    wear left by every earlier request of the run.
    """

    def __init__(self, sink: PersistenceSink, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.sink = sink

        if sink.num_blocks != self.settings.num_blocks or (
            sink.unit_size != self.settings.unit_size
        ):
            raise ValueError(
                f"Sink geometry {sink.num_blocks}x{sink.unit_size} does not match "
                f"device {self.settings.num_blocks}x{self.settings.unit_size}"
            )

        self.allocator = WearLevelingAllocator(
            num_blocks=self.settings.num_blocks,
            lifespan=self.settings.lifespan,
        )
        self.table = TranslationTable(num_logical=self.settings.num_logical)

        self._payload = bytes([self.settings.filler_byte]) * self.settings.unit_size

    def reset(self) -> None:
        """Start from a clean allocator and translation table."""
        self.allocator.reset()
        self.table.reset()

    async def process_request(self, address: int) -> int | None:
        """
        Apply one logical write.

        Args:
            address: Raw logical address

        Returns:
            Unit the write landed on, or None if the address was skipped

        Raises:
            NoHealthyUnitError: If every unit is dead
        """
        if not self.table.is_valid_address(address):
            logger.debug("Skipping out-of-range address %d", address)
            return None

        # The previous unit goes stale; nothing reclaims it
        old_unit = self.table.lookup(address)

        unit_id = self.allocator.select_unit()
        self.table.remap(address, unit_id)

        await self.sink.write_unit(unit_id, self._payload)
        self.allocator.record_write(unit_id)

        logger.debug("LBA %d: unit %s -> %d", address, old_unit, unit_id)
        return unit_id

    async def run(self, workload: Iterable[int]) -> RunResult:
        """
        Run a workload from a clean state.

        Args:
            workload: Flat ordered sequence of logical addresses

        Returns:
            RunResult; when the device wears out mid-run, completed is False
            and the state written so far is kept
        """
        self.reset()
        result = RunResult()

        await self.sink.open()
        try:
            for address in workload:
                result.requests += 1
                try:
                    unit_id = await self.process_request(address)
                except NoHealthyUnitError as e:
                    logger.warning(
                        "Run abandoned after %d requests: %s", result.requests, e
                    )
                    result.error = e
                    break

                if unit_id is None:
                    result.skipped += 1
                else:
                    result.logical_writes += 1
                    result.allocations.append(unit_id)
        finally:
            await self.sink.close()

        return result

    def statistics(self) -> RunStatistics:
        """Summarize the current wear state."""
        return summarize(self.allocator)
