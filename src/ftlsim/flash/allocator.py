"""Wear-Leveling Allocator - Per-unit wear accounting and unit selection."""

from dataclasses import dataclass

from ..core.exceptions import NoHealthyUnitError


@dataclass
class PhysicalUnit:
    """Represents a physical flash unit."""

    unit_id: int
    write_count: int = 0
    is_dead: bool = False


class WearLevelingAllocator:
    """
    Greedy least-worn-first allocator.

    Every write goes to the live unit with the fewest writes so far, lowest
    index first among equals. A unit is retired permanently once its write
    count reaches the lifespan.
    """

    def __init__(self, num_blocks: int = 512, lifespan: int = 5):
        if num_blocks <= 0:
            raise ValueError(f"num_blocks must be positive, got {num_blocks}")
        if lifespan <= 0:
            raise ValueError(f"lifespan must be positive, got {lifespan}")

        self.num_blocks = num_blocks
        self.lifespan = lifespan

        self._units: list[PhysicalUnit] = [
            PhysicalUnit(unit_id=i) for i in range(num_blocks)
        ]

    def select_unit(self) -> int:
        """
        Pick the least-worn live unit.

        Returns:
            Physical unit index

        Raises:
            NoHealthyUnitError: If every unit is dead
        """
        best = -1
        min_writes = None

        # Only strict improvement replaces the candidate, so ties keep the lower index
        for unit in self._units:
            if unit.is_dead:
                continue
            if min_writes is None or unit.write_count < min_writes:
                min_writes = unit.write_count
                best = unit.unit_id

        if best == -1:
            raise NoHealthyUnitError(self.num_blocks, self.lifespan)

        return best

    def record_write(self, unit_id: int) -> None:
        """
        Account for one write to a unit, retiring it at the lifespan.

        Args:
            unit_id: Physical unit index

        Raises:
            IndexError: If unit_id is out of range
            ValueError: If the unit is already dead
        """
        unit = self.get_unit(unit_id)

        if unit.is_dead:
            raise ValueError(f"Unit {unit_id} is dead and cannot be written")

        unit.write_count += 1
        if unit.write_count >= self.lifespan:
            unit.is_dead = True

    def get_unit(self, unit_id: int) -> PhysicalUnit:
        """Get a physical unit by index."""
        if not 0 <= unit_id < self.num_blocks:
            raise IndexError(f"Unit {unit_id} out of range [0, {self.num_blocks})")
        return self._units[unit_id]

    @property
    def write_counts(self) -> tuple[int, ...]:
        return tuple(u.write_count for u in self._units)

    @property
    def dead_flags(self) -> tuple[bool, ...]:
        return tuple(u.is_dead for u in self._units)

    @property
    def dead_count(self) -> int:
        return sum(1 for u in self._units if u.is_dead)

    @property
    def live_count(self) -> int:
        return self.num_blocks - self.dead_count

    def reset(self) -> None:
        """Return every unit to the fresh state."""
        self._units = [PhysicalUnit(unit_id=i) for i in range(self.num_blocks)]
