"""Translation Table - Logical to physical unit mapping."""


class TranslationTable:
    """Fixed-size L2P table with one entry per logical address."""

    def __init__(self, num_logical: int = 256):
        if num_logical <= 0:
            raise ValueError(f"num_logical must be positive, got {num_logical}")

        self.num_logical = num_logical
        self._l2p: list[int | None] = [None] * num_logical

    def is_valid_address(self, address: int) -> bool:
        return 0 <= address < self.num_logical

    def lookup(self, address: int) -> int | None:
        """Get the unit currently mapped to a logical address."""
        return self._l2p[address]

    def remap(self, address: int, unit_id: int) -> None:
        """Point a logical address at a new unit. The old unit is not tracked."""
        self._l2p[address] = unit_id

    @property
    def mapped_count(self) -> int:
        return sum(1 for unit_id in self._l2p if unit_id is not None)

    def snapshot(self) -> tuple[int | None, ...]:
        return tuple(self._l2p)

    def reset(self) -> None:
        self._l2p = [None] * self.num_logical
