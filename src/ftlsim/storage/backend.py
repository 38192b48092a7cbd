"""Abstract persistence sink interface."""

from abc import ABC, abstractmethod


class PersistenceSink(ABC):
    """
    Random-access byte store backing the simulated device.

    The store holds exactly ``num_blocks * unit_size`` bytes. Every write
    overwrites one whole unit at offset ``unit_id * unit_size``.
    """

    def __init__(self, num_blocks: int, unit_size: int):
        self.num_blocks = num_blocks
        self.unit_size = unit_size
        self._stats = {
            "formats": 0,
            "units_written": 0,
            "units_read": 0,
            "bytes_written": 0,
            "bytes_read": 0,
        }

    @property
    def size(self) -> int:
        return self.num_blocks * self.unit_size

    def offset_of(self, unit_id: int) -> int:
        """Byte offset of a unit."""
        if not 0 <= unit_id < self.num_blocks:
            raise ValueError(
                f"Unit {unit_id} out of range [0, {self.num_blocks})"
            )
        return unit_id * self.unit_size

    def _check_payload(self, payload: bytes) -> None:
        if len(payload) != self.unit_size:
            raise ValueError(
                f"Payload must be exactly {self.unit_size} bytes, got {len(payload)}"
            )

    @abstractmethod
    async def format(self) -> None:
        """Zero-fill the entire store, creating it if needed."""
        pass

    @abstractmethod
    async def open(self) -> None:
        """Acquire a read/write handle without truncating the store."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the handle acquired by open()."""
        pass

    @property
    @abstractmethod
    def is_open(self) -> bool:
        pass

    @abstractmethod
    async def write_unit(self, unit_id: int, payload: bytes) -> None:
        """
        Overwrite one unit.

        Args:
            unit_id: Physical unit index
            payload: Exactly unit_size bytes

        Raises:
            ValueError: If the unit is out of range or the payload size is wrong
            RuntimeError: If the sink is not open
        """
        pass

    @abstractmethod
    async def read_unit(self, unit_id: int) -> bytes:
        """Read back one unit."""
        pass

    async def get_stats(self) -> dict:
        """Get sink statistics."""
        return {
            **self._stats,
            "size_bytes": self.size,
            "is_open": self.is_open,
        }
