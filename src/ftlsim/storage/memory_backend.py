"""In-memory persistence sink for tests and in-process benchmarks."""

from .backend import PersistenceSink


class MemorySink(PersistenceSink):
    """Persistence sink backed by a bytearray."""

    def __init__(self, num_blocks: int = 512, unit_size: int = 4096):
        super().__init__(num_blocks=num_blocks, unit_size=unit_size)
        self._data = bytearray(self.size)
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    async def format(self) -> None:
        self._data = bytearray(self.size)
        self._stats["formats"] += 1

    async def open(self) -> None:
        self._open = True

    async def close(self) -> None:
        self._open = False

    async def write_unit(self, unit_id: int, payload: bytes) -> None:
        if not self._open:
            raise RuntimeError("Sink is not open")

        offset = self.offset_of(unit_id)
        self._check_payload(payload)

        self._data[offset : offset + self.unit_size] = payload

        self._stats["units_written"] += 1
        self._stats["bytes_written"] += len(payload)

    async def read_unit(self, unit_id: int) -> bytes:
        offset = self.offset_of(unit_id)
        self._stats["units_read"] += 1
        self._stats["bytes_read"] += self.unit_size
        return bytes(self._data[offset : offset + self.unit_size])
