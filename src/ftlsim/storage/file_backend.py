"""File-based persistence sink."""

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from ..core.config import Settings, get_settings
from .backend import PersistenceSink

logger = logging.getLogger(__name__)


class FileSink(PersistenceSink):
    """Persistence sink backed by a single fixed-size file."""

    def __init__(self, settings: Settings | None = None, path: Path | None = None):
        self.settings = settings or get_settings()
        super().__init__(
            num_blocks=self.settings.num_blocks,
            unit_size=self.settings.unit_size,
        )
        self.path = Path(path) if path is not None else self.settings.sink_path
        self._handle = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    async def format(self) -> None:
        """Write zeros over the whole file."""
        await aiofiles.os.makedirs(self.path.parent, exist_ok=True)

        zeros = bytes(self.unit_size)
        async with aiofiles.open(self.path, "wb") as f:
            for _ in range(self.num_blocks):
                await f.write(zeros)

        self._stats["formats"] += 1
        logger.debug("Formatted %s (%d bytes)", self.path, self.size)

    async def open(self) -> None:
        if self._handle is not None:
            return

        # r+b keeps existing contents; the file must already be formatted
        self._handle = await aiofiles.open(self.path, "r+b")

    async def close(self) -> None:
        if self._handle is None:
            return

        handle, self._handle = self._handle, None
        await handle.close()

    async def write_unit(self, unit_id: int, payload: bytes) -> None:
        """Seek to the unit and overwrite it."""
        if self._handle is None:
            raise RuntimeError(f"Sink {self.path} is not open")

        offset = self.offset_of(unit_id)
        self._check_payload(payload)

        await self._handle.seek(offset)
        await self._handle.write(payload)

        self._stats["units_written"] += 1
        self._stats["bytes_written"] += len(payload)

    async def read_unit(self, unit_id: int) -> bytes:
        """Read a unit, flushing pending writes first."""
        offset = self.offset_of(unit_id)

        if self._handle is not None:
            await self._handle.flush()

        async with aiofiles.open(self.path, "rb") as f:
            await f.seek(offset)
            data = await f.read(self.unit_size)

        self._stats["units_read"] += 1
        self._stats["bytes_read"] += len(data)

        return data

    async def get_stats(self) -> dict:
        stats = await super().get_stats()
        stats["path"] = str(self.path)
        return stats
