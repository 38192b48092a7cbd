"""Tests for the file-backed persistence sink."""

import pytest

from ftlsim.core.config import Settings
from ftlsim.flash.engine import FTLEngine
from ftlsim.storage.file_backend import FileSink


@pytest.fixture
def settings(tmp_path):
    """Small device stored under a temporary directory."""
    return Settings(
        num_blocks=4, unit_size=16, num_logical=4, lifespan=3, data_dir=tmp_path
    )


@pytest.fixture
async def sink(settings):
    """Create a formatted file sink."""
    s = FileSink(settings)
    await s.format()
    yield s
    await s.close()


class TestFileSink:
    """File sink tests."""

    async def test_format_zero_fills(self, sink, settings):
        """Test format creates a zeroed file of the device size."""
        content = settings.sink_path.read_bytes()

        assert len(content) == 64
        assert content == bytes(64)

    async def test_write_unit_at_offset(self, sink, settings):
        """Test a unit write touches only its own bytes."""
        await sink.open()
        await sink.write_unit(2, b"\xab" * 16)
        await sink.close()

        content = settings.sink_path.read_bytes()
        assert len(content) == 64
        assert content[32:48] == b"\xab" * 16
        assert content[:32] == bytes(32)
        assert content[48:] == bytes(16)

    async def test_reopen_does_not_truncate(self, sink, settings):
        """Test opening again keeps earlier writes."""
        await sink.open()
        await sink.write_unit(0, b"\x01" * 16)
        await sink.close()

        await sink.open()
        await sink.write_unit(3, b"\x02" * 16)
        await sink.close()

        assert await sink.read_unit(0) == b"\x01" * 16
        assert await sink.read_unit(3) == b"\x02" * 16

    async def test_read_while_open(self, sink):
        """Test read-back flushes pending writes."""
        await sink.open()
        await sink.write_unit(1, b"\x07" * 16)

        assert await sink.read_unit(1) == b"\x07" * 16

    async def test_write_requires_open(self, sink):
        with pytest.raises(RuntimeError):
            await sink.write_unit(0, b"\x00" * 16)

    async def test_rejects_bad_payload(self, sink):
        """Test payloads must be exactly one unit."""
        await sink.open()
        with pytest.raises(ValueError):
            await sink.write_unit(0, b"\x00" * 15)

    async def test_rejects_bad_unit(self, sink):
        await sink.open()
        with pytest.raises(ValueError):
            await sink.write_unit(4, b"\x00" * 16)

    async def test_open_unformatted_fails(self, tmp_path, settings):
        """Test a missing backing file is an I/O error."""
        s = FileSink(settings, path=tmp_path / "missing" / "SSD.bin")

        with pytest.raises(OSError):
            await s.open()

    async def test_stats(self, sink):
        await sink.open()
        await sink.write_unit(0, b"\x00" * 16)

        stats = await sink.get_stats()

        assert stats["formats"] == 1
        assert stats["units_written"] == 1
        assert stats["bytes_written"] == 16
        assert stats["size_bytes"] == 64
        assert stats["is_open"] is True


class TestEngineOnFile:
    """Engine end-to-end against a real file."""

    async def test_run_writes_filler(self, sink, settings):
        """Test a run leaves filler bytes exactly at the allocated units."""
        engine = FTLEngine(sink=sink, settings=settings)

        result = await engine.run([0, 1, 99])

        content = settings.sink_path.read_bytes()
        assert result.allocations == [0, 1]
        assert content[:32] == b"\xab" * 32
        assert content[32:] == bytes(32)
