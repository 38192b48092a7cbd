"""Tests for the wear-leveling allocator."""

import pytest

from ftlsim.core.exceptions import NoHealthyUnitError
from ftlsim.flash.allocator import WearLevelingAllocator


@pytest.fixture
def allocator():
    """Create a small allocator."""
    return WearLevelingAllocator(num_blocks=8, lifespan=3)


class TestSelection:
    """Least-worn unit selection."""

    def test_fresh_device_picks_unit_zero(self, allocator):
        """All units tie at zero writes, lowest index wins."""
        assert allocator.select_unit() == 0

    def test_picks_least_written(self, allocator):
        """Test that a written unit is passed over."""
        allocator.record_write(0)
        allocator.record_write(1)

        assert allocator.select_unit() == 2

    def test_tie_break_lowest_index(self, allocator):
        """Test ties after a full sweep go back to the lowest index."""
        for unit_id in range(8):
            allocator.record_write(unit_id)
        allocator.record_write(0)

        assert allocator.select_unit() == 1

    def test_skips_dead_units(self):
        """Test that dead units are never selected."""
        allocator = WearLevelingAllocator(num_blocks=3, lifespan=1)
        allocator.record_write(0)

        assert allocator.get_unit(0).is_dead is True
        assert allocator.select_unit() == 1

    def test_selected_unit_has_minimum_live_count(self, allocator):
        """Selection always matches the minimum over live units."""
        for _ in range(20):
            unit_id = allocator.select_unit()
            live_counts = [
                count
                for count, dead in zip(allocator.write_counts, allocator.dead_flags)
                if not dead
            ]
            assert allocator.write_counts[unit_id] == min(live_counts)
            allocator.record_write(unit_id)

    def test_no_healthy_unit(self):
        """Test failure once every unit has reached the lifespan."""
        allocator = WearLevelingAllocator(num_blocks=2, lifespan=2)
        for _ in range(4):
            allocator.record_write(allocator.select_unit())

        assert allocator.live_count == 0
        with pytest.raises(NoHealthyUnitError) as exc_info:
            allocator.select_unit()

        assert exc_info.value.num_blocks == 2
        assert exc_info.value.lifespan == 2


class TestRecordWrite:
    """Wear accounting and retirement."""

    def test_increments_count(self, allocator):
        """Test write count increments."""
        allocator.record_write(4)
        allocator.record_write(4)

        assert allocator.get_unit(4).write_count == 2
        assert allocator.get_unit(4).is_dead is False

    def test_dies_at_lifespan(self, allocator):
        """Test that a unit dies exactly at the lifespan."""
        for _ in range(3):
            allocator.record_write(5)

        unit = allocator.get_unit(5)
        assert unit.write_count == 3
        assert unit.is_dead is True
        assert allocator.dead_count == 1

    def test_dead_iff_at_lifespan(self, allocator):
        """Dead flag tracks the lifespan after every write."""
        for _ in range(24):
            allocator.record_write(allocator.select_unit())
            for count, dead in zip(allocator.write_counts, allocator.dead_flags):
                assert dead == (count >= allocator.lifespan)

    def test_dead_unit_rejects_writes(self):
        """Test that a dead unit cannot be written again."""
        allocator = WearLevelingAllocator(num_blocks=2, lifespan=1)
        allocator.record_write(0)

        with pytest.raises(ValueError):
            allocator.record_write(0)

    def test_out_of_range_unit(self, allocator):
        """Test out-of-range unit index."""
        with pytest.raises(IndexError):
            allocator.record_write(8)
        with pytest.raises(IndexError):
            allocator.get_unit(-1)

    def test_reset(self, allocator):
        """Test reset returns every unit to fresh."""
        for _ in range(3):
            allocator.record_write(0)

        allocator.reset()

        assert allocator.write_counts == (0,) * 8
        assert allocator.dead_count == 0


class TestConstruction:
    """Constructor validation."""

    def test_rejects_empty_device(self):
        with pytest.raises(ValueError):
            WearLevelingAllocator(num_blocks=0)

    def test_rejects_zero_lifespan(self):
        with pytest.raises(ValueError):
            WearLevelingAllocator(num_blocks=4, lifespan=0)
