"""Tests for workload sources."""

import json

import pytest

from ftlsim.core.exceptions import WorkloadError
from ftlsim.workload.loader import load_workload, parse_workload
from ftlsim.workload.reference import REFERENCE_WORKLOAD, flatten, reference_requests


class TestReferenceWorkload:
    """Reference corpus tests."""

    def test_shape(self):
        """Test the corpus is 22 sequences of 10 addresses."""
        assert len(REFERENCE_WORKLOAD) == 22
        assert all(len(sequence) == 10 for sequence in REFERENCE_WORKLOAD)

    def test_all_in_range(self):
        assert all(0 <= address < 256 for address in reference_requests())

    def test_flatten_keeps_order(self):
        assert list(flatten([[3, 1], [2]])) == [3, 1, 2]
        assert reference_requests()[:10] == [1, 1, 1, 2, 2, 3, 3, 3, 1, 1]


class TestParseWorkload:
    """Workload parsing tests."""

    def test_flat_list(self):
        assert parse_workload([5, 6, 300]) == [5, 6, 300]

    def test_nested_lists(self):
        assert parse_workload([[1, 2], [], [3]]) == [1, 2, 3]

    def test_empty(self):
        assert parse_workload([]) == []

    def test_rejects_non_list(self):
        with pytest.raises(WorkloadError):
            parse_workload({"addresses": [1]})

    def test_rejects_non_integer(self):
        with pytest.raises(WorkloadError):
            parse_workload([1, "2"])

    def test_rejects_bool(self):
        with pytest.raises(WorkloadError):
            parse_workload([True, 1])

    def test_rejects_mixed_nesting(self):
        with pytest.raises(WorkloadError):
            parse_workload([[1, 2], 3])


class TestLoadWorkload:
    """Workload file tests."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "workload.json"
        path.write_text(json.dumps([[1, 1], [2]]))

        assert load_workload(path) == [1, 1, 2]

    def test_missing_file(self, tmp_path):
        with pytest.raises(WorkloadError):
            load_workload(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[1, 2")

        with pytest.raises(WorkloadError):
            load_workload(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(WorkloadError):
            load_workload(tmp_path)
