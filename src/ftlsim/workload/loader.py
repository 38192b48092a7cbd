"""Load workloads from JSON."""

import json
from pathlib import Path

from ..core.exceptions import WorkloadError
from .reference import flatten


def parse_workload(data) -> list[int]:
    """
    Normalize a decoded workload into a flat request list.

    Accepts either a flat list of integers or a list of lists of integers.
    Out-of-range addresses are kept; the engine skips them.

    Raises:
        WorkloadError: If the structure is not one of the accepted shapes
    """
    if not isinstance(data, list):
        raise WorkloadError(f"Workload must be a list, got {type(data).__name__}")

    if all(isinstance(item, list) for item in data):
        sequences = data
    else:
        sequences = [data]

    requests = []
    for seq_index, sequence in enumerate(sequences):
        for address in sequence:
            # bool is an int subclass but never a valid address
            if isinstance(address, bool) or not isinstance(address, int):
                raise WorkloadError(
                    f"Sequence {seq_index}: address {address!r} is not an integer"
                )
        requests.extend(flatten([sequence]))

    return requests


def load_workload(path: Path | str) -> list[int]:
    """Read and parse a JSON workload file."""
    path = Path(path)

    try:
        content = path.read_text()
    except FileNotFoundError as e:
        raise WorkloadError(f"Workload file not found: {path}") from e
    except OSError as e:
        raise WorkloadError(f"Cannot read workload file {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise WorkloadError(f"Invalid JSON in {path}: {e}") from e

    return parse_workload(data)
