"""Exceptions raised by the flash translation layer."""


class FTLError(Exception):
    """Base class for FTLSim errors."""

    pass


class NoHealthyUnitError(FTLError):
    """Raised when every physical unit has reached its endurance limit."""

    def __init__(self, num_blocks: int, lifespan: int):
        self.num_blocks = num_blocks
        self.lifespan = lifespan
        super().__init__(
            f"No healthy unit available: all {num_blocks} units reached "
            f"{lifespan} writes"
        )


class WorkloadError(FTLError):
    """Raised for malformed workload definitions."""

    pass
