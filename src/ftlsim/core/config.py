"""Configuration management for FTLSim."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """FTLSim configuration settings."""

    # General settings
    debug: bool = False
    log_level: str = "INFO"

    # Device geometry
    num_blocks: int = Field(default=512, gt=0)  # Physical units
    unit_size: int = Field(default=4096, gt=0)  # 4KB per unit
    num_logical: int = Field(default=256, gt=0)  # Logical addresses
    lifespan: int = Field(default=5, gt=0)  # Writes before a unit dies
    filler_byte: int = Field(default=0xAB, ge=0, le=255)  # Dummy payload

    # Backing file
    data_dir: Path = Field(default=Path("/tmp/ftlsim/data"))
    sink_file: str = "SSD.bin"

    # Benchmark settings
    bench_runs: int = Field(default=100, gt=0)

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    model_config = {
        "env_prefix": "FTLSIM_",
        "env_file": ".env",
    }

    @property
    def device_size(self) -> int:
        """Total size of the simulated device in bytes."""
        return self.num_blocks * self.unit_size

    @property
    def sink_path(self) -> Path:
        return self.data_dir / self.sink_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
