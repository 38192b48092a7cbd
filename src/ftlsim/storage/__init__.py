"""Persistence sink implementations."""

from .backend import PersistenceSink
from .file_backend import FileSink
from .memory_backend import MemorySink

__all__ = ["PersistenceSink", "FileSink", "MemorySink"]
