"""
FTLSim - Flash Translation Layer Simulator

A Python model of a flash device's translation layer:
- Logical-to-physical unit mapping
- Least-worn-first wear leveling with unit retirement
- Per-run wear statistics and throughput benchmarks
- RESTful simulation API
"""

__version__ = "0.1.0"
__author__ = "FTLSim Team"
