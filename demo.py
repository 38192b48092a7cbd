#!/usr/bin/env python3
"""
FTLSim Demo Script

Showcases key capabilities:
1. Device geometry
2. Reference workload run and wear statistics
3. Custom workload with out-of-range addresses
4. Wearing out the device
5. Benchmark

Usage:
    # Start the API server first
    uvicorn ftlsim.api.main:app --reload

    # Run demo
    python demo.py
"""

import asyncio
import json
import sys

import httpx

BASE_URL = "http://localhost:8000"
API_V1 = f"{BASE_URL}/api/v1"


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'='*60}")
    print(f"  {title}")
    print(f"{'='*60}\n")


def print_json(data: dict) -> None:
    """Pretty print JSON data."""
    print(json.dumps(data, indent=2, default=str))


async def check_server() -> bool:
    """Check if server is running."""
    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{BASE_URL}/health", timeout=5.0)
            return response.status_code == 200
    except httpx.HTTPError:
        return False


def print_statistics(stats: dict) -> None:
    print(f"  Physical writes: {stats['total_writes']}")
    print(f"  Dead units: {stats['dead_count']}")
    print(
        f"  Distribution: min={stats['min_writes']} max={stats['max_writes']}"
        f" avg={stats['avg_writes']:.2f}"
    )
    print(f"  First half avg: {stats['first_half_avg']:.2f}")
    print(f"  Second half avg: {stats['second_half_avg']:.2f}")


async def demo_device(client: httpx.AsyncClient) -> dict:
    """Demo: Device Geometry"""
    print_header("1. DEVICE GEOMETRY")

    response = await client.get(f"{API_V1}/device")
    device = response.json()
    print_json(device)

    return device


async def demo_reference_run(client: httpx.AsyncClient) -> None:
    """Demo: Reference Workload"""
    print_header("2. REFERENCE WORKLOAD")

    response = await client.get(f"{API_V1}/workloads/reference")
    corpus = response.json()
    print(f"Reference corpus: {len(corpus['sequences'])} sequences, "
          f"{corpus['total_requests']} requests")

    print("\nRunning simulation...")
    response = await client.post(f"{API_V1}/simulations", json={})
    result = response.json()

    print(f"  Completed: {result['completed']}")
    print(f"  Logical writes: {result['logical_writes']}")
    print_statistics(result["statistics"])


async def demo_custom_workload(client: httpx.AsyncClient) -> None:
    """Demo: Custom Workload"""
    print_header("3. CUSTOM WORKLOAD")

    workload = [1, 1, 1, 2, 2, 3, 3, 3, 1, 1, -5, 9999]
    print(f"Workload: {workload}")

    response = await client.post(
        f"{API_V1}/simulations",
        json={"workload": workload, "include_trace": True},
    )
    result = response.json()

    print(f"  Requests: {result['requests']}")
    print(f"  Skipped (out of range): {result['skipped']}")
    print(f"  Allocation trace: {result['allocations']}")


async def demo_wear_out(client: httpx.AsyncClient, device: dict) -> None:
    """Demo: Wearing Out the Device"""
    print_header("4. WEARING OUT THE DEVICE")

    capacity = device["num_blocks"] * device["lifespan"]
    workload = [0] * (capacity + 10)
    print(f"Issuing {len(workload)} writes against a {capacity}-write device...")

    response = await client.post(f"{API_V1}/simulations", json={"workload": workload})
    result = response.json()

    print(f"  Completed: {result['completed']}")
    print(f"  Error: {result['error']}")
    print(f"  Writes applied before failure: {result['logical_writes']}")
    print(f"  Dead units: {result['statistics']['dead_count']}")


async def demo_benchmark(client: httpx.AsyncClient) -> None:
    """Demo: Benchmark"""
    print_header("5. BENCHMARK")

    response = await client.post(f"{API_V1}/simulations/benchmark", json={"runs": 100})
    bench = response.json()

    print(f"  Runs: {bench['completed_runs']}/{bench['runs']}")
    print(f"  Total time: {bench['total_seconds']:.6f} s")
    print(f"  Avg per run: {bench['avg_seconds']:.6f} s")


async def main() -> None:
    """Run the demo."""
    print("\n" + "=" * 60)
    print("        FTLSim Demo - Flash Translation Layer")
    print("=" * 60)

    # Check server
    print("\nChecking API server...")
    if not await check_server():
        print("ERROR: Server not running!")
        print("\nStart the server first:")
        print("  uvicorn ftlsim.api.main:app --reload")
        sys.exit(1)

    print("  Server is running at", BASE_URL)

    async with httpx.AsyncClient(timeout=60.0) as client:
        try:
            device = await demo_device(client)
            await demo_reference_run(client)
            await demo_custom_workload(client)
            await demo_wear_out(client, device)
            await demo_benchmark(client)

        except httpx.HTTPError as e:
            print(f"\nHTTP Error: {e}")
            sys.exit(1)

    print_header("DEMO COMPLETE")
    print("\nExplore more:")
    print("  - Swagger UI: http://localhost:8000/docs")
    print("  - ReDoc: http://localhost:8000/redoc")


if __name__ == "__main__":
    asyncio.run(main())
