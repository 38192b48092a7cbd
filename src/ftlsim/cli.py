"""
Command-line entry point.

Usage:
    ftlsim                      # format, one reported run, then benchmark
    ftlsim simulate --workload trace.json
    ftlsim benchmark --runs 500
    ftlsim serve
"""

import argparse
import asyncio
import logging
import sys

from .core.config import get_settings
from .core.controller import SimulationController
from .core.exceptions import WorkloadError
from .core.log import configure_logging
from .core.report import format_benchmark_report, format_header, format_run_report
from .workload.loader import load_workload

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ftlsim",
        description="Flash translation layer wear-leveling simulator",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Suppress all logging except errors"
    )

    subparsers = parser.add_subparsers(dest="command")

    simulate = subparsers.add_parser("simulate", help="Run one simulation and report")
    simulate.add_argument("--workload", help="JSON workload file (default: reference)")
    simulate.add_argument(
        "--no-report", action="store_true", help="Skip the per-unit report"
    )

    bench = subparsers.add_parser("benchmark", help="Time repeated simulation runs")
    bench.add_argument("--runs", type=int, default=None, help="Number of runs")
    bench.add_argument("--workload", help="JSON workload file (default: reference)")

    subparsers.add_parser("serve", help="Start the HTTP API server")

    return parser


async def _simulate(
    controller: SimulationController, workload, report: bool, format_sink: bool = True
) -> int:
    outcome = await controller.run_simulation(workload=workload, format_sink=format_sink)
    if report:
        print(format_run_report(outcome.result, outcome.statistics))
    if not outcome.result.completed:
        print(f"ERROR: {outcome.result.error}", file=sys.stderr)
        return 1
    return 0


async def _benchmark(controller: SimulationController, workload, runs) -> int:
    bench = await controller.benchmark(runs=runs, workload=workload)
    print(format_benchmark_report(bench))
    return 0


async def _reference_workflow(controller: SimulationController) -> int:
    print("Initializing device...")
    await controller.initialize()

    print(format_header("Single Simulation (with stats)"))
    status = await _simulate(controller, None, report=True, format_sink=False)

    await _benchmark(controller, None, None)
    return status


async def _dispatch(args: argparse.Namespace) -> int:
    settings = get_settings()
    controller = SimulationController(settings)

    workload = None
    if getattr(args, "workload", None):
        workload = load_workload(args.workload)

    try:
        if args.command == "simulate":
            return await _simulate(controller, workload, report=not args.no_report)
        if args.command == "benchmark":
            return await _benchmark(controller, workload, args.runs)
        return await _reference_workflow(controller)
    finally:
        await controller.shutdown()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.quiet:
        configure_logging(level="ERROR")
    elif args.verbose:
        configure_logging(level="DEBUG")
    else:
        configure_logging()

    if args.command == "serve":
        from .api.main import run

        run()
        return 0

    try:
        return asyncio.run(_dispatch(args))
    except WorkloadError as e:
        logger.error("%s", e)
        return 2
    except OSError as e:
        logger.error("Device I/O failure: %s", e)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
