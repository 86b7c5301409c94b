"""
Command Line Interface
======================

Run experiment actions against a ContinuITy frontend from the shell.

Usage:
    continuity-experiment generate-workload-model --type wessbas --tag shop \\
        --data http://session-logs:8080/logs --from 2024-01-01T10:00:00 --to 2024-01-01T11:00:00
"""

import argparse
import asyncio
import sys
from datetime import datetime
from typing import List, Optional

from experimentation.config.logging import get_logger
from experimentation.config.settings import get_settings
from experimentation.core.actions.workload_model import WorkloadModelGeneration
from experimentation.core.data import ConstantDataHolder, DataHolder
from experimentation.core.experiment import Experiment

logger = get_logger(__name__)


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not an ISO 8601 timestamp: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="continuity-experiment",
        description="Run ContinuITy experiment actions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate-workload-model",
        help="Create a workload model from monitoring data and wait until it is finished",
    )
    generate.add_argument("--host", default=settings.frontend_host, help="Frontend host")
    generate.add_argument("--port", default=settings.frontend_port, help="Frontend port")
    generate.add_argument("--type", dest="wm_type", required=True, help="Workload model type, e.g. wessbas")
    generate.add_argument("--tag", required=True, help="Tag of the workload model")
    generate.add_argument("--data", required=True, help="Link to the monitoring data")
    generate.add_argument("--from", dest="start", type=_parse_datetime, help="Start of the data window")
    generate.add_argument("--to", dest="stop", type=_parse_datetime, help="End of the data window")
    generate.add_argument(
        "--poll-interval",
        type=float,
        default=None,
        help="Seconds to sleep between unfinished wait requests",
    )

    return parser


async def run_workload_model_generation(args: argparse.Namespace) -> Optional[str]:
    """
    Run the workload model generation as a one-action experiment.

    Returns:
        The workload model link, or None if the run broke or produced no link
    """
    workload_link: DataHolder[str] = DataHolder("workload-link")
    broken: DataHolder[bool] = DataHolder("broken")

    action = WorkloadModelGeneration(
        host=args.host,
        port=args.port,
        wm_type=args.wm_type,
        tag=args.tag,
        data_link=ConstantDataHolder("data-link", args.data),
        start_time=DataHolder("start-time", args.start),
        stop_time=DataHolder("stop-time", args.stop),
        workload_link=workload_link,
        broken_holder=broken,
        poll_interval=args.poll_interval,
    )

    async with action:
        await Experiment("generate-workload-model", [action]).run()

    if broken.is_set() and broken.get():
        return None
    return workload_link.get() if workload_link.is_set() else None


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of ``continuity-experiment``."""
    args = build_parser().parse_args(argv)

    link = asyncio.run(run_workload_model_generation(args))
    if link is None:
        logger.error("Workload model generation did not produce a link")
        return 1

    print(link)
    return 0


if __name__ == "__main__":
    sys.exit(main())
