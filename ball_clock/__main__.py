from __future__ import annotations

import argparse
import logging
import sys

from ball_clock.engine import InvalidBallCount
from ball_clock.simulation import InvalidTimeLimit, simulate


def _fmt_duration(seconds: float) -> str:
    return f"Completed in {int(seconds * 1000)} milliseconds ({seconds:.3f} seconds)"


def _cmd_run(args: argparse.Namespace) -> int:
    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    try:
        result = simulate(int(args.balls), int(args.minutes))
    except (InvalidBallCount, InvalidTimeLimit) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if result.snapshot is not None:
        print("BallClock simulation configured for Mode 2 (Clock State)")
    else:
        print("BallClock simulation configured for Mode 1 (Cycle Days)")
    print(result.message)
    if args.show_time and result.snapshot is not None:
        print(f"Clock reads {result.snapshot.clock_time()}")
    print(_fmt_duration(result.duration_seconds))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="ball_clock",
        description=(
            "Ball Clock Simulator.\n"
            "\n"
            "Mode 1: report how many days pass before the balls return to their starting order.\n"
            "Mode 2: report the state of every track after a fixed number of minutes."
        ),
    )

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run a ball clock simulation.")
    run.add_argument("--balls", type=int, required=True, help="Number of balls (27-127).")
    run.add_argument(
        "--minutes",
        type=int,
        default=0,
        help="Minutes to simulate before printing the tracks. 0 (default) searches for the cycle length.",
    )
    run.add_argument(
        "--show-time",
        action="store_true",
        help="Mode 2 only: also print the time the tracks display.",
    )
    run.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr.")
    run.set_defaults(func=_cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
