"""Command-line interface for Trading Demo Simulator.

Running with no arguments reproduces the demo: seed 42, paced output,
colors, and a final keypress prompt.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import Callable, Sequence

from trading_demo.models import SimulationConfig
from trading_demo.output import ConsoleWriter, StyledWriter
from trading_demo.simulator import SimulationRunner


WINDOW_TITLE = "StockSharp Trading Demo"


def _no_pause(seconds: float) -> None:
    return None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description="Trading Demo Simulator")

    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--no-pause", action="store_true", help="Skip the pause after each day"
    )
    parser.add_argument(
        "--no-wait", action="store_true", help="Exit without waiting for a key"
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Print without terminal colors"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    return parser


def wait_for_key() -> None:
    """Block until the user presses Enter."""
    try:
        input()
    except (EOFError, KeyboardInterrupt):
        pass


def main(
    argv: Sequence[str] | None = None,
    writer: StyledWriter | None = None,
    wait: Callable[[], None] = wait_for_key,
) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("trading_demo").setLevel(
        logging.DEBUG if args.verbose else logging.WARNING
    )

    writer = writer or ConsoleWriter(color=not args.no_color)
    writer.set_title(WINDOW_TITLE)
    config = SimulationConfig(seed=args.seed)

    runner = SimulationRunner(
        writer,
        config=config,
        sleep=_no_pause if args.no_pause else time.sleep,
    )
    runner.run()

    writer.line()
    writer.line("Demo completed! Press any key to exit...")
    if not args.no_wait:
        wait()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
