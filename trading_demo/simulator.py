"""Simulation runner for Trading Demo Simulator.

Generates the synthetic trading days and prints the report.
"""

from __future__ import annotations

import datetime as dt
import logging
import time
from typing import Callable

import numpy as np

from trading_demo.metrics import summary
from trading_demo.models import (
    SimulationConfig,
    SimulationResult,
    SimulationState,
    TradeEvent,
)
from trading_demo.output import StyledWriter
from trading_demo.sampling import draw_day_prices, draw_trade, make_rng, should_trade

logger = logging.getLogger(__name__)

BANNER_RULE = "=" * 68
SUMMARY_RULE = "=" * 67


def format_pnl(pnl: float) -> str:
    """Format a P&L value, prefixing "+" only when non-negative."""
    sign = "+" if pnl >= 0 else ""
    return f"{sign}${pnl:.2f}"


class SimulationRunner:
    """Runs the ten-day demo and prints it to a styled writer.

    An injected ``rng`` takes precedence over ``config.seed``; the seed is
    only reported when the runner builds the generator itself.
    """

    def __init__(
        self,
        writer: StyledWriter,
        config: SimulationConfig | None = None,
        rng: np.random.Generator | None = None,
        sleep: Callable[[float], None] = time.sleep,
        today: dt.date | None = None,
    ) -> None:
        self.writer = writer
        self.config = config or SimulationConfig()
        self.seed = self.config.seed if rng is None else None
        self.rng = rng if rng is not None else make_rng(self.config.seed)
        self.sleep = sleep
        self.today = today

    def run(self) -> SimulationResult:
        """Print the full report and return the accumulated result."""
        out = self.writer
        cfg = self.config
        today = self.today or dt.date.today()
        state = SimulationState()
        trades: list[TradeEvent] = []

        logger.debug("Starting simulation seed=%s days=%d", self.seed, cfg.days)

        out.line(BANNER_RULE)
        out.line("        STOCKSHARP TRADING PLATFORM - DEMO RUNNER")
        out.line("              Automated Trading Simulation")
        out.line(BANNER_RULE)
        out.line()
        out.line("Initializing trading simulation...")
        out.line()

        out.line(f"Simulating trading for {len(cfg.securities)} securities:")
        for security in cfg.securities:
            out.line(f"   - {security}")
        out.line()
        out.line("Generating market data and executing trades...")
        out.line()

        for day in range(cfg.days):
            date = today + dt.timedelta(days=day - cfg.days)
            out.line(f"Day {day + 1} - {date:%Y-%m-%d}")

            day_trades = 0
            for security in cfg.securities:
                prices = draw_day_prices(self.rng)
                if not should_trade(self.rng, cfg.trade_threshold):
                    continue

                trade = draw_trade(self.rng, day, security, prices.close)
                state.record(trade)
                trades.append(trade)
                day_trades += 1
                self._print_trade(trade)

            logger.debug("Day %d: %d trades", day + 1, day_trades)
            out.line()
            self.sleep(cfg.pause_seconds)

        stats = summary(state, self.rng)
        self._print_summary(stats)

        logger.debug(
            "Finished: trades=%d total_pnl=%.2f",
            state.trade_count,
            state.total_pnl,
        )

        return SimulationResult(
            trade_count=state.trade_count,
            total_pnl=state.total_pnl,
            average_pnl=stats["average_pnl"],
            win_rate=stats["win_rate"],
            sharpe_ratio=stats["sharpe_ratio"],
            days=cfg.days,
            trades=trades,
        )

    def _print_trade(self, trade: TradeEvent) -> None:
        out = self.writer
        out.write(f"   {trade.security:<6}", "security")
        out.write(f" | {trade.side:<4} {trade.quantity:>3} @ ")
        out.write(f"${trade.price:.2f}", "price")
        out.write(" | P&L: ")
        out.line(format_pnl(trade.pnl), "profit" if trade.pnl >= 0 else "loss")

    def _print_summary(self, stats: dict[str, float | int]) -> None:
        out = self.writer
        total = stats["total_pnl"]

        out.line(SUMMARY_RULE)
        out.line("                    TRADING SUMMARY")
        out.line(SUMMARY_RULE)
        out.line(f"Total Trades Executed: {stats['trade_count']}")
        out.write("Total P&L: ")
        out.line(format_pnl(total), "profit" if total >= 0 else "loss")
        out.line(f"Average P&L per Trade: ${stats['average_pnl']:.2f}")
        out.line(f"Win Rate: {stats['win_rate']}%")
        out.line(f"Sharpe Ratio: {stats['sharpe_ratio']:.2f}")
        out.line(SUMMARY_RULE)
