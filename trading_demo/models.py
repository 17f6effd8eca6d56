"""Data models for Trading Demo Simulator.

Contains the security list, run configuration, accumulator state and
trade event structures with basic validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Side = Literal["BUY", "SELL"]

SECURITIES: tuple[str, ...] = ("AAPL", "MSFT", "GOOGL", "AMZN", "TSLA")


@dataclass(frozen=True)
class SimulationConfig:
    """Hard-coded constants of a demo run."""

    seed: int = 42
    days: int = 10
    securities: tuple[str, ...] = SECURITIES
    trade_threshold: float = 0.5
    pause_seconds: float = 0.1

    def __post_init__(self) -> None:
        """Validate run constants."""
        if self.days <= 0:
            raise ValueError(f"days must be positive, got {self.days}")
        if len(self.securities) == 0:
            raise ValueError("securities must not be empty")
        if not (0.0 <= self.trade_threshold <= 1.0):
            raise ValueError("trade_threshold must be in [0, 1]")
        if self.pause_seconds < 0:
            raise ValueError("pause_seconds must be non-negative")


@dataclass(frozen=True)
class DayPrices:
    """Base, open and close price of one security on one day."""

    base: float
    open: float
    close: float


@dataclass(frozen=True)
class TradeEvent:
    """A single simulated trade."""

    day: int
    security: str
    side: Side
    quantity: int
    price: float
    pnl: float


@dataclass
class SimulationState:
    """Running trade count and total P&L."""

    trade_count: int = 0
    total_pnl: float = 0.0

    def __post_init__(self) -> None:
        if self.trade_count < 0:
            raise ValueError(
                f"trade_count must be non-negative, got {self.trade_count}"
            )

    def record(self, trade: TradeEvent) -> None:
        """Accumulate one trade."""
        self.total_pnl += trade.pnl
        self.trade_count += 1


@dataclass
class SimulationResult:
    """Outcome of a run, returned alongside the printed report."""

    trade_count: int
    total_pnl: float
    average_pnl: float
    win_rate: int
    sharpe_ratio: float
    days: int
    trades: list[TradeEvent] = field(default_factory=list)
