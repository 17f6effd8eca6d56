"""Sampling utilities for Trading Demo Simulator.

Centralized, reproducible randomness. Every draw goes through an explicit
NumPy Generator so the whole run is fixed by its seed and draw order.
"""

from __future__ import annotations

import numpy as np

from trading_demo.models import DayPrices, Side, TradeEvent


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def draw_day_prices(rng: np.random.Generator) -> DayPrices:
    """Draw base, open and close prices for one security.

    Base is 100 plus an integer in [50, 200). Open jitters the base by
    [-5, 5) and close jitters the open by [-10, 10).

    Args:
        rng: Random number generator

    Returns:
        DayPrices for the security
    """
    base = 100.0 + int(rng.integers(50, 200))
    open_price = base + float(rng.uniform(-5.0, 5.0))
    close_price = open_price + float(rng.uniform(-10.0, 10.0))
    return DayPrices(base=base, open=open_price, close=close_price)


def should_trade(rng: np.random.Generator, threshold: float = 0.5) -> bool:
    """Coin flip: True when the draw exceeds threshold."""
    return float(rng.random()) > threshold


def draw_trade(
    rng: np.random.Generator, day: int, security: str, price: float
) -> TradeEvent:
    """Draw side, quantity and P&L of a trade at the given close price.

    Args:
        rng: Random number generator
        day: Zero-based day index
        security: Ticker symbol
        price: Close price the trade is reported at

    Returns:
        TradeEvent with quantity in [10, 100) and P&L in [-500, 500)
    """
    side: Side = "BUY" if float(rng.random()) > 0.5 else "SELL"
    quantity = int(rng.integers(10, 100))
    pnl = float(rng.uniform(-500.0, 500.0))
    return TradeEvent(
        day=day,
        security=security,
        side=side,
        quantity=quantity,
        price=price,
        pnl=pnl,
    )
