"""Metrics for Trading Demo Simulator.

Summary statistics printed at the end of a run. Win rate and Sharpe
ratio are placeholder draws and are not derived from the trades.
"""

from __future__ import annotations

import numpy as np

from trading_demo.models import SimulationState


def average_pnl(state: SimulationState) -> float:
    """Average P&L per trade, 0.0 when no trades were executed."""
    if state.trade_count == 0:
        return 0.0
    return state.total_pnl / state.trade_count


def draw_win_rate(rng: np.random.Generator) -> int:
    """Draw a win rate percentage in [45, 65)."""
    return int(rng.integers(45, 65))


def draw_sharpe_ratio(rng: np.random.Generator) -> float:
    """Draw a Sharpe ratio in [0, 2)."""
    return float(rng.random() * 2)


def summary(
    state: SimulationState, rng: np.random.Generator
) -> dict[str, float | int]:
    """Generate summary statistics for a finished run.

    Draws the win rate before the Sharpe ratio so output stays
    reproducible for a given seed.

    Args:
        state: Accumulated trade count and P&L
        rng: Random number generator used for the run

    Returns:
        Dictionary with summary statistics
    """
    return {
        "trade_count": state.trade_count,
        "total_pnl": float(state.total_pnl),
        "average_pnl": average_pnl(state),
        "win_rate": draw_win_rate(rng),
        "sharpe_ratio": draw_sharpe_ratio(rng),
    }
