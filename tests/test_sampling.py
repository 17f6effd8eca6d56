"""Tests for sampling module."""

import numpy as np
import pytest

from trading_demo.sampling import (
    draw_day_prices,
    draw_trade,
    make_rng,
    should_trade,
)


def test_make_rng_reproducible():
    """Test make_rng produces identical streams for the same seed."""
    rng1 = make_rng(42)
    rng2 = make_rng(42)

    assert np.array_equal(rng1.random(10), rng2.random(10))


def test_make_rng_default_seed():
    """Test make_rng without a seed still returns a Generator."""
    assert isinstance(make_rng(), np.random.Generator)


def test_draw_day_prices_ranges():
    """Test base, open and close prices stay within their jitter bounds."""
    rng = np.random.default_rng(42)

    for _ in range(500):
        prices = draw_day_prices(rng)
        assert 150.0 <= prices.base < 300.0
        assert prices.base == int(prices.base)
        assert -5.0 <= prices.open - prices.base < 5.0
        assert -10.0 <= prices.close - prices.open < 10.0


def test_draw_day_prices_draw_order():
    """Test draw_day_prices consumes one integer and two floats."""
    rng = np.random.default_rng(42)
    prices = draw_day_prices(rng)

    replay = np.random.default_rng(42)
    base = 100.0 + int(replay.integers(50, 200))
    open_price = base + replay.random() * 10 - 5
    close_price = open_price + replay.random() * 20 - 10

    assert prices.base == base
    assert prices.open == pytest.approx(open_price)
    assert prices.close == pytest.approx(close_price)


def test_should_trade_threshold_extremes():
    """Test should_trade never fires at threshold 1.0."""
    rng = np.random.default_rng(42)

    assert not any(should_trade(rng, 1.0) for _ in range(1000))


def test_should_trade_roughly_half():
    """Test should_trade fires about half of the time at 0.5."""
    rng = np.random.default_rng(42)
    fired = sum(should_trade(rng) for _ in range(10000))

    assert 4500 < fired < 5500


def test_draw_trade_ranges():
    """Test draw_trade side, quantity and P&L ranges."""
    rng = np.random.default_rng(42)

    for _ in range(500):
        trade = draw_trade(rng, 3, "TSLA", 123.45)
        assert trade.day == 3
        assert trade.security == "TSLA"
        assert trade.price == 123.45
        assert trade.side in ("BUY", "SELL")
        assert 10 <= trade.quantity < 100
        assert -500.0 <= trade.pnl < 500.0


def test_draw_trade_both_sides():
    """Test draw_trade produces both sides."""
    rng = np.random.default_rng(42)
    sides = {draw_trade(rng, 0, "AAPL", 100.0).side for _ in range(100)}

    assert sides == {"BUY", "SELL"}


def test_draw_trade_draw_order():
    """Test draw_trade consumes side, quantity then P&L draws."""
    rng = np.random.default_rng(42)
    trade = draw_trade(rng, 0, "AAPL", 100.0)

    replay = np.random.default_rng(42)
    side = "BUY" if replay.random() > 0.5 else "SELL"
    quantity = int(replay.integers(10, 100))
    pnl = replay.uniform(-500.0, 500.0)

    assert trade.side == side
    assert trade.quantity == quantity
    assert trade.pnl == pnl
