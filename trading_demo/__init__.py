"""Trading Demo Simulator

A small console demo that fabricates ten days of synthetic trades.
Uses NumPy for deterministic, reproducible draws and rich for colored output.
"""

__version__ = "0.1.0"
