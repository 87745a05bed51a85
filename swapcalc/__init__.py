"""Constant-product AMM swap calculator."""

from swapcalc.amm import ReservePool, SwapEngine, SwapOutcome, quote_swap

__version__ = "0.1.0"
__all__ = ["ReservePool", "SwapEngine", "SwapOutcome", "quote_swap", "__version__"]
