"""Constant-product AMM implementation."""

from swapcalc.amm.config import DEFAULT_ENGINE_CONFIG, EngineConfig, get_default_engine
from swapcalc.amm.constant_product import SwapEngine, price_impact, quote_swap
from swapcalc.amm.errors import (
    InvalidAmountError,
    InvalidFeeError,
    NoLiquidityError,
    SwapError,
    UnknownTokenError,
)
from swapcalc.amm.pool import ReservePool
from swapcalc.amm.result import SwapErrorKind, SwapOutcome

__all__ = [
    # Math
    "SwapEngine",
    "quote_swap",
    "price_impact",
    # Pool
    "ReservePool",
    # Results
    "SwapOutcome",
    "SwapErrorKind",
    # Errors
    "SwapError",
    "InvalidAmountError",
    "UnknownTokenError",
    "NoLiquidityError",
    "InvalidFeeError",
    # Config
    "EngineConfig",
    "DEFAULT_ENGINE_CONFIG",
    "get_default_engine",
]
