"""Constant-product AMM math.

The pool holds x * y = k across a trade, with a proportional fee taken
from the input amount before pricing. The fee is never paid out, so it
remains in the pool and the true product grows trade over trade.
"""

from __future__ import annotations

import math

import structlog

from swapcalc.amm.errors import (
    InvalidAmountError,
    InvalidFeeError,
    NoLiquidityError,
    SwapError,
)
from swapcalc.amm.pool import ReservePool
from swapcalc.amm.result import SwapOutcome
from swapcalc.constants import DEFAULT_FEE_RATE

logger = structlog.get_logger()


def validate_fee_rate(fee_rate: float) -> float:
    """Return fee_rate if it lies in [0, 1), else raise InvalidFeeError."""
    if not math.isfinite(fee_rate) or not 0 <= fee_rate < 1:
        raise InvalidFeeError(f"Fee rate must be in [0, 1), got {fee_rate}")
    return fee_rate


def quote_swap(
    reserve_in: float,
    reserve_out: float,
    amount_in: float,
    fee_rate: float = DEFAULT_FEE_RATE,
) -> float:
    """Calculate output amount using the constant product formula.

    Formula:
        effective_in = amount_in * (1 - fee_rate)
        amount_out = reserve_out - (reserve_in * reserve_out) / (reserve_in + effective_in)

    Args:
        reserve_in: Reserve of the token being sold (must be positive)
        reserve_out: Reserve of the token being bought (must be positive)
        amount_in: Input amount (must be non-negative)
        fee_rate: Fraction of the input kept by the pool, in [0, 1)

    Returns:
        Output amount, always in [0, reserve_out)

    Raises:
        InvalidFeeError: If fee_rate is outside [0, 1)
        NoLiquidityError: If either reserve is zero, negative or not finite
        InvalidAmountError: If amount_in is negative or not finite, or would
            push the input reserve past the float range
    """
    validate_fee_rate(fee_rate)

    if not (math.isfinite(reserve_in) and math.isfinite(reserve_out)):
        raise NoLiquidityError("Reserves must be finite")
    if reserve_in <= 0 or reserve_out <= 0:
        raise NoLiquidityError("One of the tokens has no liquidity")

    if not math.isfinite(amount_in):
        raise InvalidAmountError(f"Input amount must be finite, got {amount_in}")
    if amount_in < 0:
        raise InvalidAmountError(f"Input amount cannot be negative: {amount_in}")
    if amount_in == 0:
        return 0.0
    if not math.isfinite(reserve_in + amount_in):
        raise InvalidAmountError(f"Input amount overflows the input reserve: {amount_in}")

    effective_in = amount_in * (1 - fee_rate)
    k = reserve_in * reserve_out
    if math.isfinite(k) and k > 0:
        amount_out = reserve_out - k / (reserve_in + effective_in)
    else:
        # k over- or underflows; same quantity without forming the product
        amount_out = reserve_out * (effective_in / (reserve_in + effective_in))

    # Float rounding at the extremes must not break 0 <= out < reserve_out
    if amount_out < 0:
        return 0.0
    if amount_out >= reserve_out:
        return math.nextafter(reserve_out, 0.0)
    return amount_out


def price_impact(reserve_in: float, reserve_out: float, amount_in: float, amount_out: float) -> float:
    """Relative shortfall of the execution price against the spot price.

    Includes the fee. Zero for an empty trade.
    """
    if amount_in == 0:
        return 0.0
    spot = reserve_out / reserve_in
    if spot > 0 and math.isfinite(spot):
        execution = amount_out / amount_in
        return 1 - execution / spot
    # Spot price outside the float range; compare in log space
    if amount_out <= 0:
        return 1.0
    log_ratio = (
        math.log(amount_out) - math.log(amount_in) - math.log(reserve_out) + math.log(reserve_in)
    )
    return 1 - math.exp(log_ratio)


class SwapEngine:
    """Constant-product swap calculator with a fixed proportional fee.

    Stateless apart from the fee rate; every call works on the pool value
    it is given and returns a new one.
    """

    def __init__(self, fee_rate: float = DEFAULT_FEE_RATE) -> None:
        self.fee_rate = validate_fee_rate(fee_rate)

    def __repr__(self) -> str:
        return f"SwapEngine(fee_rate={self.fee_rate!r})"

    def quote_swap(self, reserve_in: float, reserve_out: float, amount_in: float) -> float:
        """quote_swap() at this engine's fee rate."""
        return quote_swap(reserve_in, reserve_out, amount_in, self.fee_rate)

    def apply_swap(self, pool: ReservePool, input_token: str, amount_in: float) -> SwapOutcome:
        """Sell amount_in of input_token into the pool.

        Args:
            pool: Pre-trade pool snapshot
            input_token: Symbol of the token being sold
            amount_in: Amount offered

        Returns:
            SwapOutcome with the output amount and the post-trade pool, or
            the error kind if the swap is rejected. The given pool is
            never modified.
        """
        try:
            reserve_in, reserve_out = pool.reserves_for(input_token)
            amount_out = self.quote_swap(reserve_in, reserve_out, amount_in)
            new_pool = pool.after_swap(input_token, amount_in, amount_out)
        except SwapError as e:
            logger.debug(
                "swap_rejected",
                input_token=input_token,
                amount_in=amount_in,
                error=type(e).__name__,
                detail=str(e),
            )
            return SwapOutcome.from_exception(e)

        logger.debug(
            "swap_applied",
            input_token=input_token,
            output_token=pool.token_out(input_token),
            amount_in=amount_in,
            amount_out=amount_out,
            fee_rate=self.fee_rate,
        )
        return SwapOutcome.success(
            amount_out,
            new_pool,
            price_impact=price_impact(reserve_in, reserve_out, amount_in, amount_out),
        )

    def swap(
        self,
        token_a: str,
        reserve_a: float,
        token_b: str,
        reserve_b: float,
        input_token: str,
        amount_in: float,
    ) -> SwapOutcome:
        """Build a pool from raw caller values and apply the swap.

        A negative or non-finite reserve is reported as NO_LIQUIDITY.

        Raises:
            ValueError: If the token symbols are empty or identical
        """
        try:
            pool = ReservePool(token_a, reserve_a, token_b, reserve_b)
        except SwapError as e:
            logger.debug("pool_rejected", token_a=token_a, token_b=token_b, detail=str(e))
            return SwapOutcome.from_exception(e)
        return self.apply_swap(pool, input_token, amount_in)


__all__ = [
    "SwapEngine",
    "quote_swap",
    "price_impact",
    "validate_fee_rate",
]
