"""Swap calculation result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from swapcalc.amm.errors import (
    InvalidAmountError,
    InvalidFeeError,
    NoLiquidityError,
    SwapError,
    UnknownTokenError,
)

if TYPE_CHECKING:
    from swapcalc.amm.pool import ReservePool


class SwapErrorKind(str, Enum):
    """Types of swap calculation errors."""

    INVALID_AMOUNT = "invalid_amount"
    UNKNOWN_TOKEN = "unknown_token"
    NO_LIQUIDITY = "no_liquidity"
    INVALID_FEE = "invalid_fee"

    @classmethod
    def from_error(cls, error: SwapError) -> SwapErrorKind:
        """Map a raised SwapError to its kind."""
        for error_type, kind in _ERROR_KINDS:
            if isinstance(error, error_type):
                return kind
        raise TypeError(f"Unmapped swap error: {type(error).__name__}")


_ERROR_KINDS: tuple[tuple[type[SwapError], SwapErrorKind], ...] = (
    (InvalidAmountError, SwapErrorKind.INVALID_AMOUNT),
    (UnknownTokenError, SwapErrorKind.UNKNOWN_TOKEN),
    (NoLiquidityError, SwapErrorKind.NO_LIQUIDITY),
    (InvalidFeeError, SwapErrorKind.INVALID_FEE),
)


@dataclass(frozen=True)
class SwapOutcome:
    """Result of applying a swap to a pool.

    Provides explicit success/failure handling so that bad caller input
    never escapes the engine as an exception.

    Attributes:
        amount_out: Amount of the output token released, or None on error.
        pool: Pool snapshot after the trade, or None on error.
        price_impact: Execution price shortfall against the spot price,
            fee included, or None on error.
        error: If the swap was rejected, the kind of error.
        error_detail: Optional diagnostic detail about the error.

    Examples:
        outcome = SwapOutcome.success(90.66, new_pool)
        assert outcome.is_valid

        outcome = SwapOutcome.with_error(SwapErrorKind.UNKNOWN_TOKEN)
        assert outcome.is_error
    """

    amount_out: float | None = None
    pool: ReservePool | None = None
    price_impact: float | None = None
    error: SwapErrorKind | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if the swap was computed."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the swap was rejected."""
        return self.error is not None

    @classmethod
    def success(
        cls, amount_out: float, pool: ReservePool, price_impact: float = 0.0
    ) -> SwapOutcome:
        """Create a successful result."""
        return cls(amount_out=amount_out, pool=pool, price_impact=price_impact)

    @classmethod
    def with_error(cls, error: SwapErrorKind, detail: str | None = None) -> SwapOutcome:
        """Create an error result."""
        return cls(error=error, error_detail=detail)

    @classmethod
    def from_exception(cls, exc: SwapError) -> SwapOutcome:
        """Create an error result from a raised SwapError."""
        return cls.with_error(SwapErrorKind.from_error(exc), str(exc))
